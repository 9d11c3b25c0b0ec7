# __init__.py
from jobsai.schemas.ai import (
	GenerateJobDescriptionInput,
	GenerateJobDescriptionOutput,
	RelevantJobRecommendationsInput,
	RelevantJobRecommendationsOutput,
	SuggestSkillsInput,
	SuggestSkillsOutput,
)
from jobsai.schemas.candidate import (
	CandidateProfile,
	CandidateSearchFilters,
	CandidateSearchResponse,
	EducationOut,
	WorkExperienceOut,
)
from jobsai.schemas.common import CamelModel, MessageResponse, SuccessResponse
from jobsai.schemas.posted_job import PostedJob, PostedJobFilters, PostedJobsResponse
from jobsai.schemas.saved_search import (
	SavedSearchCreate,
	SavedSearchCreateResponse,
	SavedSearchListResponse,
	SavedSearchOut,
)
from jobsai.schemas.watchlist import WatchlistAddRequest, WatchlistResponse

__all__ = [
	"CamelModel",
	"CandidateProfile",
	"CandidateSearchFilters",
	"CandidateSearchResponse",
	"EducationOut",
	"GenerateJobDescriptionInput",
	"GenerateJobDescriptionOutput",
	"MessageResponse",
	"PostedJob",
	"PostedJobFilters",
	"PostedJobsResponse",
	"RelevantJobRecommendationsInput",
	"RelevantJobRecommendationsOutput",
	"SavedSearchCreate",
	"SavedSearchCreateResponse",
	"SavedSearchListResponse",
	"SavedSearchOut",
	"SuccessResponse",
	"SuggestSkillsInput",
	"SuggestSkillsOutput",
	"WatchlistAddRequest",
	"WatchlistResponse",
	"WorkExperienceOut",
]
