# __init__.py
from jobsai.models.education_detail import EducationDetail
from jobsai.models.experience_detail import ExperienceDetail
from jobsai.models.job import Job
from jobsai.models.job_seeker_profile import JobSeekerProfile
from jobsai.models.saved_search import SavedSearch
from jobsai.models.user import User
from jobsai.models.watchlist import CandidateWatchlistEntry

__all__ = [
	"CandidateWatchlistEntry",
	"EducationDetail",
	"ExperienceDetail",
	"Job",
	"JobSeekerProfile",
	"SavedSearch",
	"User",
]
