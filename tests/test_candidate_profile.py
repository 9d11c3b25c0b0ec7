from __future__ import annotations

from datetime import date

from sqlalchemy.exc import OperationalError

from jobsai.api.routes import candidates as candidate_routes
from jobsai.database import SessionLocal
from jobsai.models.education_detail import EducationDetail
from jobsai.models.experience_detail import ExperienceDetail
from jobsai.models.job_seeker_profile import JobSeekerProfile
from jobsai.models.user import User
from jobsai.services.text_parsing import compute_age


def _seed_candidate(*, email: str = "asha@example.com", role: str = "jobSeeker", **profile_fields) -> int:
    with SessionLocal() as db:
        user = User(email=email, password="x", role=role)
        db.add(user)
        db.flush()
        profile = JobSeekerProfile(user_id=user.id, **profile_fields)
        db.add(profile)
        db.commit()
        return user.id


def _profile_id(user_id: int) -> int:
    with SessionLocal() as db:
        return db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == user_id).one().id


def test_candidate_without_dob_gets_default_age_and_dob(client) -> None:
    user_id = _seed_candidate(full_name="Vikram Singh")

    r = client.get(f"/api/candidates/{user_id}")
    assert r.status_code == 200
    body = r.json()
    assert body["age"] == 30
    assert body["dob"] == "1990-01-01"
    assert body["id"] == str(user_id)


def test_candidate_profile_is_reshaped(client) -> None:
    user_id = _seed_candidate(
        full_name="Asha Rao",
        current_designation="Backend Engineer",
        current_city="Bengaluru",
        skills='["Python", "SQL", ""]',
        preferred_locations="Pune, , Hyderabad",
        total_experience=4,
        present_salary="12.5 LPA",
        date_of_birth="1995-06-14",
    )
    profile_id = _profile_id(user_id)
    with SessionLocal() as db:
        db.add_all(
            [
                EducationDetail(
                    job_seeker_profile_id=profile_id,
                    qualification="B.Tech",
                    stream="CS",
                    institution="VTU",
                    year_of_completion=2017,
                ),
                EducationDetail(
                    job_seeker_profile_id=profile_id,
                    qualification="M.Tech",
                    stream="CS",
                    institution="IISc",
                    year_of_completion=2019,
                ),
                ExperienceDetail(
                    job_seeker_profile_id=profile_id,
                    company_name="DataWorks",
                    designation="Software Engineer",
                    start_date="2017-07-01",
                    end_date="2021-02-28",
                    is_present=0,
                    responsibilities="Built ETL pipelines",
                ),
                ExperienceDetail(
                    job_seeker_profile_id=profile_id,
                    company_name="Acme Cloud",
                    designation="Backend Engineer",
                    start_date="2021-03-01",
                    end_date="2022-01-01",
                    is_present=1,
                    responsibilities="Own billing APIs\n\nMentor interns",
                ),
            ]
        )
        db.commit()

    r = client.get(f"/api/candidates/{user_id}")
    assert r.status_code == 200
    body = r.json()

    assert body["name"] == "Asha Rao"
    assert body["skills"] == ["Python", "SQL"]
    assert body["preferredLocations"] == ["Pune", "Hyderabad"]
    assert body["salaryLPA"] == 12.5
    assert body["age"] == compute_age("1995-06-14", date.today())
    assert body["dob"] == "1995-06-14"
    assert body["qualifications"] == ["M.Tech", "B.Tech"]
    assert [e["year"] for e in body["education"]] == [2019, 2017]

    work = body["workExperience"]
    assert [w["company"] for w in work] == ["Acme Cloud", "DataWorks"]
    assert work[0]["endDate"] == "Present"
    assert work[0]["responsibilities"] == ["Own billing APIs", "Mentor interns"]
    assert work[1]["endDate"] == "2021-02-28"
    assert body["company"] == "Acme Cloud"


def test_candidate_missing_fields_use_placeholders(client) -> None:
    user_id = _seed_candidate()

    body = client.get(f"/api/candidates/{user_id}").json()
    assert body["name"] == "Unknown"
    assert body["designation"] == "Not specified"
    assert body["company"] == "Not specified"
    assert body["salaryLPA"] == 0
    assert body["skills"] == []
    assert body["phone"] == ""
    assert body["awards"] == [] and body["certifications"] == []
    assert body["profileImageUrl"].endswith("?text=U")


def test_unknown_candidate_returns_404(client) -> None:
    r = client.get("/api/candidates/9999")
    assert r.status_code == 404
    assert r.json() == {"error": "Candidate not found"}


def test_employer_is_not_a_candidate(client) -> None:
    user_id = _seed_candidate(email="boss@example.com", role="employer", full_name="Boss")
    r = client.get(f"/api/candidates/{user_id}")
    assert r.status_code == 404


def test_non_numeric_candidate_id_is_rejected(client) -> None:
    r = client.get("/api/candidates/abc")
    assert r.status_code == 400
    assert "error" in r.json()


def test_database_error_returns_generic_message(client, monkeypatch) -> None:
    def db_down(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(candidate_routes, "get_candidate_profile", db_down)

    r = client.get("/api/candidates/1")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch candidate details"}
