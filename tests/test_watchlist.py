from __future__ import annotations

from jobsai.database import SessionLocal
from jobsai.models.job_seeker_profile import JobSeekerProfile
from jobsai.models.user import User


def _seed() -> tuple[int, int, int]:
    with SessionLocal() as db:
        employer = User(email="hiring@example.com", password="x", role="employer")
        asha = User(email="asha@example.com", password="x", role="jobSeeker")
        vikram = User(email="vikram@example.com", password="x", role="jobSeeker")
        db.add_all([employer, asha, vikram])
        db.flush()
        db.add(JobSeekerProfile(user_id=asha.id, full_name="Asha Rao", skills="Python, SQL"))
        db.add(JobSeekerProfile(user_id=vikram.id, full_name="Vikram Singh"))
        db.commit()
        return employer.id, asha.id, vikram.id


def test_add_list_and_remove(client) -> None:
    employer_id, asha_id, vikram_id = _seed()

    for candidate_id in (asha_id, vikram_id):
        r = client.post("/api/watchlist", json={"employerUserId": employer_id, "candidateId": candidate_id})
        assert r.status_code == 200
        assert r.json() == {"success": True, "message": "Candidate added to watchlist"}

    body = client.get("/api/watchlist", params={"employerUserId": employer_id}).json()
    assert [c["name"] for c in body["candidates"]] == ["Vikram Singh", "Asha Rao"]
    assert body["candidates"][1]["skills"] == ["Python", "SQL"]

    r = client.delete("/api/watchlist", params={"employerUserId": employer_id, "candidateId": asha_id})
    assert r.status_code == 200
    assert r.json()["message"] == "Candidate removed from watchlist"

    body = client.get("/api/watchlist", params={"employerUserId": employer_id}).json()
    assert [c["id"] for c in body["candidates"]] == [str(vikram_id)]


def test_duplicate_add_conflicts(client) -> None:
    employer_id, asha_id, _ = _seed()
    payload = {"employerUserId": employer_id, "candidateId": asha_id}
    assert client.post("/api/watchlist", json=payload).status_code == 200

    r = client.post("/api/watchlist", json=payload)
    assert r.status_code == 409
    assert r.json() == {"error": "Candidate already in watchlist"}


def test_missing_parameters_are_rejected(client) -> None:
    assert client.get("/api/watchlist").status_code == 400
    assert client.post("/api/watchlist", json={"employerUserId": 1}).status_code == 400
    r = client.delete("/api/watchlist", params={"employerUserId": 1})
    assert r.status_code == 400
    assert r.json() == {"error": "Employer user ID and candidate ID are required"}
