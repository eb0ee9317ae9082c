from __future__ import annotations

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration

SEEKER_AUTH = {"Authorization": "Bearer seeker-token"}


def post_application(client: TestClient, **fields) -> str:
    response = client.post("/applications", json=fields)
    assert response.status_code == 200
    return response.json()["insertedId"]


def test_my_applications_are_filtered_by_applicant(client: TestClient) -> None:
    mine = post_application(client, jobId="job-1", applicant="seeker@example.com")
    post_application(client, jobId="job-1", applicant="other@example.com")

    response = client.get("/applications", params={"email": "seeker@example.com"}, headers=SEEKER_AUTH)

    assert response.status_code == 200
    assert [a["_id"] for a in response.json()] == [mine]


def test_my_applications_require_credential(client: TestClient) -> None:
    response = client.get("/applications", params={"email": "seeker@example.com"})

    assert response.status_code == 401
    assert "message" in response.json()


def test_my_applications_reject_email_mismatch(client: TestClient) -> None:
    response = client.get("/applications", params={"email": "other@example.com"}, headers=SEEKER_AUTH)

    assert response.status_code == 403
    assert response.json() == {"message": "forbidden access"}


def test_applications_by_job_are_open(client: TestClient) -> None:
    post_application(client, jobId="job-1", applicant="one@example.com")
    post_application(client, jobId="job-1", applicant="two@example.com")
    post_application(client, jobId="job-2", applicant="three@example.com")

    response = client.get("/applications/job/job-1")

    assert response.status_code == 200
    assert sorted(a["applicant"] for a in response.json()) == ["one@example.com", "two@example.com"]


def test_repeated_application_posts_get_distinct_ids(client: TestClient) -> None:
    body = {"jobId": "job-1", "applicant": "seeker@example.com"}

    assert post_application(client, **body) != post_application(client, **body)


def test_status_patch_changes_only_status(client: TestClient) -> None:
    application_id = post_application(
        client,
        jobId="job-1",
        applicant="seeker@example.com",
        status="pending",
        resume="https://example.com/cv.pdf",
    )

    response = client.patch(f"/applications/{application_id}", json={"status": "accepted"})

    assert response.status_code == 200
    assert response.json() == {
        "acknowledged": True,
        "matchedCount": 1,
        "modifiedCount": 1,
        "upsertedCount": 0,
        "upsertedId": None,
    }
    stored = client.get("/applications/job/job-1").json()
    assert stored == [
        {
            "_id": application_id,
            "jobId": "job-1",
            "applicant": "seeker@example.com",
            "status": "accepted",
            "resume": "https://example.com/cv.pdf",
        }
    ]


def test_status_patch_requires_status(client: TestClient) -> None:
    application_id = post_application(client, jobId="job-1")

    response = client.patch(f"/applications/{application_id}", json={})

    assert response.status_code == 422


def test_status_patch_on_unknown_id_matches_nothing(client: TestClient) -> None:
    response = client.patch(f"/applications/{ObjectId()}", json={"status": "rejected"})

    assert response.status_code == 200
    assert response.json()["matchedCount"] == 0


def test_status_patch_on_malformed_id_is_bad_request(client: TestClient) -> None:
    response = client.patch("/applications/123", json={"status": "rejected"})

    assert response.status_code == 400


def test_application_body_with_non_string_fields_is_stored_as_sent(client: TestClient) -> None:
    application_id = post_application(client, jobId=12345, applicant="seeker@example.com", score=9.5)

    stored = client.get("/applications", params={"email": "seeker@example.com"}, headers=SEEKER_AUTH).json()

    assert stored == [{"_id": application_id, "jobId": 12345, "applicant": "seeker@example.com", "score": 9.5}]


def test_status_patch_accepts_any_status_value(client: TestClient) -> None:
    application_id = post_application(client, jobId="job-1", status="pending")

    response = client.patch(f"/applications/{application_id}", json={"status": 3})

    assert response.status_code == 200
    assert response.json()["modifiedCount"] == 1
    assert client.get("/applications/job/job-1").json()[0]["status"] == 3
