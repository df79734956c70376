"""
Test suite for job-related endpoints and functionality.

Tests cover:
- Job creation and validation
- Job retrieval
- Partial updates
- Deletion (single and bulk)
- Error handling
"""

import pytest
from app.models.job import Job, JobStatus
from app.schemas.job import require_salary


JOBS_URL = "/api/v1/jobs"


class TestJobCreation:
    """Tests for job creation endpoint"""

    def test_create_job_success(self, client, sample_job_data):
        """Test successful job creation"""
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["title"] == "Engineer"
        assert data["salary_range"] == {"min": 50000, "max": 90000}
        assert data["location"] == "Remote"
        assert data["status"] == "open"
        assert data["created_at"]

    def test_create_job_is_persisted(self, client, db_session, sample_job_data):
        response = client.post(JOBS_URL, json=sample_job_data)

        job = db_session.query(Job).filter(Job.id == response.json()["id"]).first()
        assert job is not None
        assert job.salary_min == 50000
        assert job.salary_max == 90000
        assert job.status == JobStatus.OPEN

    def test_create_job_ignores_status_in_body(self, client, sample_job_data):
        """New jobs are always open"""
        response = client.post(JOBS_URL, json={**sample_job_data, "status": "closed"})

        assert response.status_code == 201
        assert response.json()["status"] == "open"

    def test_equal_min_and_max_accepted(self, client, sample_job_data):
        sample_job_data["salary_range"] = {"min": 70000, "max": 70000}
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 201
        assert response.json()["salary_range"] == {"min": 70000, "max": 70000}

    def test_zero_salary_accepted(self, client, sample_job_data):
        sample_job_data["salary_range"] = {"min": 0, "max": 0}
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 201

    def test_create_job_store_failure(self, client, sample_job_data, monkeypatch):
        """Unexpected store errors become a 500 with the cause attached"""
        def broken_create(db, job_data):
            raise RuntimeError("connection reset")

        monkeypatch.setattr("app.crud.job.create", broken_create)
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Sorry! Job is not created"
        assert body["error"] == "connection reset"


class TestJobValidation:
    """Tests for job data validation"""

    @pytest.mark.parametrize("missing", ["title", "description", "salary_range", "location"])
    def test_missing_required_field(self, client, sample_job_data, missing):
        del sample_job_data[missing]
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 400
        assert response.json()["message"] == f"{missing} is required"

    @pytest.mark.parametrize("salary_range", [{"min": 50000}, {"max": 90000}, {}])
    def test_salary_range_missing_bound(self, client, sample_job_data, salary_range):
        sample_job_data["salary_range"] = salary_range
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Salary range must include both min and max values"

    def test_missing_field_reported_before_wrong_type(self, client):
        """Presence is checked for every field before any type check"""
        response = client.post(JOBS_URL, json={
            "title": 42,
            "description": "Build things",
            "location": "Remote"
        })

        assert response.status_code == 400
        assert response.json()["message"] == "salary_range is required"

    def test_missing_salary_bound_reported_before_wrong_type(self, client, sample_job_data):
        sample_job_data["title"] = 42
        sample_job_data["salary_range"] = {"min": "lots"}
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Salary range must include both min and max values"

    def test_wrong_type_reported_when_nothing_missing(self, client, sample_job_data):
        sample_job_data["title"] = 42
        sample_job_data["salary_range"] = {"min": 90000, "max": 50000}
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Title must be a string"

    @pytest.mark.parametrize("min_token, max_token", [
        ("NaN", "5"),
        ("0", "Infinity"),
        ("-Infinity", "10"),
    ])
    def test_non_finite_salary_rejected(self, client, db_session, min_token, max_token):
        # Non-standard JSON tokens, sent raw since the client refuses to encode them
        body = (
            '{"title": "Engineer", "description": "Build things", "location": "Remote", '
            f'"salary_range": {{"min": {min_token}, "max": {max_token}}}}}'
        )
        response = client.post(JOBS_URL, content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json()["message"] == "Salary range values must be finite numbers"
        assert db_session.query(Job).count() == 0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_require_salary_rejects_non_finite(self, value):
        with pytest.raises(ValueError, match="finite"):
            require_salary(value)

    def test_title_must_be_string(self, client, sample_job_data):
        sample_job_data["title"] = 42
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Title must be a string"

    def test_location_must_be_string(self, client, sample_job_data):
        sample_job_data["location"] = ["Remote"]
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Location must be a string"

    def test_empty_title_rejected(self, client, sample_job_data):
        sample_job_data["title"] = ""
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Title cannot be empty"

    @pytest.mark.parametrize("value", ["50000", True, None])
    def test_salary_must_be_number(self, client, sample_job_data, value):
        sample_job_data["salary_range"]["min"] = value
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Salary range values must be numbers"

    def test_negative_salary_rejected(self, client, sample_job_data):
        sample_job_data["salary_range"] = {"min": -1, "max": 90000}
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Salary range values cannot be negative"

    def test_min_greater_than_max_rejected(self, client, sample_job_data):
        sample_job_data["salary_range"] = {"min": 90000, "max": 50000}
        response = client.post(JOBS_URL, json=sample_job_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Minimum salary must be less than maximum salary"

    def test_invalid_job_creates_nothing(self, client, db_session, sample_job_data):
        sample_job_data["salary_range"] = {"min": 90000, "max": 50000}
        client.post(JOBS_URL, json=sample_job_data)

        assert db_session.query(Job).count() == 0


class TestJobRetrieval:
    """Tests for job retrieval endpoints"""

    def test_get_job_by_id(self, client, sample_job_data):
        """Test retrieving a job by ID"""
        job_id = client.post(JOBS_URL, json=sample_job_data).json()["id"]

        response = client.get(f"{JOBS_URL}/{job_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == job_id
        assert data["title"] == sample_job_data["title"]

    def test_get_nonexistent_job(self, client):
        """Test retrieving a job that doesn't exist"""
        response = client.get(f"{JOBS_URL}/99999")

        assert response.status_code == 404
        assert response.json()["message"] == "Job not found"

    def test_get_job_with_non_integer_id(self, client):
        response = client.get(f"{JOBS_URL}/not-a-number")

        assert response.status_code == 400

    def test_list_jobs(self, client, sample_job_data):
        """Test listing all jobs"""
        for i in range(3):
            job_data = {**sample_job_data, "title": f"Job {i}"}
            client.post(JOBS_URL, json=job_data)

        response = client.get(JOBS_URL)

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data, list)
        assert [job["title"] for job in data] == ["Job 0", "Job 1", "Job 2"]

    def test_list_jobs_empty(self, client):
        response = client.get(JOBS_URL)

        assert response.status_code == 200
        assert response.json() == []

    def test_list_jobs_store_failure(self, client, monkeypatch):
        def broken_get_all(db):
            raise RuntimeError("timeout")

        monkeypatch.setattr("app.crud.job.get_all", broken_get_all)
        response = client.get(JOBS_URL)

        assert response.status_code == 500
        assert response.json()["error"] == "timeout"


class TestJobUpdate:
    """Tests for partial job updates"""

    def test_update_single_field(self, client, sample_job_data):
        job_id = client.post(JOBS_URL, json=sample_job_data).json()["id"]

        response = client.put(f"{JOBS_URL}/{job_id}", json={"title": "Senior Engineer"})

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Senior Engineer"
        # Untouched fields are kept
        assert data["description"] == "Build things"
        assert data["salary_range"] == {"min": 50000, "max": 90000}
        assert data["location"] == "Remote"

    def test_patch_salary_range(self, client, sample_job_data):
        job_id = client.post(JOBS_URL, json=sample_job_data).json()["id"]

        response = client.patch(f"{JOBS_URL}/{job_id}", json={"salary_range": {"min": 80000, "max": 120000}})

        assert response.status_code == 200
        assert response.json()["salary_range"] == {"min": 80000, "max": 120000}
        assert client.get(f"{JOBS_URL}/{job_id}").json()["salary_range"]["max"] == 120000

    def test_update_sets_updated_at(self, client, sample_job_data):
        job_id = client.post(JOBS_URL, json=sample_job_data).json()["id"]

        response = client.put(f"{JOBS_URL}/{job_id}", json={"location": "Berlin"})

        assert response.json()["updated_at"] is not None

    def test_update_nonexistent_job(self, client):
        response = client.put(f"{JOBS_URL}/99999", json={"title": "Anything"})

        assert response.status_code == 404
        assert response.json()["message"] == "Job not found"

    def test_update_rejects_partial_salary_range(self, client, sample_job_data):
        job_id = client.post(JOBS_URL, json=sample_job_data).json()["id"]

        response = client.put(f"{JOBS_URL}/{job_id}", json={"salary_range": {"min": 10}})

        assert response.status_code == 400

    def test_update_rejects_inverted_salary_range(self, client, db_session, sample_job_data):
        job_id = client.post(JOBS_URL, json=sample_job_data).json()["id"]

        response = client.put(f"{JOBS_URL}/{job_id}", json={"salary_range": {"min": 10, "max": 5}})

        assert response.status_code == 400
        assert response.json()["message"] == "Minimum salary must be less than maximum salary"
        assert db_session.query(Job).filter(Job.id == job_id).first().salary_min == 50000

    def test_update_rejects_wrong_type(self, client, sample_job_data):
        job_id = client.post(JOBS_URL, json=sample_job_data).json()["id"]

        response = client.put(f"{JOBS_URL}/{job_id}", json={"description": 123})

        assert response.status_code == 400
        assert response.json()["message"] == "Description must be a string"

    def test_update_rejects_explicit_null(self, client, sample_job_data):
        job_id = client.post(JOBS_URL, json=sample_job_data).json()["id"]

        response = client.put(f"{JOBS_URL}/{job_id}", json={"title": None})

        assert response.status_code == 400

    def test_update_cannot_change_status(self, client, sample_job_data):
        job_id = client.post(JOBS_URL, json=sample_job_data).json()["id"]

        response = client.put(f"{JOBS_URL}/{job_id}", json={"status": "closed"})

        assert response.status_code == 200
        assert response.json()["status"] == "open"


class TestJobDeletion:
    """Tests for job deletion"""

    def test_delete_job(self, client, sample_job_data):
        """Test deleting a job"""
        job_id = client.post(JOBS_URL, json=sample_job_data).json()["id"]

        response = client.delete(f"{JOBS_URL}/{job_id}")
        assert response.status_code == 200
        assert response.json()["message"] == "Job deleted successfully"

        # Verify it's gone
        get_response = client.get(f"{JOBS_URL}/{job_id}")
        assert get_response.status_code == 404

    def test_delete_nonexistent_job(self, client):
        """Test deleting a job that doesn't exist"""
        response = client.delete(f"{JOBS_URL}/99999")
        assert response.status_code == 404

    def test_delete_all_jobs(self, client, sample_job_data):
        for i in range(3):
            client.post(JOBS_URL, json={**sample_job_data, "title": f"Job {i}"})

        response = client.delete(JOBS_URL)

        assert response.status_code == 200
        assert response.json() == {"message": "All jobs deleted successfully", "deletedCount": 3}
        assert client.get(JOBS_URL).json() == []

    def test_delete_all_jobs_when_empty(self, client):
        response = client.delete(JOBS_URL)

        assert response.status_code == 200
        assert response.json()["deletedCount"] == 0
