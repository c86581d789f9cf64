"""
Test suite for job endpoints.

Tests cover:
- Job creation (admin only)
- Job retrieval and filtering
- Partial updates
- Deletion
- Error translation (400 / 401 / 404 / 500)
"""

from fastapi.testclient import TestClient

from main import app

JOBS_URL = "/api/v1/jobs"


class TestJobCreation:
    """Tests for POST /jobs"""

    new_job = {
        "title": "New Job 1",
        "salary": 90000,
        "equity": 0.04,
        "companyHandle": "c1",
    }

    def test_create_job_as_admin(self, client, admin_headers):
        response = client.post(JOBS_URL, json=self.new_job, headers=admin_headers)

        assert response.status_code == 201
        job = response.json()["job"]
        assert isinstance(job["id"], int)
        assert job == {
            "id": job["id"],
            "title": "New Job 1",
            "salary": 90000,
            "equity": "0.04",
            "companyHandle": "c1",
        }

        # Equity stays a string on the way back out
        get_response = client.get(f"{JOBS_URL}/{job['id']}")
        assert get_response.json()["job"]["equity"] == "0.04"

    def test_create_job_not_admin(self, client, user_headers):
        response = client.post(JOBS_URL, json=self.new_job, headers=user_headers)
        assert response.status_code == 401

    def test_create_job_anonymous(self, client):
        response = client.post(JOBS_URL, json=self.new_job)
        assert response.status_code == 401

    def test_create_job_missing_fields(self, client, admin_headers):
        response = client.post(JOBS_URL, json={"title": "Incomplete Job", "salary": 100000}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"]["status"] == 400

    def test_create_job_unknown_field(self, client, admin_headers):
        response = client.post(JOBS_URL, json={**self.new_job, "random": "x"}, headers=admin_headers)
        assert response.status_code == 400

    def test_create_job_equity_out_of_range(self, client, admin_headers):
        response = client.post(JOBS_URL, json={**self.new_job, "equity": 1.5}, headers=admin_headers)
        assert response.status_code == 400

    def test_create_job_negative_salary(self, client, admin_headers):
        response = client.post(JOBS_URL, json={**self.new_job, "salary": -1}, headers=admin_headers)
        assert response.status_code == 400

    def test_create_job_unknown_company_is_server_error(self, client, admin_headers):
        """No company check before insert: the foreign key failure surfaces as 500"""
        with TestClient(app, raise_server_exceptions=False) as raw_client:
            response = raw_client.post(
                JOBS_URL,
                json={**self.new_job, "companyHandle": "nope"},
                headers=admin_headers
            )

        assert response.status_code == 500
        assert response.json()["error"]["message"] == "Internal Server Error"


class TestJobRetrieval:
    """Tests for GET /jobs and GET /jobs/{id}"""

    def test_list_jobs(self, client):
        response = client.get(JOBS_URL)

        assert response.status_code == 200
        jobs = response.json()["jobs"]
        assert [(j["title"], j["equity"], j["companyHandle"]) for j in jobs] == [
            ("title1", "0", "c1"),
            ("title2", "0.04", "c1"),
            ("title3", "0.06", "c2"),
        ]

    def test_filter_by_title(self, client):
        response = client.get(JOBS_URL, params={"title": "title1"})

        jobs = response.json()["jobs"]
        assert len(jobs) == 1
        assert jobs[0]["title"] == "title1"

    def test_filter_by_min_salary(self, client):
        response = client.get(JOBS_URL, params={"minSalary": 60000})

        assert [j["title"] for j in response.json()["jobs"]] == ["title2", "title3"]

    def test_filter_has_equity(self, client):
        response = client.get(JOBS_URL, params={"hasEquity": "true"})

        assert [j["title"] for j in response.json()["jobs"]] == ["title2", "title3"]

    def test_filter_has_equity_false(self, client):
        response = client.get(JOBS_URL, params={"hasEquity": "false"})

        assert len(response.json()["jobs"]) == 3

    def test_combined_filters(self, client):
        response = client.get(JOBS_URL, params={"minSalary": 65000, "hasEquity": "true", "title": "TITLE"})

        assert [j["title"] for j in response.json()["jobs"]] == ["title3"]

    def test_unknown_filter_rejected(self, client):
        response = client.get(JOBS_URL, params={"nope": "x"})

        assert response.status_code == 400

    def test_bad_filter_value_rejected(self, client):
        response = client.get(JOBS_URL, params={"minSalary": "lots"})

        assert response.status_code == 400

    def test_get_job_by_id(self, client, job_ids):
        response = client.get(f"{JOBS_URL}/{job_ids['title2']}")

        assert response.status_code == 200
        assert response.json() == {
            "job": {
                "id": job_ids["title2"],
                "title": "title2",
                "salary": 60000,
                "equity": "0.04",
                "companyHandle": "c1",
            }
        }

    def test_get_nonexistent_job(self, client):
        response = client.get(f"{JOBS_URL}/99999")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "No job: 99999", "status": 404}}


class TestJobUpdate:
    """Tests for PATCH /jobs/{id}"""

    def test_update_job(self, client, admin_headers, job_ids):
        response = client.patch(
            f"{JOBS_URL}/{job_ids['title1']}",
            json={"title": "J-New", "equity": "0.5"},
            headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["job"] == {
            "id": job_ids["title1"],
            "title": "J-New",
            "salary": 50000,
            "equity": "0.5",
            "companyHandle": "c1",
        }

    def test_update_clears_nullable_fields(self, client, admin_headers, job_ids):
        response = client.patch(
            f"{JOBS_URL}/{job_ids['title2']}",
            json={"salary": None, "equity": None},
            headers=admin_headers
        )

        job = response.json()["job"]
        assert job["salary"] is None
        assert job["equity"] is None

    def test_update_not_admin(self, client, user_headers, job_ids):
        response = client.patch(f"{JOBS_URL}/{job_ids['title1']}", json={"title": "x"}, headers=user_headers)
        assert response.status_code == 401

    def test_update_nonexistent_job(self, client, admin_headers):
        response = client.patch(f"{JOBS_URL}/99999", json={"title": "x"}, headers=admin_headers)
        assert response.status_code == 404

    def test_update_empty_body(self, client, admin_headers, job_ids):
        response = client.patch(f"{JOBS_URL}/{job_ids['title1']}", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "No data"

    def test_update_company_handle_rejected(self, client, admin_headers, job_ids):
        response = client.patch(
            f"{JOBS_URL}/{job_ids['title1']}",
            json={"companyHandle": "c2"},
            headers=admin_headers
        )
        assert response.status_code == 400

    def test_update_null_title_rejected(self, client, admin_headers, job_ids):
        response = client.patch(f"{JOBS_URL}/{job_ids['title1']}", json={"title": None}, headers=admin_headers)
        assert response.status_code == 400


class TestJobDeletion:
    """Tests for DELETE /jobs/{id}"""

    def test_delete_job(self, client, admin_headers, job_ids):
        job_id = job_ids["title1"]
        response = client.delete(f"{JOBS_URL}/{job_id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": job_id}

        get_response = client.get(f"{JOBS_URL}/{job_id}")
        assert get_response.status_code == 404

    def test_delete_not_admin(self, client, user_headers, job_ids):
        response = client.delete(f"{JOBS_URL}/{job_ids['title1']}", headers=user_headers)
        assert response.status_code == 401

    def test_delete_nonexistent_job(self, client, admin_headers):
        response = client.delete(f"{JOBS_URL}/99999", headers=admin_headers)

        assert response.status_code == 404
        assert len(client.get(JOBS_URL).json()["jobs"]) == 3
