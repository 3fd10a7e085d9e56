"""
Tests for enrollment endpoints
"""

import pytest
from fastapi import status


class TestCreateEnrollment:
    """Tests for POST /enrollments"""

    def test_enroll(self, client, reset_store):
        response = client.post(
            "/enrollments",
            json={"student_id": "user_123", "course_id": "course_2", "tutor_id": "tutor_2"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["message"] == "Enrollment created successfully"
        assert data["enrollment"]["id"].startswith("enrollment_")
        assert data["enrollment"]["student_id"] == "user_123"
        assert data["enrollment"]["course_id"] == "course_2"
        assert data["enrollment"]["tutor_id"] == "tutor_2"
        assert reset_store.enrollments.count() == 3

    def test_tutor_is_optional(self, client):
        response = client.post("/enrollments", json={"student_id": "user_456", "course_id": "course_1"})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["enrollment"]["tutor_id"] is None

    def test_enrolling_twice_conflicts(self, client, reset_store):
        payload = {"student_id": "user_789", "course_id": "course_1"}

        first = client.post("/enrollments", json=payload)
        second = client.post("/enrollments", json=payload)

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_409_CONFLICT
        assert second.json() == {"error": "Student is already enrolled in this course"}
        assert reset_store.enrollments.count() == 3

    def test_seeded_pair_conflicts(self, client, reset_store):
        response = client.post("/enrollments", json={"student_id": "user_123", "course_id": "course_1"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert reset_store.enrollments.count() == 2

    @pytest.mark.parametrize("payload", [
        {"student_id": "user_123"},
        {"course_id": "course_1"},
        {"student_id": "", "course_id": "course_1"},
        {},
    ])
    def test_missing_ids(self, client, payload):
        response = client.post("/enrollments", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "student_id and course_id are required"}

    def test_references_are_not_checked(self, client):
        response = client.post("/enrollments", json={"student_id": "ghost", "course_id": "no_course"})
        assert response.status_code == status.HTTP_201_CREATED

    def test_generated_ids_are_unique(self, client):
        first = client.post("/enrollments", json={"student_id": "s1", "course_id": "course_1"})
        second = client.post("/enrollments", json={"student_id": "s2", "course_id": "course_1"})

        assert first.json()["enrollment"]["id"] != second.json()["enrollment"]["id"]


class TestEnrollmentQueries:
    """Tests for the read endpoints"""

    def test_student_enrollments(self, client):
        response = client.get("/enrollments/student/user_123")

        data = response.json()
        assert response.status_code == status.HTTP_200_OK
        assert data["student_id"] == "user_123"
        assert data["total"] == 1
        assert [e["id"] for e in data["enrollments"]] == ["enrollment_1"]
        assert "course" not in data["enrollments"][0]

    def test_student_enrollments_with_courses(self, client):
        data = client.get("/enrollments/student/user_123", params={"include_courses": "true"}).json()

        course = data["enrollments"][0]["course"]
        assert course == {
            "id": "course_1",
            "title": "Introduction to Web Development",
            "thumbnail": "/placeholder.jpg",
            "instructor": "Dr. Sarah Johnson",
            "category": "Programming",
            "level": "Beginner",
        }

    def test_unknown_course_is_null_when_included(self, client):
        client.post("/enrollments", json={"student_id": "user_123", "course_id": "retired"})

        data = client.get("/enrollments/student/user_123", params={"include_courses": "true"}).json()

        assert data["total"] == 2
        assert data["enrollments"][1]["course"] is None

    def test_course_enrollments_with_students(self, client):
        data = client.get("/enrollments/course/course_2", params={"include_students": "true"}).json()

        assert data["course_id"] == "course_2"
        assert data["total"] == 1
        assert data["enrollments"][0]["student"] == {
            "id": "user_456",
            "First_name": "Jane",
            "Last_name": "Smith",
            "email": "jane.smith@example.com",
            "display_name": "Jane Smith",
        }

    def test_course_enrollment_count(self, client):
        client.post("/enrollments", json={"student_id": "user_456", "course_id": "course_1"})

        response = client.get("/enrollments/course/course_1/count")
        assert response.json() == {"course_id": "course_1", "enrollment_count": 2}

    def test_check_enrolled(self, client):
        data = client.get("/enrollments/check", params={"student_id": "user_123", "course_id": "course_1"}).json()

        assert data["is_enrolled"] is True
        assert data["enrollment"]["id"] == "enrollment_1"

    def test_check_not_enrolled(self, client):
        data = client.get("/enrollments/check", params={"student_id": "user_123", "course_id": "course_2"}).json()

        assert data["is_enrolled"] is False
        assert data["enrollment"] is None
        assert data["student_id"] == "user_123"
        assert data["course_id"] == "course_2"

    def test_check_requires_both_ids(self, client):
        response = client.get("/enrollments/check", params={"student_id": "user_123"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_enrollment_detail(self, client):
        response = client.get("/enrollments/enrollment_1")

        data = response.json()
        assert response.status_code == status.HTTP_200_OK
        assert data["enrollment"]["id"] == "enrollment_1"
        assert data["student"] == {
            "id": "user_123",
            "First_name": "John",
            "Last_name": "Doe",
            "email": "john.doe@example.com",
        }
        assert data["course"] == {
            "id": "course_1",
            "title": "Introduction to Web Development",
            "instructor": "Dr. Sarah Johnson",
        }

    def test_enrollment_detail_not_found(self, client):
        response = client.get("/enrollments/enrollment_404")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Enrollment not found"}

    def test_stats(self, client, reset_store):
        client.post("/enrollments", json={"student_id": "user_123", "course_id": "course_2"})

        response = client.get("/enrollments/stats")

        data = response.json()
        assert response.status_code == status.HTTP_200_OK
        assert data["total_enrollments"] == 3
        assert data["unique_students"] == 2
        assert data["unique_courses"] == 2
        assert data["recent_enrollments"][0]["student_id"] == "user_123"
        assert data["recent_enrollments"][0]["course_id"] == "course_2"
        assert [e["id"] for e in data["recent_enrollments"][1:]] == ["enrollment_2", "enrollment_1"]

    def test_stats_does_not_reorder_store(self, client, reset_store):
        client.get("/enrollments/stats")
        assert [e["id"] for e in reset_store.enrollments.list()] == ["enrollment_1", "enrollment_2"]


class TestRemoveEnrollment:
    """Tests for DELETE /enrollments/{id} and unenroll"""

    def test_delete(self, client, reset_store):
        response = client.delete("/enrollments/enrollment_1")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "message": "Enrollment removed successfully",
            "enrollment_id": "enrollment_1",
        }
        assert reset_store.enrollments.get("enrollment_1") is None
        assert reset_store.enrollments.count() == 1

    def test_delete_missing_leaves_store_unchanged(self, client, reset_store):
        response = client.delete("/enrollments/enrollment_404")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert reset_store.enrollments.count() == 2

    def test_unenroll(self, client, reset_store):
        response = client.post("/enrollments/student/user_456/unenroll", json={"course_id": "course_2"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "message": "Unenrolled successfully",
            "student_id": "user_456",
            "course_id": "course_2",
        }
        assert reset_store.enrollments.count() == 1

    def test_unenroll_requires_course(self, client):
        response = client.post("/enrollments/student/user_456/unenroll", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "course_id is required"}

    def test_unenroll_unknown_pair(self, client, reset_store):
        response = client.post("/enrollments/student/user_456/unenroll", json={"course_id": "course_1"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Enrollment not found for this student and course"}
        assert reset_store.enrollments.count() == 2

    def test_reenroll_after_unenroll(self, client):
        client.post("/enrollments/student/user_456/unenroll", json={"course_id": "course_2"})

        response = client.post("/enrollments", json={"student_id": "user_456", "course_id": "course_2"})
        assert response.status_code == status.HTTP_201_CREATED
