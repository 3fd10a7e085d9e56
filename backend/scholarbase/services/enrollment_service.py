"""
Enrollment Service
Creates, looks up and removes the links between students and courses
"""
import logging
from uuid import uuid4
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List

from scholarbase.core.store import Record, Repository, store
from scholarbase.utils.exceptions import BadRequestError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)

RECENT_ENROLLMENTS_LIMIT = 10

COURSE_SUMMARY_FIELDS = ("id", "title", "thumbnail", "instructor", "category", "level")
COURSE_DETAIL_FIELDS = ("id", "title", "instructor")
STUDENT_SUMMARY_FIELDS = ("id", "first_name", "last_name", "email", "display_name")


def pick(record: Optional[Record], fields) -> Optional[Record]:
    """Project ``record`` onto ``fields``; None stays None"""
    if record is None:
        return None
    return {field: record.get(field) for field in fields}


class EnrollmentService:
    """
    Service for managing course enrollments
    """

    def __init__(self, enrollments: Repository, courses: Repository, students: Repository):
        self.enrollments = enrollments
        self.courses = courses
        self.students = students

    def _find_pair(self, student_id: str, course_id: str) -> Optional[Record]:
        return self.enrollments.find_one(
            lambda e: e["student_id"] == student_id and e["course_id"] == course_id
        )

    # ============ Mutations ============

    def enroll(
        self,
        student_id: Optional[str],
        course_id: Optional[str],
        tutor_id: Optional[str] = None
    ) -> Record:
        """
        Enroll a student in a course

        Neither the student nor the course has to exist; only the
        (student, course) pair must be new.

        Raises:
            BadRequestError: student_id or course_id missing
            ConflictError: the pair is already enrolled
        """
        if not student_id or not course_id:
            raise BadRequestError("student_id and course_id are required")

        if self._find_pair(student_id, course_id):
            logger.warning(f"Duplicate enrollment rejected for student {student_id}, course {course_id}")
            raise ConflictError("Student is already enrolled in this course")

        enrollment = {
            "id": f"enrollment_{uuid4().hex[:12]}",
            "created_at": datetime.now(timezone.utc),
            "student_id": student_id,
            "course_id": course_id,
            "tutor_id": tutor_id or None
        }
        self.enrollments.insert(enrollment)

        logger.info(f"Enrollment {enrollment['id']} created for student {student_id}, course {course_id}")
        return enrollment

    def remove(self, enrollment_id: str) -> Record:
        removed = self.enrollments.delete(enrollment_id)
        if not removed:
            raise NotFoundError("Enrollment not found")

        logger.info(f"Enrollment {enrollment_id} removed")
        return removed

    def unenroll(self, student_id: str, course_id: Optional[str]) -> Record:
        if not course_id:
            raise BadRequestError("course_id is required")

        removed = self.enrollments.delete_one(
            lambda e: e["student_id"] == student_id and e["course_id"] == course_id
        )
        if not removed:
            raise NotFoundError("Enrollment not found for this student and course")

        logger.info(f"Student {student_id} unenrolled from course {course_id}")
        return removed

    # ============ Queries ============

    def for_student(self, student_id: str, include_courses: bool = False) -> List[Record]:
        enrollments = self.enrollments.find(lambda e: e["student_id"] == student_id)
        if include_courses:
            for enrollment in enrollments:
                enrollment["course"] = pick(self.courses.get(enrollment["course_id"]), COURSE_SUMMARY_FIELDS)
        return enrollments

    def for_course(self, course_id: str, include_students: bool = False) -> List[Record]:
        enrollments = self.enrollments.find(lambda e: e["course_id"] == course_id)
        if include_students:
            for enrollment in enrollments:
                enrollment["student"] = pick(self.students.get(enrollment["student_id"]), STUDENT_SUMMARY_FIELDS)
        return enrollments

    def count_for_course(self, course_id: str) -> int:
        return self.enrollments.count(lambda e: e["course_id"] == course_id)

    def check(self, student_id: Optional[str], course_id: Optional[str]) -> Optional[Record]:
        if not student_id or not course_id:
            raise BadRequestError("student_id and course_id are required")
        return self._find_pair(student_id, course_id)

    def get_detail(self, enrollment_id: str) -> Dict[str, Any]:
        enrollment = self.enrollments.get(enrollment_id)
        if not enrollment:
            raise NotFoundError("Enrollment not found")

        return {
            "enrollment": enrollment,
            "student": pick(self.students.get(enrollment["student_id"]), STUDENT_SUMMARY_FIELDS[:4]),
            "course": pick(self.courses.get(enrollment["course_id"]), COURSE_DETAIL_FIELDS)
        }

    def stats(self) -> Dict[str, Any]:
        enrollments = self.enrollments.list()
        recent = sorted(enrollments, key=lambda e: e["created_at"], reverse=True)

        return {
            "total_enrollments": len(enrollments),
            "unique_students": len({e["student_id"] for e in enrollments}),
            "unique_courses": len({e["course_id"] for e in enrollments}),
            "recent_enrollments": recent[:RECENT_ENROLLMENTS_LIMIT]
        }


enrollment_service = EnrollmentService(store.enrollments, store.courses, store.students)
