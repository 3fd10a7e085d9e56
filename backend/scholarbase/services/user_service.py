"""
User and student profile service.

Users and students are separate collections joined by id. Nothing requires
a student profile to have a matching user.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any, List

from scholarbase.core.store import Record, Repository, store
from scholarbase.utils.exceptions import BadRequestError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 20
RECENT_SIGNUP_DAYS = 30
UNSPECIFIED_LEVEL = "Not Specified"

USER_COURSE_FIELDS = ("id", "title", "instructor", "thumbnail", "category", "level", "rating", "price")


class UserService:
    def __init__(
        self,
        users: Repository,
        students: Repository,
        enrollments: Repository,
        courses: Repository
    ):
        self.users = users
        self.students = students
        self.enrollments = enrollments
        self.courses = courses

    def get_profile(self, user_id: str) -> Dict[str, Any]:
        user = self.users.get(user_id)
        if not user:
            raise NotFoundError("User not found")

        return {
            "user": user,
            "student": self.students.get(user_id)
        }

    def update_profile(self, user_id: str, changes: Dict[str, Any]) -> Record:
        """
        Merge ``changes`` into the stored student profile.

        ``changes`` holds only the fields the client sent, so an omitted
        field is left alone while an explicit empty value is written.
        """
        if not self.students.get(user_id):
            raise NotFoundError("User profile not found")

        updated = self.students.update(
            user_id,
            {**changes, "updated_at": datetime.now(timezone.utc)}
        )

        logger.info(f"Student profile {user_id} updated: {sorted(changes)}")
        return updated

    def create_profile(self, data: Dict[str, Any]) -> Record:
        missing = [f for f in ("id", "first_name", "last_name", "email") if not data.get(f)]
        if missing:
            raise BadRequestError("id, firstName, lastName, and email are required")

        if self.students.get(data["id"]):
            logger.warning(f"Student profile {data['id']} already exists")
            raise ConflictError("Student profile already exists")

        first_name = data["first_name"]
        last_name = data["last_name"]
        student = {
            "id": data["id"],
            "first_name": first_name,
            "last_name": last_name,
            "email": data["email"],
            "display_name": data.get("display_name") or f"{first_name} {last_name}",
            "academic_level": data.get("academic_level") or None,
            "profile_picture": data.get("profile_picture") or None,
            "created_at": datetime.now(timezone.utc),
            "updated_at": None
        }
        self.students.insert(student)

        logger.info(f"Student profile {student['id']} created")
        return student

    def enrollments_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        if not self.users.get(user_id):
            raise NotFoundError("User not found")

        items = []
        for enrollment in self.enrollments.find(lambda e: e["student_id"] == user_id):
            course = self.courses.get(enrollment["course_id"])
            items.append({
                "enrollment_id": enrollment["id"],
                "course_id": enrollment["course_id"],
                "enrolled_at": enrollment["created_at"],
                "course": {f: course.get(f) for f in USER_COURSE_FIELDS} if course else None
            })
        return items

    def search(self, query: Optional[str], limit: int = DEFAULT_SEARCH_LIMIT) -> Dict[str, Any]:
        if not query:
            raise BadRequestError("Search query is required")

        needle = query.lower()

        def matches(student: Record) -> bool:
            return any(
                needle in (student.get(field) or "").lower()
                for field in ("first_name", "last_name", "email", "display_name")
            )

        results = self.students.find(matches)

        users = []
        for student in results[:limit]:
            user = self.users.get(student["id"]) or {
                "id": student["id"],
                "email": student.get("email"),
                "created_at": None
            }
            users.append({"user": user, "student": student})

        return {
            "users": users,
            "total": len(results),
            "query": query
        }

    def stats(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        now = now or datetime.now(timezone.utc)
        cutoff = now - timedelta(days=RECENT_SIGNUP_DAYS)

        academic_levels: Dict[str, int] = {}
        for student in self.students.list():
            level = student.get("academic_level") or UNSPECIFIED_LEVEL
            academic_levels[level] = academic_levels.get(level, 0) + 1

        recent_signups = self.users.count(
            lambda u: u.get("created_at") is not None and u["created_at"] > cutoff
        )

        return {
            "total_users": self.users.count(),
            "total_students": self.students.count(),
            "academic_levels": academic_levels,
            "recent_signups": recent_signups
        }


user_service = UserService(store.users, store.students, store.enrollments, store.courses)
