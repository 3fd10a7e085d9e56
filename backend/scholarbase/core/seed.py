"""
Sample data loaded into the in-memory store at startup.

Two demo users with matching student profiles, two published courses and
one enrollment for each student.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List


def _utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def sample_users() -> List[Dict[str, Any]]:
    return [
        {
            "id": "user_123",
            "email": "john.doe@example.com",
            "created_at": _utc(2024, 1, 1),
        },
        {
            "id": "user_456",
            "email": "jane.smith@example.com",
            "created_at": _utc(2024, 1, 15),
        },
    ]


def sample_students() -> List[Dict[str, Any]]:
    return [
        {
            "id": "user_123",
            "first_name": "John",
            "last_name": "Doe",
            "email": "john.doe@example.com",
            "display_name": "John Doe",
            "academic_level": "University",
            "profile_picture": None,
            "created_at": _utc(2024, 1, 1),
            "updated_at": None,
        },
        {
            "id": "user_456",
            "first_name": "Jane",
            "last_name": "Smith",
            "email": "jane.smith@example.com",
            "display_name": "Jane Smith",
            "academic_level": "Graduate",
            "profile_picture": "/avatars/jane.jpg",
            "created_at": _utc(2024, 1, 15),
            "updated_at": None,
        },
    ]


def sample_courses() -> List[Dict[str, Any]]:
    return [
        {
            "id": "course_1",
            "title": "Introduction to Web Development",
            "description": "Learn the fundamentals of web development with HTML, CSS, and JavaScript",
            "instructor": "Dr. Sarah Johnson",
            "author": "tutor_1",
            "price": 99.99,
            "original_price": 149.99,
            "rating": 4.8,
            "review_count": 156,
            "student_count": 1250,
            "thumbnail": "/placeholder.jpg",
            "category": "Programming",
            "level": "Beginner",
            "featured": True,
            "is_published": True,
            "created_at": _utc(2024, 1, 1),
            "duration_hours": 40,
            "lesson_count": 25,
            "tags": ["HTML", "CSS", "JavaScript", "Web Development"],
        },
        {
            "id": "course_2",
            "title": "Advanced React Development",
            "description": "Master React with hooks, context, and advanced patterns",
            "instructor": "Prof. Michael Chen",
            "author": "tutor_2",
            "price": 149.99,
            "original_price": 199.99,
            "rating": 4.9,
            "review_count": 89,
            "student_count": 890,
            "thumbnail": "/placeholder.jpg",
            "category": "Programming",
            "level": "Advanced",
            "featured": True,
            "is_published": True,
            "created_at": _utc(2024, 2, 1),
            "duration_hours": 60,
            "lesson_count": 35,
            "tags": ["React", "JavaScript", "Frontend", "Hooks"],
        },
    ]


def sample_enrollments() -> List[Dict[str, Any]]:
    return [
        {
            "id": "enrollment_1",
            "created_at": _utc(2024, 1, 15, 10, 0),
            "student_id": "user_123",
            "course_id": "course_1",
            "tutor_id": "tutor_1",
        },
        {
            "id": "enrollment_2",
            "created_at": _utc(2024, 1, 20, 15, 30),
            "student_id": "user_456",
            "course_id": "course_2",
            "tutor_id": "tutor_2",
        },
    ]


def seed_records() -> Dict[str, List[Dict[str, Any]]]:
    return {
        "users": sample_users(),
        "students": sample_students(),
        "courses": sample_courses(),
        "enrollments": sample_enrollments(),
    }
