"""API endpoints package."""

from . import (
    auth,
    courses,
    enrollments,
    users,
)

__all__ = [
    "auth",
    "courses",
    "enrollments",
    "users",
]
