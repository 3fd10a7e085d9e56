"""
Course catalogue queries.

Filtering, sorting and pagination over the course store. All filters are
combined with AND and an omitted filter imposes no constraint. Exactly one
sort is applied; unknown sort keys fall back to popularity (descending
``student_count``). Python's sort is stable, so courses with equal keys keep
their store order.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from scholarbase.core.store import Record, Repository, store
from scholarbase.schemas.course import CourseSortBy
from scholarbase.utils.exceptions import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
DEFAULT_FEATURED_LIMIT = 8
DEFAULT_SIMILAR_LIMIT = 4

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class CourseFilters:
    search: Optional[str] = None
    category: Optional[str] = None
    level: Optional[str] = None
    featured: Optional[bool] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None


def _contains(value: Optional[str], needle: str) -> bool:
    return bool(value) and needle in value.lower()


def matches_text(course: Record, needle: str, include_tags: bool = False) -> bool:
    """Case-insensitive substring match on title, instructor and description"""
    needle = needle.lower()
    if (
        _contains(course.get("title"), needle)
        or _contains(course.get("instructor"), needle)
        or _contains(course.get("description"), needle)
    ):
        return True
    if include_tags:
        return any(_contains(tag, needle) for tag in course.get("tags") or [])
    return False


def filter_courses(courses: List[Record], filters: CourseFilters) -> List[Record]:
    result = courses

    if filters.search:
        result = [c for c in result if matches_text(c, filters.search)]

    if filters.category:
        result = [c for c in result if c.get("category") == filters.category]

    if filters.level:
        result = [c for c in result if c.get("level") == filters.level]

    if filters.featured is not None:
        result = [c for c in result if bool(c.get("featured")) == filters.featured]

    if filters.price_min is not None:
        result = [c for c in result if c.get("price", 0) >= filters.price_min]

    if filters.price_max is not None:
        result = [c for c in result if c.get("price", 0) <= filters.price_max]

    return result


# sort key -> (key function, descending)
SORT_ORDERS: Dict[str, Tuple[Callable[[Record], Any], bool]] = {
    CourseSortBy.PRICE_LOW.value: (lambda c: c.get("price") or 0, False),
    CourseSortBy.PRICE_HIGH.value: (lambda c: c.get("price") or 0, True),
    CourseSortBy.RATING.value: (lambda c: c.get("rating") or 0, True),
    CourseSortBy.NEWEST.value: (lambda c: c.get("created_at") or _EPOCH, True),
    CourseSortBy.POPULAR.value: (lambda c: c.get("student_count") or 0, True),
}


DEFAULT_SORT = CourseSortBy.POPULAR.value


def sort_courses(courses: List[Record], sort_by: Optional[str]) -> List[Record]:
    key, descending = SORT_ORDERS.get(sort_by or DEFAULT_SORT, SORT_ORDERS[DEFAULT_SORT])
    return sorted(courses, key=key, reverse=descending)


def paginate(items: List[Any], limit: int, offset: int) -> Tuple[List[Any], int]:
    """Slice ``items`` and return the page along with its 1-based page number"""
    if limit < 1:
        raise BadRequestError("limit must be at least 1")
    if offset < 0:
        raise BadRequestError("offset must not be negative")
    return items[offset:offset + limit], offset // limit + 1


class CourseService:
    """Read-only operations over the course catalogue"""

    def __init__(self, courses: Repository):
        self.courses = courses

    def list_courses(
        self,
        filters: CourseFilters,
        sort_by: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0
    ) -> Dict[str, Any]:
        filtered = filter_courses(self.courses.list(), filters)
        ordered = sort_courses(filtered, sort_by)
        page_items, page = paginate(ordered, limit, offset)

        return {
            "courses": page_items,
            "total": len(filtered),
            "page": page,
            "limit": limit
        }

    def featured(self, limit: int = DEFAULT_FEATURED_LIMIT) -> List[Record]:
        return self.courses.find(lambda c: bool(c.get("featured")))[:limit]

    def categories(self) -> List[str]:
        seen: List[str] = []
        for course in self.courses.list():
            category = course.get("category")
            if category and category not in seen:
                seen.append(category)
        return seen

    def by_category(self, category: str, limit: Optional[int] = None) -> Dict[str, Any]:
        # Unlike list_courses(category=...), an unknown category is an error here
        in_category = self.courses.find(lambda c: c.get("category") == category)
        if not in_category:
            raise NotFoundError("Category not found")

        if limit is not None:
            in_category = in_category[:limit]

        return {
            "courses": in_category,
            "category": category,
            "total": len(in_category)
        }

    def search(self, query: Optional[str], limit: int = DEFAULT_LIMIT, offset: int = 0) -> Dict[str, Any]:
        if not query:
            raise BadRequestError("Search query is required")

        results = self.courses.find(lambda c: matches_text(c, query, include_tags=True))
        page_items, page = paginate(results, limit, offset)

        return {
            "courses": page_items,
            "query": query,
            "total": len(results),
            "page": page
        }

    def get_course(self, course_id: str) -> Record:
        course = self.courses.get(course_id)
        if not course:
            raise NotFoundError("Course not found")
        return course

    def similar(self, course_id: str, limit: int = DEFAULT_SIMILAR_LIMIT) -> List[Record]:
        course = self.get_course(course_id)
        return self.courses.find(
            lambda c: c["id"] != course_id
            and (c.get("category") == course.get("category") or c.get("level") == course.get("level"))
        )[:limit]


course_service = CourseService(store.courses)
