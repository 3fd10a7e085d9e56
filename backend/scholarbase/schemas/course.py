from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime
from enum import Enum


class CourseLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class CourseSortBy(str, Enum):
    POPULAR = "popular"
    RATING = "rating"
    NEWEST = "newest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"


class CourseResponse(BaseModel):
    id: str
    title: str
    description: str
    instructor: str
    author: Optional[str] = None
    price: float
    original_price: Optional[float] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    student_count: Optional[int] = None
    thumbnail: Optional[str] = None
    category: str
    level: CourseLevel
    featured: bool = False
    is_published: bool = True
    created_at: datetime
    duration_hours: Optional[float] = None
    lesson_count: Optional[int] = None
    tags: List[str] = []

    model_config = ConfigDict(from_attributes=True)


class CourseSummary(BaseModel):
    """Subset of course fields embedded in enrollment payloads"""
    id: str
    title: str
    instructor: Optional[str] = None
    thumbnail: Optional[str] = None
    category: Optional[str] = None
    level: Optional[CourseLevel] = None
    rating: Optional[float] = None
    price: Optional[float] = None


class CourseListResponse(BaseModel):
    courses: List[CourseResponse]
    total: int
    page: int
    limit: int


class CourseSearchResponse(BaseModel):
    courses: List[CourseResponse]
    query: str
    total: int
    page: int


class CourseCategoryResponse(BaseModel):
    courses: List[CourseResponse]
    category: str
    total: int


class CourseCollectionResponse(BaseModel):
    courses: List[CourseResponse]


class CategoryListResponse(BaseModel):
    categories: List[str]
