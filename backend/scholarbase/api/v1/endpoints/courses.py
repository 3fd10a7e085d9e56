from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional
from scholarbase.schemas.course import (
    CourseLevel, CourseSortBy, CourseResponse, CourseListResponse,
    CourseSearchResponse, CourseCategoryResponse,
    CourseCollectionResponse, CategoryListResponse
)
from scholarbase.dependencies import get_pagination_params
from scholarbase.services.course_service import (
    CourseFilters, course_service,
    DEFAULT_FEATURED_LIMIT, DEFAULT_SIMILAR_LIMIT
)
from scholarbase.utils.exceptions import AppError

router = APIRouter()


@router.get("", response_model=CourseListResponse)
async def list_courses(
    pagination: dict = Depends(get_pagination_params),
    search: Optional[str] = Query(None, description="Search term for course title, instructor, or description"),
    category: Optional[str] = Query(None, description="Filter by course category"),
    level: Optional[CourseLevel] = Query(None, description="Filter by difficulty level"),
    featured: Optional[bool] = Query(None, description="Filter featured courses"),
    price_min: Optional[float] = Query(None, alias="priceMin", description="Minimum price filter"),
    price_max: Optional[float] = Query(None, alias="priceMax", description="Maximum price filter"),
    sort_by: Optional[str] = Query(
        None,
        alias="sortBy",
        description=f"One of: {', '.join(s.value for s in CourseSortBy)} (default {CourseSortBy.POPULAR.value})"
    )
):
    """List courses with filtering, sorting and pagination"""
    filters = CourseFilters(
        search=search,
        category=category,
        level=level.value if level else None,
        featured=featured,
        price_min=price_min,
        price_max=price_max
    )
    try:
        return course_service.list_courses(
            filters,
            sort_by=sort_by,
            limit=pagination["limit"],
            offset=pagination["offset"]
        )
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/featured", response_model=CourseCollectionResponse)
async def get_featured_courses(
    limit: int = Query(DEFAULT_FEATURED_LIMIT, ge=0, description="Number of featured courses to return")
):
    """Get featured courses"""
    return {"courses": course_service.featured(limit)}


@router.get("/categories", response_model=CategoryListResponse)
async def get_categories():
    """Get all course categories"""
    return {"categories": course_service.categories()}


@router.get("/category/{category}", response_model=CourseCategoryResponse)
async def get_courses_by_category(
    category: str,
    limit: Optional[int] = Query(None, ge=0, description="Number of courses to return")
):
    """Get all courses in a category (404 when no course has it)"""
    try:
        return course_service.by_category(category, limit)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/search", response_model=CourseSearchResponse)
async def search_courses(
    q: Optional[str] = Query(None, description="Search query"),
    pagination: dict = Depends(get_pagination_params)
):
    """Search courses by title, instructor, description or tag"""
    try:
        return course_service.search(q, limit=pagination["limit"], offset=pagination["offset"])
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(course_id: str):
    """Get course details"""
    try:
        return course_service.get_course(course_id)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{course_id}/similar", response_model=CourseCollectionResponse)
async def get_similar_courses(
    course_id: str,
    limit: int = Query(DEFAULT_SIMILAR_LIMIT, ge=0, description="Number of similar courses to return")
):
    """Get courses sharing the category or level of the given course"""
    try:
        return {"courses": course_service.similar(course_id, limit)}
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
