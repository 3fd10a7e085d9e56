from fastapi import APIRouter, HTTPException, status, Query
from typing import Optional
from scholarbase.schemas.user import (
    StudentProfileCreate, StudentProfileUpdate,
    UserProfileResponse, StudentProfileResponse,
    UserEnrollmentsResponse, UserSearchResponse, UserStatsResponse
)
from scholarbase.services.user_service import user_service, DEFAULT_SEARCH_LIMIT
from scholarbase.utils.exceptions import AppError

router = APIRouter()


@router.get("/profile/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(user_id: str):
    """Get a user with their student profile (null when none exists)"""
    try:
        return user_service.get_profile(user_id)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/profile/{user_id}", response_model=StudentProfileResponse)
async def update_user_profile(user_id: str, profile_data: StudentProfileUpdate):
    """Update only the student profile fields present in the request body"""
    try:
        student = user_service.update_profile(
            user_id,
            profile_data.model_dump(exclude_unset=True)
        )
        return {
            "student": student,
            "message": "Profile updated successfully"
        }
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/search", response_model=UserSearchResponse)
async def search_users(
    q: Optional[str] = Query(None, description="Search query"),
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=0, description="Number of results to return")
):
    """Search students by name, email or display name"""
    try:
        return user_service.search(q, limit)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/stats", response_model=UserStatsResponse)
async def get_user_stats():
    """User counts, academic level breakdown and recent signups"""
    return user_service.stats()


@router.get("/{user_id}/enrollments", response_model=UserEnrollmentsResponse)
async def get_user_enrollments(user_id: str):
    """Get a user's enrollments with course details"""
    try:
        enrollments = user_service.enrollments_for_user(user_id)
        return {
            "enrollments": enrollments,
            "total": len(enrollments)
        }
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/create-profile", response_model=StudentProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_student_profile(profile_data: StudentProfileCreate):
    """Create a student profile"""
    try:
        student = user_service.create_profile(profile_data.model_dump())
        return {
            "student": student,
            "message": "Student profile created successfully"
        }
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
