from fastapi import APIRouter, HTTPException, status, Query
from typing import Optional
from scholarbase.schemas.enrollment import (
    EnrollmentCreate, UnenrollRequest,
    EnrollmentCreatedResponse, StudentEnrollmentsResponse,
    CourseEnrollmentsResponse, EnrollmentCheckResponse,
    EnrollmentDetailResponse, EnrollmentRemovedResponse,
    UnenrollResponse, EnrollmentCountResponse, EnrollmentStatsResponse
)
from scholarbase.services.enrollment_service import enrollment_service
from scholarbase.utils.exceptions import AppError

router = APIRouter()


@router.post("", response_model=EnrollmentCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_enrollment(enrollment_data: EnrollmentCreate):
    """Enroll a student in a course (409 if already enrolled)"""
    try:
        enrollment = enrollment_service.enroll(
            enrollment_data.student_id,
            enrollment_data.course_id,
            enrollment_data.tutor_id
        )
        return {
            "enrollment": enrollment,
            "message": "Enrollment created successfully"
        }
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get(
    "/student/{student_id}",
    response_model=StudentEnrollmentsResponse,
    response_model_exclude_unset=True
)
async def get_student_enrollments(
    student_id: str,
    include_courses: bool = Query(False, description="Include course details")
):
    """Get all enrollments of a student"""
    enrollments = enrollment_service.for_student(student_id, include_courses)
    return {
        "enrollments": enrollments,
        "student_id": student_id,
        "total": len(enrollments)
    }


@router.get(
    "/course/{course_id}",
    response_model=CourseEnrollmentsResponse,
    response_model_exclude_unset=True
)
async def get_course_enrollments(
    course_id: str,
    include_students: bool = Query(False, description="Include student details")
):
    """Get all enrollments of a course"""
    enrollments = enrollment_service.for_course(course_id, include_students)
    return {
        "enrollments": enrollments,
        "course_id": course_id,
        "total": len(enrollments)
    }


@router.get("/course/{course_id}/count", response_model=EnrollmentCountResponse)
async def get_course_enrollment_count(course_id: str):
    """Number of enrollments in a course"""
    return {
        "course_id": course_id,
        "enrollment_count": enrollment_service.count_for_course(course_id)
    }


@router.get("/check", response_model=EnrollmentCheckResponse)
async def check_enrollment(
    student_id: Optional[str] = Query(None),
    course_id: Optional[str] = Query(None)
):
    """Check whether a student is enrolled in a course"""
    try:
        enrollment = enrollment_service.check(student_id, course_id)
        return {
            "is_enrolled": enrollment is not None,
            "enrollment": enrollment,
            "student_id": student_id,
            "course_id": course_id
        }
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/stats", response_model=EnrollmentStatsResponse)
async def get_enrollment_stats():
    """Enrollment totals and the most recent enrollments"""
    return enrollment_service.stats()


@router.get(
    "/{enrollment_id}",
    response_model=EnrollmentDetailResponse,
    response_model_exclude_unset=True
)
async def get_enrollment(enrollment_id: str):
    """Get an enrollment with its student and course"""
    try:
        return enrollment_service.get_detail(enrollment_id)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{enrollment_id}", response_model=EnrollmentRemovedResponse)
async def delete_enrollment(enrollment_id: str):
    """Remove an enrollment"""
    try:
        enrollment_service.remove(enrollment_id)
        return {
            "message": "Enrollment removed successfully",
            "enrollment_id": enrollment_id
        }
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/student/{student_id}/unenroll", response_model=UnenrollResponse)
async def unenroll_student(student_id: str, request: UnenrollRequest):
    """Remove a student's enrollment in a course"""
    try:
        enrollment_service.unenroll(student_id, request.course_id)
        return {
            "message": "Unenrolled successfully",
            "student_id": student_id,
            "course_id": request.course_id
        }
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
