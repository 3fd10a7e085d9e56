from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

from scholarbase.schemas.course import CourseSummary
from scholarbase.schemas.user import StudentSummary


class EnrollmentCreate(BaseModel):
    student_id: Optional[str] = None
    course_id: Optional[str] = None
    tutor_id: Optional[str] = None


class UnenrollRequest(BaseModel):
    course_id: Optional[str] = None


class EnrollmentRead(BaseModel):
    id: str
    created_at: datetime
    student_id: str
    course_id: str
    tutor_id: Optional[str] = None


class EnrollmentWithRelations(EnrollmentRead):
    """Enrollment optionally carrying the related course or student.

    Served with ``response_model_exclude_unset`` so the relation keys only
    appear when they were requested.
    """
    course: Optional[CourseSummary] = None
    student: Optional[StudentSummary] = None


class EnrollmentCreatedResponse(BaseModel):
    enrollment: EnrollmentRead
    message: str


class StudentEnrollmentsResponse(BaseModel):
    enrollments: List[EnrollmentWithRelations]
    student_id: str
    total: int


class CourseEnrollmentsResponse(BaseModel):
    enrollments: List[EnrollmentWithRelations]
    course_id: str
    total: int


class EnrollmentCheckResponse(BaseModel):
    is_enrolled: bool
    enrollment: Optional[EnrollmentRead] = None
    student_id: str
    course_id: str


class EnrollmentDetailResponse(BaseModel):
    enrollment: EnrollmentRead
    student: Optional[StudentSummary] = None
    course: Optional[CourseSummary] = None


class EnrollmentRemovedResponse(BaseModel):
    message: str
    enrollment_id: str


class UnenrollResponse(BaseModel):
    message: str
    student_id: str
    course_id: str


class EnrollmentCountResponse(BaseModel):
    course_id: str
    enrollment_count: int


class EnrollmentStatsResponse(BaseModel):
    total_enrollments: int
    unique_students: int
    unique_courses: int
    recent_enrollments: List[EnrollmentRead]
