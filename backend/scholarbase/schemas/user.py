from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict
from datetime import datetime
from enum import Enum

from scholarbase.schemas.course import CourseSummary


class AcademicLevel(str, Enum):
    HIGH_SCHOOL = "High School"
    UNIVERSITY = "University"
    GRADUATE = "Graduate"
    PROFESSIONAL = "Professional"


class UserResponse(BaseModel):
    id: str
    email: str
    created_at: Optional[datetime] = None


class StudentResponse(BaseModel):
    id: str
    first_name: Optional[str] = Field(default=None, alias="First_name")
    last_name: Optional[str] = Field(default=None, alias="Last_name")
    email: Optional[str] = None
    display_name: Optional[str] = None
    academic_level: Optional[AcademicLevel] = None
    profile_picture: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class StudentSummary(BaseModel):
    id: str
    first_name: Optional[str] = Field(default=None, alias="First_name")
    last_name: Optional[str] = Field(default=None, alias="Last_name")
    email: Optional[str] = None
    display_name: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class StudentProfileCreate(BaseModel):
    """Body of ``POST /users/create-profile``; required fields are checked by the service"""
    id: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    academic_level: Optional[AcademicLevel] = Field(default=None, alias="academicLevel")
    profile_picture: Optional[str] = Field(default=None, alias="profilePicture")

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


class StudentProfileUpdate(BaseModel):
    """Partial update: only fields present in the request body are applied.

    ``academic_level`` and ``profile_picture`` accept an explicit null to clear
    them. Names may be set to any string, including an empty one, but not null.
    """
    first_name: Optional[str] = Field(default=None, alias="First_name")
    last_name: Optional[str] = Field(default=None, alias="Last_name")
    display_name: Optional[str] = None
    academic_level: Optional[AcademicLevel] = None
    profile_picture: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    @field_validator("first_name", "last_name", "display_name")
    @classmethod
    def reject_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("must not be null")
        return value


class UserProfileResponse(BaseModel):
    user: UserResponse
    student: Optional[StudentResponse] = None


class StudentProfileResponse(BaseModel):
    student: StudentResponse
    message: str


class UserEnrollmentItem(BaseModel):
    enrollment_id: str
    course_id: str
    enrolled_at: datetime
    course: Optional[CourseSummary] = None


class UserEnrollmentsResponse(BaseModel):
    enrollments: List[UserEnrollmentItem]
    total: int


class UserSearchItem(BaseModel):
    user: UserResponse
    student: StudentResponse


class UserSearchResponse(BaseModel):
    users: List[UserSearchItem]
    total: int
    query: str


class UserStatsResponse(BaseModel):
    total_users: int
    total_students: int
    academic_levels: Dict[str, int]
    recent_signups: int
