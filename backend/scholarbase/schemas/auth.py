from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from scholarbase.schemas.user import AcademicLevel, UserResponse, StudentResponse


class SignupRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    display_name: Optional[str] = Field(default=None, alias="displayName")
    academic_level: Optional[AcademicLevel] = Field(default=None, alias="academicLevel")

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


class SigninRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    remember_me: bool = Field(default=False, alias="rememberMe")

    model_config = ConfigDict(populate_by_name=True)


class ForgotPasswordRequest(BaseModel):
    email: Optional[str] = None


class ResetPasswordRequest(BaseModel):
    token: Optional[str] = None
    password: Optional[str] = None


class EmailVerificationRequest(BaseModel):
    token: Optional[str] = None
    type: str = "signup"


class SessionResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class SignupResponse(BaseModel):
    user: UserResponse
    student: StudentResponse
    message: str


class SigninResponse(BaseModel):
    user: UserResponse
    student: StudentResponse
    session: SessionResponse
    message: str


class VerifiedUser(BaseModel):
    id: str
    email: str
    email_verified: bool


class EmailVerificationResponse(BaseModel):
    message: str
    user: VerifiedUser


class CurrentUserResponse(BaseModel):
    user: UserResponse
    student: StudentResponse


class MessageResponse(BaseModel):
    message: str
