from fastapi import APIRouter, HTTPException, status
from scholarbase.schemas.auth import (
    SignupRequest, SigninRequest, ForgotPasswordRequest,
    ResetPasswordRequest, EmailVerificationRequest,
    SignupResponse, SigninResponse, EmailVerificationResponse,
    CurrentUserResponse, MessageResponse
)
from scholarbase.services.auth_service import auth_service
from scholarbase.utils.exceptions import AppError

router = APIRouter()


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(user_data: SignupRequest):
    """Register a new user (fabricated, nothing is stored)"""
    result = auth_service.signup(
        email=user_data.email,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        display_name=user_data.display_name,
        academic_level=user_data.academic_level
    )
    return {
        **result,
        "message": "User registered successfully. Please check your email for verification."
    }


@router.post("/signin", response_model=SigninResponse)
async def signin(credentials: SigninRequest):
    """Sign in with email and password (credentials are not checked)"""
    try:
        result = auth_service.signin(credentials.email, credentials.password, credentials.remember_me)
        return {**result, "message": "Signed in successfully"}
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/signout", response_model=MessageResponse)
async def signout():
    """Sign out (client should delete its token)"""
    return {"message": "Signed out successfully"}


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(request: ForgotPasswordRequest):
    """Request a password reset link"""
    try:
        auth_service.forgot_password(request.email)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    # Same answer whether or not the account exists
    return {"message": "If an account with this email exists, you will receive a password reset link."}


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(request: ResetPasswordRequest):
    """Reset password with a reset token"""
    try:
        auth_service.reset_password(request.token, request.password)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {"message": "Password reset successfully"}


@router.post("/verify-email", response_model=EmailVerificationResponse)
async def verify_email(request: EmailVerificationRequest):
    """Verify an email address"""
    try:
        user = auth_service.verify_email(request.token, request.type)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {
        "message": "Email verified successfully",
        "user": user
    }


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_info():
    """Get the current user (always the demo account; the token is not read)"""
    return auth_service.current_user()
