"""
Authentication Service

Sign-up, sign-in and the password/e-mail flows return fabricated payloads.
Nothing is persisted and no credential is checked against a user record;
sign-in does mint a real signed JWT so front ends get a well-formed token.
"""
import logging
from uuid import uuid4
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from scholarbase.config import settings
from scholarbase.core.security import create_access_token
from scholarbase.utils.exceptions import BadRequestError, ValidationFailedError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

DEMO_USER_ID = "user_123"
DEMO_EMAIL = "user@example.com"


def _new_user_id() -> str:
    return f"user_{uuid4().hex[:12]}"


def _demo_student(user_id: str, email: str) -> Dict[str, Any]:
    return {
        "id": user_id,
        "first_name": "John",
        "last_name": "Doe",
        "email": email,
        "display_name": "John Doe",
        "academic_level": "University",
        "profile_picture": None
    }


class AuthService:
    def signup(
        self,
        email: Optional[str],
        first_name: Optional[str],
        last_name: Optional[str],
        display_name: Optional[str] = None,
        academic_level: Optional[str] = None
    ) -> Dict[str, Any]:
        now = datetime.now(timezone.utc)
        user = {"id": _new_user_id(), "email": email or "", "created_at": now}

        if not display_name and (first_name or last_name):
            display_name = " ".join(part for part in (first_name, last_name) if part)

        student = {
            "id": user["id"],
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "display_name": display_name,
            "academic_level": academic_level,
            "created_at": now
        }

        logger.info(f"Signup accepted for {email} as {user['id']}")
        return {"user": user, "student": student}

    def signin(self, email: Optional[str], password: Optional[str], remember_me: bool = False) -> Dict[str, Any]:
        if not email or not password:
            raise BadRequestError("Email and password are required")

        user = {"id": _new_user_id(), "email": email, "created_at": datetime.now(timezone.utc)}
        expires_in = settings.REMEMBER_ME_EXPIRE_SECONDS if remember_me else settings.ACCESS_TOKEN_EXPIRE_SECONDS

        session = {
            "access_token": create_access_token({"sub": user["id"], "email": email}, expires_in),
            "token_type": "bearer",
            "expires_in": expires_in
        }

        logger.info(f"Signin accepted for {email}")
        return {"user": user, "student": _demo_student(user["id"], email), "session": session}

    def forgot_password(self, email: Optional[str]) -> None:
        if not email:
            raise BadRequestError("Email is required")

    def reset_password(self, token: Optional[str], password: Optional[str]) -> None:
        if not token or not password:
            raise BadRequestError("Token and password are required")

        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationFailedError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    def verify_email(self, token: Optional[str], verification_type: str = "signup") -> Dict[str, Any]:
        if not token:
            raise BadRequestError("Verification token is required")

        logger.info(f"Email verification ({verification_type}) accepted")
        return {"id": _new_user_id(), "email": DEMO_EMAIL, "email_verified": True}

    def current_user(self) -> Dict[str, Any]:
        user = {"id": DEMO_USER_ID, "email": DEMO_EMAIL, "created_at": datetime.now(timezone.utc)}
        return {"user": user, "student": _demo_student(DEMO_USER_ID, DEMO_EMAIL)}


auth_service = AuthService()
