"""Authentication and admin profile schemas."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .common import EMAIL_PATTERN, RecordOut, RequestModel


class SignupRequest(RequestModel):
    """Request schema for registering a new admin."""

    name: str = Field(..., min_length=5, max_length=50, description="Display name")
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, description="Sign-in e-mail")
    password: str = Field(..., min_length=8, max_length=128, description="Password")
    confirm_password: str = Field(..., description="Must equal password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @model_validator(mode="after")
    def passwords_match(self) -> "SignupRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class SigninRequest(RequestModel):
    """Request schema for signing in with e-mail or admin name."""

    identifier: str = Field(..., min_length=1, description="E-mail or admin name")
    password: str = Field(..., min_length=1, description="Password")


class AdminOut(RecordOut):
    """Admin response schema."""

    name: Optional[str] = Field(None, description="Display name")
    email: str = Field(..., description="Sign-in e-mail")
    avatar: Optional[str] = Field(None, description="Public avatar path")


class SessionOut(BaseModel):
    """Payload returned after signing in."""

    token: str = Field(..., description="Signed session token")
    admin: AdminOut


class AdminProfileUpdate(RequestModel):
    """Request schema for updating the signed-in admin's profile."""

    name: Optional[str] = Field(None, min_length=5, max_length=50)
    email: Optional[str] = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    password: Optional[str] = Field(None, max_length=128, description="New password; empty keeps the current one")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        if len(v) < 8:
            raise ValueError("Password must be at least 8 characters")
        return v
