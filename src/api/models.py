"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from domain.model.appointment import Appointment
from domain.model.user import User


class CreateUserRequest(BaseModel):
    """Request model for user registration."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str


class SessionRequest(BaseModel):
    """Request model for login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class UpdateProfileRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: Optional[str] = None
    old_password: Optional[str] = None


class CreateAppointmentRequest(BaseModel):
    provider_id: str
    date: datetime


class UserResponse(BaseModel):
    """User as exposed over HTTP (never includes the password digest)."""
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(**user.public_dict())


class AuthResponse(BaseModel):
    """Response model for authentication."""
    user: UserResponse
    token: str


class AppointmentResponse(BaseModel):
    id: str
    provider_id: str
    user_id: str
    date: datetime
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, appointment: Appointment) -> "AppointmentResponse":
        return cls(
            id=appointment.id,
            provider_id=appointment.provider_id,
            user_id=appointment.user_id,
            date=appointment.date,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )


class DayAvailabilityResponse(BaseModel):
    day: int
    available: bool


class HourAvailabilityResponse(BaseModel):
    hour: int
    available: bool
