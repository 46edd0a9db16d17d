"""Composition root: wires concrete adapters into services for FastAPI `Depends`."""

from functools import lru_cache

from fastapi import Depends, HTTPException

from adapter.bcrypt.hash_provider import BCryptHashProvider
from adapter.jwt.token_provider import JwtTokenProvider
from adapter.mongodb.appointment_repository import MongoAppointmentRepository
from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.user_repository import MongoUserRepository
from port.appointment_repository import AppointmentRepository
from port.hash_provider import HashProvider
from port.token_provider import TokenProvider
from port.user_repository import UserRepository
from services.appointment_service import CreateAppointmentService, ListProviderAppointmentsService
from services.auth_service import AuthenticateUserService, CreateUserService
from services.profile_service import ShowProfileService, UpdateProfileService
from services.provider_service import (
    ListProviderDayAvailabilityService,
    ListProviderMonthAvailabilityService,
    ListProvidersService,
)
from utils.config import Settings


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def _get_db(settings: Settings):
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client(settings.mongo_url)
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[settings.database_name]


# ── adapters ─────────────────────────────────────────────────


def get_user_repo(settings: Settings = Depends(get_settings)) -> UserRepository:
    return MongoUserRepository(_get_db(settings))


def get_appointment_repo(settings: Settings = Depends(get_settings)) -> AppointmentRepository:
    return MongoAppointmentRepository(_get_db(settings))


def get_hash_provider(settings: Settings = Depends(get_settings)) -> HashProvider:
    return BCryptHashProvider(rounds=settings.bcrypt_rounds)


def get_token_provider(settings: Settings = Depends(get_settings)) -> TokenProvider:
    return JwtTokenProvider(settings.auth)


# ── services ─────────────────────────────────────────────────


def get_create_user_service(
    repo: UserRepository = Depends(get_user_repo),
    hash_provider: HashProvider = Depends(get_hash_provider),
) -> CreateUserService:
    return CreateUserService(repo, hash_provider)


def get_authenticate_user_service(
    repo: UserRepository = Depends(get_user_repo),
    hash_provider: HashProvider = Depends(get_hash_provider),
    token_provider: TokenProvider = Depends(get_token_provider),
) -> AuthenticateUserService:
    return AuthenticateUserService(repo, hash_provider, token_provider)


def get_show_profile_service(repo: UserRepository = Depends(get_user_repo)) -> ShowProfileService:
    return ShowProfileService(repo)


def get_update_profile_service(
    repo: UserRepository = Depends(get_user_repo),
    hash_provider: HashProvider = Depends(get_hash_provider),
) -> UpdateProfileService:
    return UpdateProfileService(repo, hash_provider)


def get_create_appointment_service(
    repo: AppointmentRepository = Depends(get_appointment_repo),
) -> CreateAppointmentService:
    return CreateAppointmentService(repo)


def get_list_provider_appointments_service(
    repo: AppointmentRepository = Depends(get_appointment_repo),
) -> ListProviderAppointmentsService:
    return ListProviderAppointmentsService(repo)


def get_list_providers_service(repo: UserRepository = Depends(get_user_repo)) -> ListProvidersService:
    return ListProvidersService(repo)


def get_month_availability_service(
    repo: AppointmentRepository = Depends(get_appointment_repo),
) -> ListProviderMonthAvailabilityService:
    return ListProviderMonthAvailabilityService(repo)


def get_day_availability_service(
    repo: AppointmentRepository = Depends(get_appointment_repo),
) -> ListProviderDayAvailabilityService:
    return ListProviderDayAvailabilityService(repo)
