"""API Dependencies - User store wiring"""
from typing import Optional

from domain.repositories import UserRepository
from application.services import RegistrationService
from infrastructure.config import Settings, get_settings, MEMORY_STORE, MONGO_STORE
from infrastructure.repositories.in_memory_repositories import InMemoryUserRepository
from infrastructure.repositories.mongo_repositories import MongoUserRepository, get_user_collection

_user_repository: Optional[UserRepository] = None


def build_user_repository(settings: Settings) -> UserRepository:
    """Create the user store selected by USER_STORE"""
    if settings.user_store == MEMORY_STORE:
        return InMemoryUserRepository()
    if settings.user_store == MONGO_STORE:
        return MongoUserRepository(get_user_collection(settings))
    raise ValueError(f"Unknown user store: {settings.user_store}")


def get_user_repository() -> UserRepository:
    global _user_repository
    if _user_repository is None:
        _user_repository = build_user_repository(get_settings())
    return _user_repository


def get_registration_service() -> RegistrationService:
    return RegistrationService(get_user_repository())
