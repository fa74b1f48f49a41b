"""Application Services - Business use cases"""
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from domain.repositories import UserRepository
from domain.entities import NewUser, User
from domain.exceptions import DuplicateKeyError, RegistrationValidationError, UserAlreadyExistsError
from domain.value_objects import FieldSize
from infrastructure.security import hash_password

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("username", "password")
STRING_FIELDS = ("username", "password", "fullname")
SIZED_FIELDS = {
    "username": FieldSize(min=1),
    "password": FieldSize(min=8, max=72),
}

MISSING_FIELD_MESSAGE = "Incorrect field type: missing a username or password"
NOT_A_STRING_MESSAGE = "Incorrect field type: expected a string"
NOT_TRIMMED_MESSAGE = "Incorrect field type: must not have trailing whitespace"


def _check_required(payload: Dict[str, Any]) -> None:
    missing = next((field for field in REQUIRED_FIELDS if field not in payload), None)
    if missing:
        raise RegistrationValidationError(MISSING_FIELD_MESSAGE, missing)


def _check_types(payload: Dict[str, Any]) -> None:
    not_a_string = next(
        (field for field in STRING_FIELDS if field in payload and not isinstance(payload[field], str)),
        None,
    )
    if not_a_string:
        raise RegistrationValidationError(NOT_A_STRING_MESSAGE, not_a_string)


def _check_trimmed(payload: Dict[str, Any]) -> None:
    # fullname is trimmed on save instead
    not_trimmed = next(
        (field for field in REQUIRED_FIELDS if payload[field].strip() != payload[field]),
        None,
    )
    if not_trimmed:
        raise RegistrationValidationError(NOT_TRIMMED_MESSAGE, not_trimmed)


def _check_sizes(payload: Dict[str, Any]) -> None:
    too_small = next(
        (field for field, size in SIZED_FIELDS.items() if size.too_small(payload[field])),
        None,
    )
    too_large = next(
        (field for field, size in SIZED_FIELDS.items() if size.too_large(payload[field])),
        None,
    )
    # A short field is reported ahead of a long one
    if too_small:
        raise RegistrationValidationError(
            f"Must be at least {SIZED_FIELDS[too_small].min} characters long", too_small
        )
    if too_large:
        raise RegistrationValidationError(
            f"Must be at most {SIZED_FIELDS[too_large].max} characters long", too_large
        )


VALIDATION_STAGES = (_check_required, _check_types, _check_trimmed, _check_sizes)


def validate_registration(payload: Dict[str, Any]) -> None:
    """Run every validation stage in order, raising on the first failure"""
    for stage in VALIDATION_STAGES:
        stage(payload)


class RegistrationService:
    """Service for the user registration use case"""

    def __init__(self,
                 repository: UserRepository,
                 hasher: Callable[[str], Awaitable[str]] = hash_password):
        self.repository = repository
        self.hasher = hasher

    async def register(self, payload: Dict[str, Any]) -> User:
        """
        Register a new user from a raw request payload.

        Raises:
            RegistrationValidationError: a field is missing, not a string,
                padded with whitespace or outside its allowed length
            UserAlreadyExistsError: the username is taken
        """
        try:
            validate_registration(payload)
        except RegistrationValidationError as e:
            logger.info(f"Rejected registration: {e.message} ({e.location})")
            raise

        digest = await self.hasher(payload["password"])
        new_user = NewUser(
            username=payload["username"],
            password_digest=digest,
            fullname=_trim_optional(payload.get("fullname")),
        )

        try:
            user = await self.repository.create(new_user)
        except DuplicateKeyError:
            logger.warning(f"Registration conflict for username {new_user.username!r}")
            raise UserAlreadyExistsError()

        logger.info(f"Registered user {user.id} ({user.username})")
        return user

    async def get_user(self, username: str) -> Optional[User]:
        """Get user by username"""
        return await self.repository.find_by_username(username)


def _trim_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip()
