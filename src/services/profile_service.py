"""Profile services: show and update the authenticated user's profile."""

import logging

from domain.model.errors import ConflictError, NotFoundError, ValidationError
from domain.model.user import User
from port.hash_provider import HashProvider
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


class ShowProfileService:
    def __init__(self, users_repository: UserRepository):
        self.users_repository = users_repository

    def execute(self, user_id: str) -> User:
        user = self.users_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found.")
        return user


class UpdateProfileService:
    def __init__(self, users_repository: UserRepository, hash_provider: HashProvider):
        self.users_repository = users_repository
        self.hash_provider = hash_provider

    def execute(
        self,
        user_id: str,
        name: str,
        email: str,
        password: str | None = None,
        old_password: str | None = None,
    ) -> User:
        """Update name, email and optionally the password of a user.

        A new password is only accepted together with the current one.
        Nothing is changed when any check fails.

        Raises:
            NotFoundError: user does not exist
            ConflictError: email belongs to another user
            ValidationError: password given without a matching old_password
        """
        user = self.users_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found.")

        if email != user.email:
            owner = self.users_repository.find_by_email(email)
            if owner and owner.id != user.id:
                raise ConflictError("Email already in use.")

        password_hash = None
        if password is not None:
            if not password:
                raise ValidationError("New password can't be empty.")
            if not old_password:
                raise ValidationError("You need to inform the old password to set a new password.")
            if not self.hash_provider.compare_hash(old_password, user.password_hash):
                raise ValidationError("Old password does not match.")
            password_hash = self.hash_provider.hash(password)

        user.name = name
        user.email = email
        if password_hash:
            user.password_hash = password_hash

        saved = self.users_repository.save(user)
        logger.info("Profile updated", extra={
            "userId": user.id,
            "passwordChanged": password_hash is not None,
        })
        return saved
