"""Service for user accounts."""

from __future__ import annotations

import logging
import uuid
from email.utils import parseaddr

from .models import User, ValidationError, _repository_errors, _validation_errors


def _check_email(address: str) -> None:
    if not address.strip():
        raise ValidationError("mail: no address")
    _, addr = parseaddr(address)
    local, at, domain = addr.rpartition("@")
    if not at:
        raise ValidationError("mail: missing @ in addr-spec")
    if not local or not domain or any(ch.isspace() for ch in addr):
        raise ValidationError("mail: invalid address")


class UserService:
    """Validates user accounts and passes them to storage."""

    def __init__(self, repo, logger: logging.Logger) -> None:
        self._repo = repo
        self._log = logger

    @staticmethod
    def _verify(user: User) -> None:
        if not user.username:
            raise ValidationError("empty username")
        if not user.password:
            raise ValidationError("empty password")
        if not user.name:
            raise ValidationError("empty name")
        _check_email(user.email)

    def create(self, user: User) -> None:
        self._log.info("creating user: %s", user.username)
        with _validation_errors(self._log, "creating user"):
            self._verify(user)
        with _repository_errors(self._log, "creating user"):
            self._repo.create(user)

    def update(self, user: User) -> None:
        self._log.warning("updating user: %s", user.username)
        with _validation_errors(self._log, "updating user"):
            self._verify(user)
        with _repository_errors(self._log, "updating user"):
            self._repo.update(user)

    def get_by_id(self, user_id: uuid.UUID) -> User:
        self._log.info("getting user by id: %s", user_id)
        with _repository_errors(self._log, "getting user by id"):
            return self._repo.get_by_id(user_id)

    def get_all(self, page: int) -> list[User]:
        self._log.info("getting all users on page %d", page)
        with _repository_errors(self._log, "getting all users"):
            return self._repo.get_all(page)

    def delete_by_id(self, user_id: uuid.UUID) -> None:
        self._log.info("deleting user by id: %s", user_id)
        with _repository_errors(self._log, "deleting user by id"):
            self._repo.delete_by_id(user_id)

    def get_by_username(self, username: str) -> User:
        self._log.info("getting user by username: %s", username)
        with _repository_errors(self._log, "getting user by username"):
            return self._repo.get_by_username(username)