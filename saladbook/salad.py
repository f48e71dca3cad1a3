"""Service for salads."""

from __future__ import annotations

import logging
import uuid

from .models import RecipeFilter, Salad, ValidationError, _repository_errors


class SaladService:
    """Checks salads and passes them to storage."""

    def __init__(self, repo, logger: logging.Logger) -> None:
        self._repo = repo
        self._log = logger

    def create(self, salad: Salad) -> uuid.UUID:
        """Store a new salad and return the id given to it."""
        self._log.info("salad created: %s", salad)
        if not salad.name:
            self._log.warning("empty salad name")
            raise ValidationError("empty salad name")
        with _repository_errors(self._log, "creating salad"):
            return self._repo.create(salad)

    def update(self, salad: Salad) -> None:
        self._log.info("updating salad: %s", salad)
        if not salad.name:
            self._log.warning("empty salad name")
            raise ValidationError("updating salad: empty salad name")
        with _repository_errors(self._log, "updating salad"):
            self._repo.update(salad)

    def get_by_id(self, salad_id: uuid.UUID) -> Salad:
        self._log.info("getting salad by id: %s", salad_id)
        with _repository_errors(self._log, "getting salad by id"):
            return self._repo.get_by_id(salad_id)

    def get_all(
        self, recipe_filter: RecipeFilter, page: int
    ) -> tuple[list[Salad], int]:
        """Return one page of salads passing *recipe_filter* and the number of pages."""
        self._log.info("getting all salads by filter: %s", recipe_filter)
        with _repository_errors(self._log, "getting all salads"):
            salads, num_pages = self._repo.get_all(recipe_filter, page)
        return salads, num_pages

    def delete_by_id(self, salad_id: uuid.UUID) -> None:
        self._log.info("deleting salad by id: %s", salad_id)
        with _repository_errors(self._log, "deleting salad by id"):
            self._repo.delete_by_id(salad_id)

    def get_all_by_user_id(self, user_id: uuid.UUID) -> list[Salad]:
        """Return the salads written by a user."""
        self._log.info("getting all salads by user id: %s", user_id)
        with _repository_errors(self._log, "getting all salads by author id"):
            return self._repo.get_all_by_user_id(user_id)

    def get_all_rated_by_user(
        self, user_id: uuid.UUID, page: int
    ) -> tuple[list[Salad], int]:
        """Return one page of salads a user has rated and the number of pages."""
        self._log.info("getting all salads rated by user with id: %s", user_id)
        with _repository_errors(self._log, "getting all salads rated by user"):
            salads, num_pages = self._repo.get_all_rated_by_user(user_id, page)
        return salads, num_pages