"""Service for salad types and their links to salads."""

from __future__ import annotations

import logging
import uuid

from .models import SaladType, ValidationError, _repository_errors, _validation_errors


class SaladTypeService:
    """Validates salad types and passes them to storage."""

    def __init__(self, repo, logger: logging.Logger) -> None:
        self._repo = repo
        self._log = logger

    @staticmethod
    def _verify(salad_type: SaladType) -> None:
        if not salad_type.name:
            raise ValidationError("empty name")

    def create(self, salad_type: SaladType) -> None:
        self._log.info("creating salad type: %s", salad_type)
        with _validation_errors(self._log, "creating salad type"):
            self._verify(salad_type)
        with _repository_errors(self._log, "creating salad type"):
            self._repo.create(salad_type)

    def update(self, salad_type: SaladType) -> None:
        self._log.info("updating salad type: %s", salad_type)
        with _validation_errors(self._log, "updating salad type"):
            self._verify(salad_type)
        with _repository_errors(self._log, "updating salad type"):
            self._repo.update(salad_type)

    def get_by_id(self, type_id: uuid.UUID) -> SaladType:
        self._log.info("getting salad type by id %s", type_id)
        with _repository_errors(self._log, "getting salad type by id"):
            return self._repo.get_by_id(type_id)

    def get_all(self, page: int) -> tuple[list[SaladType], int]:
        """Return one page of salad types and the number of pages."""
        self._log.info("getting all salad types on page %d", page)
        with _repository_errors(self._log, "getting all salad types"):
            salad_types, num_pages = self._repo.get_all(page)
        return salad_types, num_pages

    def get_all_by_salad_id(self, salad_id: uuid.UUID) -> list[SaladType]:
        self._log.info("getting salad types by salad id %s", salad_id)
        with _repository_errors(self._log, "getting all types of salad"):
            return self._repo.get_all_by_salad_id(salad_id)

    def delete_by_id(self, type_id: uuid.UUID) -> None:
        self._log.info("deleting salad type by id %s", type_id)
        with _repository_errors(self._log, "deleting salad type by id"):
            self._repo.delete_by_id(type_id)

    def link(self, salad_id: uuid.UUID, type_id: uuid.UUID) -> None:
        self._log.info("linking salad type %s to salad %s", type_id, salad_id)
        with _repository_errors(self._log, "linking salad type"):
            self._repo.link(salad_id, type_id)

    def unlink(self, salad_id: uuid.UUID, type_id: uuid.UUID) -> None:
        self._log.info("unlinking salad type %s from salad %s", type_id, salad_id)
        with _repository_errors(self._log, "unlinking salad type"):
            self._repo.unlink(salad_id, type_id)