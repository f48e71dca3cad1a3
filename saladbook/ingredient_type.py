"""Service for ingredient types."""

from __future__ import annotations

import logging
import uuid

from .models import IngredientType, ValidationError, _repository_errors, _validation_errors


class IngredientTypeService:
    """Validates ingredient types and passes them to storage."""

    def __init__(self, repo, logger: logging.Logger) -> None:
        self._repo = repo
        self._log = logger

    @staticmethod
    def _verify(ingredient_type: IngredientType) -> None:
        if not ingredient_type.name:
            raise ValidationError("empty name")

    def create(self, ingredient_type: IngredientType) -> None:
        self._log.info("create ingredient type: %s", ingredient_type.name)
        with _validation_errors(self._log, "creating ingredient type"):
            self._verify(ingredient_type)
        with _repository_errors(self._log, "creating ingredient type"):
            self._repo.create(ingredient_type)

    def update(self, ingredient_type: IngredientType) -> None:
        self._log.info("update ingredient type: %s", ingredient_type.name)
        with _validation_errors(self._log, "updating ingredient type"):
            self._verify(ingredient_type)
        with _repository_errors(self._log, "updating ingredient type"):
            self._repo.update(ingredient_type)

    def get_by_id(self, type_id: uuid.UUID) -> IngredientType:
        self._log.info("getting ingredient type by id: %s", type_id)
        with _repository_errors(self._log, "getting ingredient type by id"):
            return self._repo.get_by_id(type_id)

    def get_all(self) -> list[IngredientType]:
        self._log.info("getting all ingredient types")
        with _repository_errors(self._log, "getting all ingredient types"):
            return self._repo.get_all()

    def delete_by_id(self, type_id: uuid.UUID) -> None:
        self._log.info("deleting ingredient type by id: %s", type_id)
        with _repository_errors(self._log, "deleting ingredient type by id"):
            self._repo.delete_by_id(type_id)