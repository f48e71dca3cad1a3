"""Service for measurement units and their use in recipes."""

from __future__ import annotations

import logging
import uuid

from .models import Measurement, ValidationError, _repository_errors, _validation_errors


class MeasurementService:
    """Validates measurement units and passes them to storage."""

    def __init__(self, repo, logger: logging.Logger) -> None:
        self._repo = repo
        self._log = logger

    @staticmethod
    def _verify(measurement: Measurement) -> None:
        if not measurement.name:
            raise ValidationError("empty name")
        if measurement.grams <= 0:
            raise ValidationError("negative or zero grams count")

    def create(self, measurement: Measurement) -> None:
        self._log.info("create measurement: %s", measurement.name)
        with _validation_errors(self._log, "creating measurement unit"):
            self._verify(measurement)
        with _repository_errors(self._log, "creating measurement unit"):
            self._repo.create(measurement)

    def update(self, measurement: Measurement) -> None:
        self._log.info("updating measurement: %s", measurement.id)
        with _validation_errors(self._log, "updating measurement unit"):
            self._verify(measurement)
        with _repository_errors(self._log, "updating measurement unit"):
            self._repo.update(measurement)

    def get_by_id(self, measurement_id: uuid.UUID) -> Measurement:
        self._log.info("getting measurement by id: %s", measurement_id)
        with _repository_errors(self._log, "getting measurement unit by id"):
            return self._repo.get_by_id(measurement_id)

    def get_by_recipe_id(
        self, ingredient_id: uuid.UUID, recipe_id: uuid.UUID
    ) -> tuple[Measurement, int]:
        """Return the unit and amount used for an ingredient in a recipe."""
        self._log.info(
            "getting measurement with recipe id: %s, ingredient id: %s",
            recipe_id,
            ingredient_id,
        )
        with _repository_errors(self._log, "getting measurement unit by recipe id"):
            measurement, count = self._repo.get_by_recipe_id(ingredient_id, recipe_id)
        return measurement, count

    def get_all(self) -> list[Measurement]:
        self._log.info("getting all measurements")
        with _repository_errors(self._log, "getting all measurement units"):
            return self._repo.get_all()

    def delete_by_id(self, measurement_id: uuid.UUID) -> None:
        self._log.info("deleting measurement by id: %s", measurement_id)
        with _repository_errors(self._log, "deleting measurement unit by id"):
            self._repo.delete_by_id(measurement_id)

    def update_link(
        self, link_id: uuid.UUID, measurement_id: uuid.UUID, amount: int
    ) -> None:
        """Change the unit and amount of an ingredient link."""
        self._log.info("updating measurement link: %s", link_id)
        if amount <= 0:
            self._log.warning("updating measurement link amount must be greater than zero")
            raise ValidationError("negative or zero amount")
        with _repository_errors(self._log, "updating measurement unit by link id"):
            self._repo.update_link(link_id, measurement_id, amount)