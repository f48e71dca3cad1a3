"""Service for the steps of a recipe."""

from __future__ import annotations

import logging
import uuid

from .models import RecipeStep, ValidationError, _repository_errors, _validation_errors


class RecipeStepService:
    """Validates recipe steps and passes them to storage."""

    def __init__(self, repo, logger: logging.Logger) -> None:
        self._repo = repo
        self._log = logger

    @staticmethod
    def _verify(step: RecipeStep) -> None:
        if not step.name:
            raise ValidationError("empty name")
        if not step.description:
            raise ValidationError("empty description")
        if step.step_num <= 0:
            raise ValidationError("negative or zero step num")

    def create(self, step: RecipeStep) -> None:
        self._log.info("create recipe step %s", step)
        with _validation_errors(self._log, "creating recipe step"):
            self._verify(step)
        with _repository_errors(self._log, "creating recipe step"):
            self._repo.create(step)

    def update(self, step: RecipeStep) -> None:
        self._log.info("updating recipe step %s", step)
        with _validation_errors(self._log, "updating recipe step"):
            self._verify(step)
        with _repository_errors(self._log, "updating recipe step"):
            self._repo.update(step)

    def get_by_id(self, step_id: uuid.UUID) -> RecipeStep:
        self._log.info("getting recipe step by id: %s", step_id)
        with _repository_errors(self._log, "getting recipe step by id"):
            return self._repo.get_by_id(step_id)

    def get_all_by_recipe_id(self, recipe_id: uuid.UUID) -> list[RecipeStep]:
        self._log.info("getting all recipe steps by recipe id: %s", recipe_id)
        with _repository_errors(self._log, "getting all steps of recipe"):
            return self._repo.get_all_by_recipe_id(recipe_id)

    def delete_by_id(self, step_id: uuid.UUID) -> None:
        self._log.info("deleting recipe step by id: %s", step_id)
        with _repository_errors(self._log, "deleting step by id"):
            self._repo.delete_by_id(step_id)

    def delete_all_by_recipe_id(self, recipe_id: uuid.UUID) -> None:
        self._log.info("deleting all recipe steps by recipe id: %s", recipe_id)
        with _repository_errors(self._log, "deleting all step of recipe"):
            self._repo.delete_all_by_recipe_id(recipe_id)