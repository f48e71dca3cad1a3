"""Service for salad recipes."""

from __future__ import annotations

import logging
import uuid

from .models import (
    Recipe,
    RecipeFilter,
    ValidationError,
    _repository_errors,
    _validation_errors,
)


class RecipeService:
    """Validates recipes and passes them to storage."""

    def __init__(self, repo, logger: logging.Logger) -> None:
        self._repo = repo
        self._log = logger

    @staticmethod
    def _verify(recipe: Recipe) -> None:
        if recipe.number_of_servings <= 0:
            raise ValidationError("negative or zero number of servings")
        if recipe.time_to_cook <= 0:
            raise ValidationError("negative or zero time to cook")

    def create(self, recipe: Recipe) -> uuid.UUID:
        """Store a new recipe and return the id given to it."""
        self._log.info("create recipe for salad: %s", recipe.salad_id)
        with _validation_errors(self._log, "creating recipe"):
            self._verify(recipe)
        with _repository_errors(self._log, "creating recipe"):
            return self._repo.create(recipe)

    def update(self, recipe: Recipe) -> None:
        self._log.info("updating recipe with id: %s", recipe.id)
        with _validation_errors(self._log, "updating recipe"):
            self._verify(recipe)
        with _repository_errors(self._log, "updating recipe"):
            self._repo.update(recipe)

    def get_by_id(self, recipe_id: uuid.UUID) -> Recipe:
        self._log.info("getting recipe by id: %s", recipe_id)
        with _repository_errors(self._log, "getting recipe by id"):
            return self._repo.get_by_id(recipe_id)

    def get_by_salad_id(self, salad_id: uuid.UUID) -> Recipe:
        self._log.info("getting recipe by salad id: %s", salad_id)
        with _repository_errors(self._log, "getting recipe by salad id"):
            return self._repo.get_by_salad_id(salad_id)

    def get_all(self, recipe_filter: RecipeFilter, page: int) -> list[Recipe]:
        """Return one page of the recipes that pass *recipe_filter*."""
        self._log.info("getting all recipes with filter: %s", recipe_filter)
        with _repository_errors(self._log, "getting all recipes"):
            return self._repo.get_all(recipe_filter, page)

    def delete_by_id(self, recipe_id: uuid.UUID) -> None:
        self._log.info("deleting recipe by id: %s", recipe_id)
        with _repository_errors(self._log, "deleting recipe by id"):
            self._repo.delete_by_id(recipe_id)