"""Service for ingredients and their links to recipes."""

from __future__ import annotations

import logging
import uuid

from .models import Ingredient, ValidationError, _repository_errors, _validation_errors


class IngredientService:
    """Validates ingredients and passes them to storage."""

    def __init__(self, repo, logger: logging.Logger) -> None:
        self._repo = repo
        self._log = logger

    @staticmethod
    def _verify(ingredient: Ingredient) -> None:
        if not ingredient.name:
            raise ValidationError("empty name")
        if ingredient.calories < 0:
            raise ValidationError("negative calories")

    def create(self, ingredient: Ingredient) -> None:
        self._log.info("creating ingredient: %s", ingredient.name)
        with _validation_errors(self._log, "creating ingredient"):
            self._verify(ingredient)
        with _repository_errors(self._log, "creating ingredient"):
            self._repo.create(ingredient)

    def update(self, ingredient: Ingredient) -> None:
        self._log.info("updating ingredient: %s", ingredient.name)
        with _validation_errors(self._log, "updating ingredient"):
            self._verify(ingredient)
        with _repository_errors(self._log, "updating ingredient"):
            self._repo.update(ingredient)

    def get_by_id(self, ingredient_id: uuid.UUID) -> Ingredient:
        self._log.info("getting ingredient by id: %s", ingredient_id)
        with _repository_errors(self._log, "getting ingredient by id"):
            return self._repo.get_by_id(ingredient_id)

    def get_all(self, page: int) -> tuple[list[Ingredient], int]:
        """Return one page of ingredients and the number of pages."""
        self._log.info("getting all ingredients on page: %d", page)
        with _repository_errors(self._log, "getting all ingredients"):
            ingredients, num_pages = self._repo.get_all(page)
        return ingredients, num_pages

    def delete_by_id(self, ingredient_id: uuid.UUID) -> None:
        self._log.info("deleting ingredient by id: %s", ingredient_id)
        with _repository_errors(self._log, "deleting ingredient by id"):
            self._repo.delete_by_id(ingredient_id)

    def get_all_by_recipe_id(self, recipe_id: uuid.UUID) -> list[Ingredient]:
        self._log.info("getting all ingredients by recipe id: %s", recipe_id)
        with _repository_errors(self._log, "getting all ingredients by recipe id"):
            return self._repo.get_all_by_recipe_id(recipe_id)

    def link(self, recipe_id: uuid.UUID, ingredient_id: uuid.UUID) -> uuid.UUID:
        """Add an ingredient to a recipe and return the id of the link."""
        self._log.info("adding ingredient %s to recipe %s", ingredient_id, recipe_id)
        with _repository_errors(self._log, "linking ingredient to recipe"):
            return self._repo.link(recipe_id, ingredient_id)

    def unlink(self, recipe_id: uuid.UUID, ingredient_id: uuid.UUID) -> None:
        self._log.info("removing ingredient %s from recipe %s", ingredient_id, recipe_id)
        with _repository_errors(self._log, "unlinking ingredient from recipe"):
            self._repo.unlink(recipe_id, ingredient_id)