"""Recipe step operations guarded by word validators."""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from typing import Iterable, Iterator

from .models import RecipeStep, ServiceError, ValidationError


@contextmanager
def _prefixed(prefix: str) -> Iterator[None]:
    """Re-raise any failure with *prefix* in front of its message."""
    try:
        yield
    except ValidationError as exc:
        raise ValidationError(f"{prefix}: {exc}") from exc
    except Exception as exc:
        raise ServiceError(f"{prefix}: {exc}") from exc


class RecipeStepInteractor:
    """Checks every word of a step's texts before handing the step to the service."""

    def __init__(self, service, validators: Iterable) -> None:
        self._service = service
        self._validators = list(validators)

    def _verify_text(self, text: str) -> None:
        for word in text.split():
            for validator in self._validators:
                validator.verify(word)

    def _verify_step(self, step: RecipeStep) -> None:
        with _prefixed("recipe step interactor (name)"):
            self._verify_text(step.name)
        with _prefixed("recipe step interactor (description)"):
            self._verify_text(step.description)

    def create(self, step: RecipeStep) -> None:
        self._verify_step(step)
        with _prefixed("recipe step interactor"):
            self._service.create(step)

    def update(self, step: RecipeStep) -> None:
        self._verify_step(step)
        with _prefixed("recipe step interactor"):
            self._service.update(step)

    def get_by_id(self, step_id: uuid.UUID) -> RecipeStep:
        return self._service.get_by_id(step_id)

    def get_all_by_recipe_id(self, recipe_id: uuid.UUID) -> list[RecipeStep]:
        return self._service.get_all_by_recipe_id(recipe_id)

    def delete_by_id(self, step_id: uuid.UUID) -> None:
        self._service.delete_by_id(step_id)

    def delete_all_by_recipe_id(self, recipe_id: uuid.UUID) -> None:
        self._service.delete_all_by_recipe_id(recipe_id)