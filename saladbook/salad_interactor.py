"""Salad operations guarded by word validators."""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from typing import Iterable, Iterator

from .models import RecipeFilter, Salad, ServiceError, ValidationError


@contextmanager
def _prefixed(prefix: str) -> Iterator[None]:
    """Re-raise any failure with *prefix* in front of its message."""
    try:
        yield
    except ValidationError as exc:
        raise ValidationError(f"{prefix}: {exc}") from exc
    except Exception as exc:
        raise ServiceError(f"{prefix}: {exc}") from exc


class SaladInteractor:
    """Checks every word of a salad's texts before handing the salad to the service."""

    def __init__(self, service, validators: Iterable) -> None:
        self._service = service
        self._validators = list(validators)

    def _verify_text(self, text: str) -> None:
        for word in text.split():
            for validator in self._validators:
                validator.verify(word)

    def _verify_salad(self, salad: Salad) -> None:
        with _prefixed("salad interactor (name)"):
            self._verify_text(salad.name)
        with _prefixed("salad interactor (description)"):
            self._verify_text(salad.description)

    def create(self, salad: Salad) -> uuid.UUID:
        """Validate and store a new salad, returning its id."""
        self._verify_salad(salad)
        with _prefixed("salad interactor"):
            return self._service.create(salad)

    def update(self, salad: Salad) -> None:
        self._verify_salad(salad)
        with _prefixed("salad interactor"):
            self._service.update(salad)

    def get_by_id(self, salad_id: uuid.UUID) -> Salad:
        return self._service.get_by_id(salad_id)

    def get_all(
        self, recipe_filter: RecipeFilter, page: int
    ) -> tuple[list[Salad], int]:
        return self._service.get_all(recipe_filter, page)

    def get_all_by_user_id(self, user_id: uuid.UUID) -> list[Salad]:
        return self._service.get_all_by_user_id(user_id)

    def delete_by_id(self, salad_id: uuid.UUID) -> None:
        self._service.delete_by_id(salad_id)

    def get_all_rated_by_user(
        self, user_id: uuid.UUID, page: int
    ) -> tuple[list[Salad], int]:
        return self._service.get_all_rated_by_user(user_id, page)