"""Domain records, the recipe filter and the errors shared by the services."""

from __future__ import annotations

import enum
import logging
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

_NIL_ID = uuid.UUID(int=0)


class ServiceError(Exception):
    """A service operation failed."""


class ValidationError(ServiceError):
    """Input data was rejected before it reached storage."""


class SaladStatus(enum.IntEnum):
    """Life-cycle states of a published salad."""

    EDITING = 1
    MODERATION = 2
    REJECTED = 3
    PUBLISHED = 4
    STORED = 5


@dataclass
class RecipeFilter:
    """Criteria for listing salads and recipes."""

    available_ingredients: list[uuid.UUID] = field(default_factory=list)
    min_rate: float = 0.0
    salad_types: list[uuid.UUID] = field(default_factory=list)
    status: int = 0


@dataclass
class Comment:
    id: uuid.UUID = _NIL_ID
    author_id: uuid.UUID = _NIL_ID
    salad_id: uuid.UUID = _NIL_ID
    text: str = ""
    rating: int = 0


@dataclass
class Ingredient:
    id: uuid.UUID = _NIL_ID
    name: str = ""
    calories: int = 0
    type_id: uuid.UUID = _NIL_ID


@dataclass
class IngredientType:
    id: uuid.UUID = _NIL_ID
    name: str = ""
    description: str = ""


@dataclass
class KeyWord:
    id: uuid.UUID = _NIL_ID
    word: str = ""


@dataclass
class Measurement:
    id: uuid.UUID = _NIL_ID
    name: str = ""
    grams: int = 0


@dataclass
class Recipe:
    id: uuid.UUID = _NIL_ID
    salad_id: uuid.UUID = _NIL_ID
    status: int = 0
    number_of_servings: int = 0
    time_to_cook: int = 0
    rating: float = 0.0


@dataclass
class RecipeStep:
    id: uuid.UUID = _NIL_ID
    recipe_id: uuid.UUID = _NIL_ID
    name: str = ""
    description: str = ""
    step_num: int = 0


@dataclass
class Salad:
    id: uuid.UUID = _NIL_ID
    author_id: uuid.UUID = _NIL_ID
    name: str = ""
    description: str = ""


@dataclass
class SaladType:
    id: uuid.UUID = _NIL_ID
    name: str = ""
    description: str = ""


@dataclass
class User:
    id: uuid.UUID = _NIL_ID
    name: str = ""
    username: str = ""
    password: str = ""
    email: str = ""
    role: str = ""


@contextmanager
def _repository_errors(logger: logging.Logger, action: str) -> Iterator[None]:
    """Log a storage failure and re-raise it as a ServiceError prefixed by *action*."""
    try:
        yield
    except Exception as exc:
        logger.error("%s error: %s", action, exc)
        raise ServiceError(f"{action}: {exc}") from exc


@contextmanager
def _validation_errors(logger: logging.Logger, action: str) -> Iterator[None]:
    """Log a rejected input and re-raise it prefixed by *action*."""
    try:
        yield
    except ValidationError as exc:
        logger.warning("%s: %s", action, exc)
        raise ValidationError(f"{action}: {exc}") from exc