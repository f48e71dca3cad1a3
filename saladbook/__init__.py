"""Services, validators and data classes for a salad recipe book over caller-supplied repositories."""

__version__ = "0.1.0"

__all__ = [
    "comment",
    "ingredient",
    "ingredient_type",
    "keywords",
    "measurement",
    "models",
    "recipe",
    "recipe_step",
    "recipe_step_interactor",
    "salad",
    "salad_interactor",
    "salad_type",
    "url_validator",
    "user",
]