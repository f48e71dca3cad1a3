# saladbook

The business-logic layer of a salad recipe book. Each service checks its
input, passes the work to a repository you supply, logs what happens and
raises an error when something goes wrong.

## Installation

```
pip install saladbook
```

To run the test suite as well:

```
pip install "saladbook[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `saladbook.models` | Data classes `Salad`, `Recipe`, `RecipeStep`, `Ingredient`, `IngredientType`, `Measurement`, `Comment`, `SaladType`, `KeyWord`, `User`; `RecipeFilter`; the `SaladStatus` enum (`EDITING`, `MODERATION`, `REJECTED`, `PUBLISHED`, `STORED`); the errors `ServiceError` and `ValidationError` |
| `saladbook.salad` | `SaladService`: rejects an empty name |
| `saladbook.salad_interactor` | `SaladInteractor`: checks every word of a salad's name and description with validators, then hands the salad to a salad service |
| `saladbook.salad_type` | `SaladTypeService`: rejects an empty name; links and unlinks types and salads |
| `saladbook.recipe` | `RecipeService`: servings and cooking time must be positive |
| `saladbook.recipe_step` | `RecipeStepService`: name and description must be non-empty, step number positive |
| `saladbook.recipe_step_interactor` | `RecipeStepInteractor`: the word-validator check for recipe steps |
| `saladbook.ingredient` | `IngredientService`: non-empty name, calories not negative; links ingredients to recipes |
| `saladbook.ingredient_type` | `IngredientTypeService`: rejects an empty name |
| `saladbook.measurement` | `MeasurementService`: non-empty name, positive grams; `update_link` needs a positive amount |
| `saladbook.comment` | `CommentService`: the rating must lie between the `min_rate` and `max_rate` given to the constructor |
| `saladbook.user` | `UserService`: username, password and name must be non-empty and the e-mail address well formed |
| `saladbook.keywords` | `KeywordValidatorService`: keeps a list of banned words and rejects them |
| `saladbook.url_validator` | `UrlValidatorService` and `is_url`: reject words that look like URLs |

## Repositories and loggers

The services store nothing themselves. A repository is any object with the
methods a service calls, such as `create`, `update`, `get_by_id`, `get_all`
and `delete_by_id`. Paged listings return a `(items, number_of_pages)`
tuple. A repository reports failure by raising an exception; the service
logs it and raises a `ServiceError` whose message starts with the operation
and whose cause is the original exception.

A logger is any object with `info`, `warning` and `error` methods; a
standard `logging.Logger` works.

`KeywordValidatorService` reads the banned words from its repository's
`get_all` when it is constructed (raising `ServiceError` if that fails) and
adds words to its list as they are created or updated. `verify` compares
the lower-cased word with that list.

The interactors' read and delete methods call the underlying service
directly. Their `create` and `update` run every validator's `verify` on
each whitespace-separated word first.

## Example

```python
import logging
import uuid

from saladbook.models import Salad
from saladbook.salad import SaladService
from saladbook.salad_interactor import SaladInteractor
from saladbook.url_validator import UrlValidatorService


class MemorySaladRepo:
    def __init__(self):
        self.salads = {}

    def create(self, salad):
        new_id = uuid.uuid4()
        self.salads[new_id] = salad
        return new_id

    def get_by_id(self, salad_id):
        return self.salads[salad_id]


log = logging.getLogger("saladbook")
salads = SaladInteractor(
    SaladService(MemorySaladRepo(), log),
    [UrlValidatorService(log)],
)

salad_id = salads.create(Salad(name="greek", description="fresh and simple"))
print(salads.get_by_id(salad_id).name)
```

This call raises `ValidationError`, because the description contains
something that looks like a URL:

```python
salads.create(Salad(name="spam", description="visit example.com"))
```

## Errors

* `ValidationError` (a subclass of `ServiceError`): the input was rejected
  before the repository was called, for example an empty name, a rating out
  of range, a non-positive amount, a banned word or a URL.
* `ServiceError`: raised on its own when a repository call fails.

## What it does not do

The package contains no repositories: there is no database storage, and
every service needs a repository object supplied by the caller. It has no
HTTP server, no command-line program and no login or password hashing; it
is only the layer of checks and calls between such parts.