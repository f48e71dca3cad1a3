import logging
import uuid

import pytest

from saladbook.models import RecipeStep, ServiceError, ValidationError
from saladbook.recipe_step_interactor import RecipeStepInteractor
from saladbook.url_validator import UrlValidatorService


class _BannedWords:
    def __init__(self, *banned):
        self.banned = set(banned)
        self.checked = []

    def verify(self, word):
        self.checked.append(word)
        if word in self.banned:
            raise ValidationError(f"verifying keywords: found {word}")


class _StepService:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def _call(self, name, *args):
        self.calls.append((name, *args))
        if self.error is not None:
            raise self.error
        return self.result

    def create(self, step):
        return self._call("create", step)

    def update(self, step):
        return self._call("update", step)

    def get_by_id(self, step_id):
        return self._call("get_by_id", step_id)

    def get_all_by_recipe_id(self, recipe_id):
        return self._call("get_all_by_recipe_id", recipe_id)

    def delete_by_id(self, step_id):
        return self._call("delete_by_id", step_id)

    def delete_all_by_recipe_id(self, recipe_id):
        return self._call("delete_all_by_recipe_id", recipe_id)


def _step(name="first", description="chop the tomatoes"):
    return RecipeStep(
        id=uuid.uuid4(),
        recipe_id=uuid.uuid4(),
        name=name,
        description=description,
        step_num=1,
    )


def test_create_checks_every_word_and_calls_service():
    validator = _BannedWords("banned")
    service = _StepService()
    step = _step()
    RecipeStepInteractor(service, [validator]).create(step)
    assert validator.checked == ["first", "chop", "the", "tomatoes"]
    assert service.calls == [("create", step)]


@pytest.mark.parametrize("method", ["create", "update"])
def test_banned_word_in_name_is_rejected(method):
    service = _StepService()
    interactor = RecipeStepInteractor(service, [_BannedWords("banned")])
    with pytest.raises(ValidationError) as exc_info:
        getattr(interactor, method)(_step(name="a banned step"))
    assert str(exc_info.value) == (
        "recipe step interactor (name): verifying keywords: found banned"
    )
    assert service.calls == []


@pytest.mark.parametrize("method", ["create", "update"])
def test_banned_word_in_description_is_rejected(method):
    service = _StepService()
    interactor = RecipeStepInteractor(service, [_BannedWords("banned")])
    with pytest.raises(ValidationError) as exc_info:
        getattr(interactor, method)(_step(description="mix banned leaves"))
    assert str(exc_info.value).startswith("recipe step interactor (description): ")
    assert service.calls == []


def test_url_in_description_is_rejected():
    url_validator = UrlValidatorService(logging.getLogger("saladbook.tests.interactor"))
    service = _StepService()
    interactor = RecipeStepInteractor(service, [url_validator])
    with pytest.raises(ValidationError) as exc_info:
        interactor.create(_step(description="see http://example.com"))
    assert "verifying url: found http://example.com" in str(exc_info.value)
    assert service.calls == []


def test_first_failing_validator_stops_the_check():
    first = _BannedWords("bad")
    second = _BannedWords()
    with pytest.raises(ValidationError):
        RecipeStepInteractor(_StepService(), [first, second]).create(
            _step(name="bad", description="fine")
        )
    assert first.checked == ["bad"]
    assert second.checked == []


@pytest.mark.parametrize("method", ["create", "update"])
def test_service_errors_are_prefixed(method):
    error = ServiceError("repo error")
    interactor = RecipeStepInteractor(_StepService(error=error), [_BannedWords()])
    with pytest.raises(ServiceError) as exc_info:
        getattr(interactor, method)(_step())
    assert str(exc_info.value) == "recipe step interactor: repo error"
    assert exc_info.value.__cause__ is error


def test_service_validation_errors_keep_their_kind():
    error = ValidationError("creating recipe step: empty name")
    interactor = RecipeStepInteractor(_StepService(error=error), [])
    with pytest.raises(ValidationError) as exc_info:
        interactor.create(_step(name=""))
    assert str(exc_info.value) == (
        "recipe step interactor: creating recipe step: empty name"
    )


def test_update_calls_service():
    service = _StepService()
    step = _step()
    RecipeStepInteractor(service, []).update(step)
    assert service.calls == [("update", step)]


def test_get_by_id_delegates():
    step = _step()
    service = _StepService(result=step)
    assert RecipeStepInteractor(service, []).get_by_id(step.id) == step
    assert service.calls == [("get_by_id", step.id)]


def test_get_all_by_recipe_id_delegates():
    steps = [_step(), _step()]
    recipe_id = uuid.uuid4()
    service = _StepService(result=steps)
    assert RecipeStepInteractor(service, []).get_all_by_recipe_id(recipe_id) == steps
    assert service.calls == [("get_all_by_recipe_id", recipe_id)]


def test_delete_methods_delegate():
    service = _StepService()
    interactor = RecipeStepInteractor(service, [])
    step_id, recipe_id = uuid.uuid4(), uuid.uuid4()
    interactor.delete_by_id(step_id)
    interactor.delete_all_by_recipe_id(recipe_id)
    assert service.calls == [
        ("delete_by_id", step_id),
        ("delete_all_by_recipe_id", recipe_id),
    ]


def test_pass_through_errors_are_not_wrapped():
    error = ServiceError("getting recipe step by id: repo error")
    with pytest.raises(ServiceError) as exc_info:
        RecipeStepInteractor(_StepService(error=error), []).get_by_id(uuid.uuid4())
    assert exc_info.value is error