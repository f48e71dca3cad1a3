import logging
import uuid
from unittest.mock import Mock

import pytest

from saladbook.ingredient_type import IngredientTypeService
from saladbook.models import IngredientType, ServiceError, ValidationError


@pytest.fixture
def repo():
    return Mock()


@pytest.fixture
def service(repo):
    return IngredientTypeService(repo, logging.getLogger("test"))


def make_type(name="vegetables"):
    return IngredientType(id=uuid.uuid4(), name=name, description="description")


def test_create_passes_to_repo(service, repo):
    ingredient_type = make_type()
    service.create(ingredient_type)
    repo.create.assert_called_once_with(ingredient_type)


def test_create_rejects_empty_name(service, repo):
    with pytest.raises(ValidationError, match="^creating ingredient type: empty name$"):
        service.create(make_type(""))
    repo.create.assert_not_called()


def test_create_wraps_repo_error(service, repo):
    repo.create.side_effect = RuntimeError("boom")
    with pytest.raises(ServiceError, match="creating ingredient type: boom"):
        service.create(make_type())


def test_update_rejects_empty_name(service, repo):
    with pytest.raises(ValidationError, match="empty name"):
        service.update(make_type(""))
    repo.update.assert_not_called()


def test_update_passes_to_repo(service, repo):
    ingredient_type = make_type()
    service.update(ingredient_type)
    repo.update.assert_called_once_with(ingredient_type)


def test_get_by_id(service, repo):
    ingredient_type = make_type()
    repo.get_by_id.return_value = ingredient_type
    assert service.get_by_id(ingredient_type.id) is ingredient_type


def test_get_by_id_wraps_error(service, repo):
    repo.get_by_id.side_effect = RuntimeError("boom")
    with pytest.raises(ServiceError, match="getting ingredient type by id"):
        service.get_by_id(uuid.uuid4())


def test_get_all(service, repo):
    types = [make_type("a"), make_type("b")]
    repo.get_all.return_value = types
    assert service.get_all() == types


def test_get_all_wraps_error(service, repo):
    repo.get_all.side_effect = RuntimeError("boom")
    with pytest.raises(ServiceError, match="getting all ingredient types"):
        service.get_all()


def test_delete_by_id(service, repo):
    type_id = uuid.uuid4()
    service.delete_by_id(type_id)
    repo.delete_by_id.assert_called_once_with(type_id)


def test_delete_by_id_wraps_error(service, repo):
    repo.delete_by_id.side_effect = RuntimeError("boom")
    with pytest.raises(ServiceError, match="deleting ingredient type by id"):
        service.delete_by_id(uuid.uuid4())