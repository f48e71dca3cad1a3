import logging
import uuid
from unittest.mock import Mock

import pytest

from saladbook.models import SaladType, ServiceError, ValidationError
from saladbook.salad_type import SaladTypeService


@pytest.fixture
def repo():
    return Mock()


@pytest.fixture
def service(repo):
    return SaladTypeService(repo, logging.getLogger("test.salad_type"))


def _salad_type(name="vegetable"):
    return SaladType(id=uuid.uuid4(), name=name, description="description")


def test_create_success(service, repo):
    salad_type = _salad_type()
    assert service.create(salad_type) is None
    repo.create.assert_called_once_with(salad_type)


def test_create_empty_name(service, repo):
    with pytest.raises(ValidationError, match="creating salad type: empty name"):
        service.create(_salad_type(name=""))
    repo.create.assert_not_called()


def test_create_repo_error(service, repo):
    repo.create.side_effect = RuntimeError("repo error")
    with pytest.raises(ServiceError, match="creating salad type: repo error"):
        service.create(_salad_type())


def test_update_empty_name(service, repo):
    with pytest.raises(ValidationError, match="updating salad type: empty name"):
        service.update(_salad_type(name=""))
    repo.update.assert_not_called()


def test_update_success(service, repo):
    salad_type = _salad_type()
    service.update(salad_type)
    repo.update.assert_called_once_with(salad_type)


def test_get_by_id_returns_repo_value(service, repo):
    expected = _salad_type()
    repo.get_by_id.return_value = expected
    assert service.get_by_id(expected.id) == expected


def test_get_by_id_repo_error(service, repo):
    repo.get_by_id.side_effect = RuntimeError("repo error")
    with pytest.raises(ServiceError, match="getting salad type by id"):
        service.get_by_id(uuid.uuid4())


def test_get_all_returns_page(service, repo):
    types = [_salad_type(), _salad_type("fruit")]
    repo.get_all.return_value = (types, 1)
    assert service.get_all(1) == (types, 1)
    repo.get_all.assert_called_once_with(1)


def test_get_all_repo_error(service, repo):
    repo.get_all.side_effect = RuntimeError("repo error")
    with pytest.raises(ServiceError, match="getting all salad types"):
        service.get_all(1)


def test_get_all_by_salad_id(service, repo):
    salad_id = uuid.uuid4()
    types = [_salad_type()]
    repo.get_all_by_salad_id.return_value = types
    assert service.get_all_by_salad_id(salad_id) == types


def test_get_all_by_salad_id_repo_error(service, repo):
    repo.get_all_by_salad_id.side_effect = RuntimeError("repo error")
    with pytest.raises(ServiceError, match="getting all types of salad"):
        service.get_all_by_salad_id(uuid.uuid4())


def test_delete_by_id_repo_error(service, repo):
    repo.delete_by_id.side_effect = RuntimeError("repo error")
    with pytest.raises(ServiceError, match="deleting salad type by id"):
        service.delete_by_id(uuid.uuid4())


def test_link_passes_ids_in_order(service, repo):
    salad_id, type_id = uuid.uuid4(), uuid.uuid4()
    service.link(salad_id, type_id)
    repo.link.assert_called_once_with(salad_id, type_id)


def test_link_repo_error(service, repo):
    repo.link.side_effect = RuntimeError("repo error")
    with pytest.raises(ServiceError, match="linking salad type"):
        service.link(uuid.uuid4(), uuid.uuid4())


def test_unlink_repo_error(service, repo):
    repo.unlink.side_effect = RuntimeError("repo error")
    with pytest.raises(ServiceError, match="unlinking salad type"):
        service.unlink(uuid.uuid4(), uuid.uuid4())