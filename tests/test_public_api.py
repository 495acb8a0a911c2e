"""
Public API tests - the module-level create_error and friends
"""

import pickle

import pytest

import http_errors
from http_errors import (
    HttpError,
    create_error,
    is_http_error,
    release_error,
)


@pytest.fixture(autouse=True)
def clean_default_pool():
    create_error.pool.clear()
    yield
    create_error.pool.clear()


def test_create_error_basics():
    err = create_error(404)

    assert err.status == err.status_code == 404
    assert err.expose is True
    assert err.message == "Not Found"
    assert is_http_error(err)


def test_variant_classes_as_module_attributes():
    from http_errors import NotFound, NotFoundError

    assert NotFound is NotFoundError
    assert create_error[404] is NotFoundError
    assert create_error["NotFound"] is NotFoundError
    assert http_errors.InternalServerError is create_error[500]


def test_unknown_module_attribute():
    with pytest.raises(AttributeError):
        http_errors.DoesNotExistError


def test_factory_surface():
    assert create_error.HttpError is HttpError
    assert create_error.is_http_error(create_error(400))
    assert not create_error.is_http_error(ValueError("plain"))


def test_abstract_base_from_factory():
    with pytest.raises(TypeError, match="cannot construct abstract class"):
        create_error.HttpError()


def test_release_error_uses_default_pool():
    err = create_error(403)

    assert release_error(err) is True
    assert create_error(403) is err


def test_variant_instances_pickle_by_reference():
    err = http_errors.NotFoundError("gone")
    err.resource = "user"

    restored = pickle.loads(pickle.dumps(err))

    assert type(restored) is http_errors.NotFoundError
    assert restored.message == "gone"
    assert restored.resource == "user"
    assert restored.status == 404


def test_raise_and_catch_by_variant():
    with pytest.raises(http_errors.UnauthorizedError) as exc_info:
        raise create_error(401, "token expired")

    assert exc_info.value.expose is True
