# tests/unit/test_is_http_error.py
"""
is_http_error tests - identity and structural recognition
"""

import pytest

from http_errors.core.variants import is_http_error


def test_factory_values_are_http_errors(factory):
    assert is_http_error(factory(404))
    assert is_http_error(factory(500, "boom"))
    assert is_http_error(factory(ValueError("adopted")))
    assert is_http_error(factory(302))


def test_variant_instances_are_http_errors(registry):
    for code in (400, 404, 418, 500, 503):
        assert is_http_error(registry[code]())


def test_compatible_foreign_error_is_recognized():
    err = RuntimeError("from another library")
    err.expose = False
    err.status = err.status_code = 502

    assert is_http_error(err)


@pytest.mark.parametrize("value", [
    None,
    "404",
    404,
    {"status": 404, "status_code": 404, "expose": True},
    Exception("plain"),
])
def test_non_errors_are_rejected(value):
    assert not is_http_error(value)


def test_mismatched_status_is_rejected():
    err = RuntimeError()
    err.expose = True
    err.status = 404
    err.status_code = 400

    assert not is_http_error(err)


def test_non_bool_expose_is_rejected():
    err = RuntimeError()
    err.expose = "yes"
    err.status = err.status_code = 404

    assert not is_http_error(err)


def test_bool_status_code_is_rejected():
    err = RuntimeError()
    err.expose = True
    err.status = err.status_code = True

    assert not is_http_error(err)


def test_bool_status_is_rejected():
    err = RuntimeError()
    err.expose = True
    err.status = True
    err.status_code = 1

    assert not is_http_error(err)


def test_non_int_status_is_rejected():
    err = RuntimeError()
    err.expose = True
    err.status = 404.0
    err.status_code = 404

    assert not is_http_error(err)
