# tests/unit/test_pool.py
"""
Error pool tests - bounded LIFO slots, canonical reset, double release
"""

import logging

import pytest

from http_errors.core.errors import ErrorAlreadyReleasedError
from http_errors.core.pool import DEFAULT_POOLED_STATUSES, ErrorPool


@pytest.fixture
def pool():
    return ErrorPool(statuses=(404, 500), capacity=2)


def test_default_pool_layout():
    pool = ErrorPool()

    assert pool.statuses == [400, 401, 403, 404, 500]
    assert pool.capacity == 10
    assert tuple(pool.statuses) == DEFAULT_POOLED_STATUSES


def test_acquire_from_empty_or_unpooled_slot(pool):
    assert pool.acquire(404) is None
    assert pool.acquire(503) is None


def test_release_then_acquire_is_lifo(pool, registry):
    first = registry[404]()
    second = registry[404]()

    assert pool.release(first, 404, "Not Found") is True
    assert pool.release(second, 404, "Not Found") is True

    assert pool.acquire(404) is second
    assert pool.acquire(404) is first
    assert pool.acquire(404) is None


def test_release_beyond_capacity_is_dropped(pool, registry):
    results = [pool.release(registry[404](), 404, "Not Found") for _ in range(5)]

    assert results == [True, True, False, False, False]
    assert pool.size(404) == 2


def test_release_unpooled_status_is_dropped(pool, registry):
    assert pool.release(registry[503](), 503, "Service Unavailable") is False
    assert pool.size(503) == 0
    assert not pool.has_slot(503)


def test_release_resets_to_canonical_shape(pool, registry):
    err = registry[404]("custom message")
    err.user_id = 7
    err.stack
    err.__cause__ = ValueError("cause")

    pool.release(err, 404, "Not Found")

    assert err.message == "Not Found"
    assert str(err) == "Not Found"
    assert err.args == ("Not Found",)
    assert not hasattr(err, "user_id")
    assert "stack" not in err.__dict__
    assert err.__cause__ is None
    assert err.status == err.status_code == 404
    assert err.expose is True


def test_release_keeps_stamped_fields(pool, registry):
    err = registry[404]()
    err.status = err.status_code = 404
    err.expose = True
    err.name = "NotFoundError"

    pool.release(err, 404, "Not Found")

    assert set(err.__dict__) == {"status", "status_code", "expose", "message", "name"}


def test_acquire_drops_stored_stack(pool, registry):
    err = registry[500]()
    pool.release(err, 500, "Internal Server Error")
    err.stack = "stale"

    pooled = pool.acquire(500)

    assert pooled is err
    assert "stack" not in pooled.__dict__


def test_double_release_fails_fast(pool, registry):
    err = registry[404]()
    pool.release(err, 404, "Not Found")

    with pytest.raises(ErrorAlreadyReleasedError) as exc_info:
        pool.release(err, 404, "Not Found")

    assert exc_info.value.status == 404
    assert exc_info.value.error_code == "ALREADY_RELEASED"
    assert pool.size(404) == 1


def test_release_after_reacquire_is_allowed(pool, registry):
    err = registry[404]()
    pool.release(err, 404, "Not Found")
    assert pool.acquire(404) is err

    assert pool.release(err, 404, "Not Found") is True


def test_clear_empties_every_slot(pool, registry):
    pool.release(registry[404](), 404, "Not Found")
    pool.release(registry[500](), 500, "Internal Server Error")

    pool.clear()

    assert pool.size(404) == 0
    assert pool.size(500) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ErrorPool(capacity=-1)


def test_zero_capacity_pools_nothing(registry):
    pool = ErrorPool(statuses=(404,), capacity=0)

    assert pool.release(registry[404](), 404, "Not Found") is False
    assert pool.acquire(404) is None


def test_full_pool_logs_drop(pool, registry, caplog):
    caplog.set_level(logging.DEBUG, logger="http_errors.core.pool")
    for _ in range(3):
        pool.release(registry[404](), 404, "Not Found")

    assert "404 pool is full" in caplog.text
