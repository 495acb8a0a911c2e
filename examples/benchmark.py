#!/usr/bin/env python3
"""
Micro-benchmark: pooled vs. unpooled error construction

Usage:
    python examples/benchmark.py
"""

import timeit

from http_errors import create_error, release_error

ITERATIONS = 50_000


def pooled_404():
    err = create_error(404)
    release_error(err)


def pooled_500():
    err = create_error(500)
    release_error(err)


def custom_message_404():
    create_error(404, "Resource not found")


def with_properties_400():
    create_error(400, {"field": "email"})


def unpooled_bare_503():
    create_error(503)


def adopt_exception():
    create_error(ValueError("oops"))


def stack_read_404():
    err = create_error(404, "Resource not found")
    return err.stack


CASES = [
    ("404 without message (pooled)", pooled_404),
    ("500 without message (pooled)", pooled_500),
    ("404 with custom message", custom_message_404),
    ("400 with properties", with_properties_400),
    ("503 without message (unpooled)", unpooled_bare_503),
    ("adopt ValueError", adopt_exception),
    ("404 + stack read", stack_read_404),
]


def main():
    print("Warming up...")
    for _ in range(10_000):
        create_error(404)
        create_error(500, "Internal Server Error")

    print("\n=== HTTP Error Creation Benchmarks ===\n")
    for title, fn in CASES:
        seconds = timeit.timeit(fn, number=ITERATIONS)
        ops = ITERATIONS / seconds if seconds else float("inf")
        print(f"{title:<36} {ops:>14,.0f} ops/sec")


if __name__ == "__main__":
    main()
