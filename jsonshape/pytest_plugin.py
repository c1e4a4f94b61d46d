"""pytest plugin for jsonshape.

Registered through the pytest11 entry point in pyproject.toml, so the
fixture is available as soon as the package is installed.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from .assertions import assert_json


@pytest.fixture(scope="session")
def assert_json_shape() -> Callable[..., None]:
    """
    Fixture returning the assert_json callable.

    Session-scoped because matchers and the engine hold no state.

    Usage in tests::

        def test_user(assert_json_shape, client):
            assert_json_shape(Object({"id": UUID()}), client.get("/me").text)
    """

    def _assert(expected: Any, body: str | bytes | bytearray, **options: Any) -> None:
        __tracebackhide__ = True
        assert_json(expected, body, **options)

    return _assert
