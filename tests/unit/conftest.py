"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

from collections.abc import Callable

import pytest

from mdmerge.api.context.build_context import build_context
from mdmerge.api.context.Context import Context
from tests.conftest import minimal_config_dict, run_cmd

__all__ = [
    "build_doc_context",
    "minimal_config_dict",
    "run_cmd",
]


@pytest.fixture
def build_doc_context() -> Callable[..., Context]:
    """Build the context of some files, dropping the duplicate warnings."""

    def _build(*files: str) -> Context:
        context, _warnings = build_context(list(files))
        return context

    return _build
