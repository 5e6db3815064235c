import logging

import pytest

from schema_checker import SchemaChecker
from schema_checker.models import meta_schema


@pytest.fixture
def checker():
    return SchemaChecker()


@pytest.fixture(autouse=True)
def _restore_logging():
    # The CLI reconfigures the root logger; keep tests isolated from each other.
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _clear_meta_schema_cache():
    yield
    meta_schema.clear_cache()
