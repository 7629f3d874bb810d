import pytest

from weton import api
from weton.bootstrap import build_registry


@pytest.fixture
def fresh_registry():
    """Swap in a newly built registry for tests that register engines."""
    saved = api._registry
    reg = build_registry()
    api.set_registry(reg)
    yield reg
    api.set_registry(saved)
