# tests/conftest.py
import pytest

from unitas.core.dimensions import DIM_0
from unitas.core.unit import Kind, QuantityMetadata


@pytest.fixture
def widget_meta():
    """Metadata for a throwaway scalar quantity used by generator tests."""
    return QuantityMetadata(
        symbol="x",
        unicode_symbol="x",
        singular="ex",
        plural="exes",
        kind=Kind.SCALAR,
        dim=DIM_0,
    )
