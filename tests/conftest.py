# tests/conftest.py
import pytest
from siunits.units.registry import DEFAULT_REGISTRY as _qreg, QuantityRegistry


@pytest.fixture(scope="session")
def qreg():
    return _qreg

@pytest.fixture
def fresh_registry():
    return QuantityRegistry()

def pytest_generate_tests(metafunc):
    # any test taking `quantity_type` runs once per built-in quantity type
    if "quantity_type" in metafunc.fixturenames:
        types = [cls for _, cls in sorted(_qreg.all().items())]
        metafunc.parametrize("quantity_type", types, ids=[cls.__name__ for cls in types])
