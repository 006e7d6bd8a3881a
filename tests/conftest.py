import importlib
import pytest

@pytest.fixture(scope="session")
def logic():
    return importlib.import_module("hexview.logic")

@pytest.fixture(scope="session")
def codec():
    return importlib.import_module("hexview.codec")
