import io

import pytest

from gof_patterns.client import Client
from gof_patterns.factories.registry import VariantFactoryRegistry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep ``GOF_*`` variables from the developer's shell out of the tests."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("GOF_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture()
def registry():
    return VariantFactoryRegistry()


@pytest.fixture()
def output():
    return io.StringIO()


@pytest.fixture()
def client(registry, output):
    return Client(registry=registry, stream=output)
