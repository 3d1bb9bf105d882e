import sys

import pytest

from prepare_swagger import common
from prepare_swagger.config import ENV_PREFIX, Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's PREPARE_SWAGGER_* variables out of the tests"""
    monkeypatch.delenv(ENV_PREFIX + "CONFIG", raising=False)
    for name in Settings.model_fields:
        monkeypatch.delenv(ENV_PREFIX + name.upper(), raising=False)
    yield
    # handlers hold on to the stderr of the test that created them
    common.logger(reset=True)


@pytest.fixture
def python_program(monkeypatch):
    """Use the running interpreter as the engine executable"""
    monkeypatch.setenv(ENV_PREFIX + "PROGRAM", sys.executable)
    return sys.executable
