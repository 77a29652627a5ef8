import pytest
from fastapi.testclient import TestClient

from abacus.engine import build_app
from modules.fraction_calc.tool.app import app as fraction_app
from modules.geometry_calc.tool.app import app as geometry_app


@pytest.fixture
def fraction_client():
    with TestClient(fraction_app) as client:
        yield client


@pytest.fixture
def geometry_client():
    with TestClient(geometry_app) as client:
        yield client


@pytest.fixture
def abacus_client():
    with TestClient(build_app()) as client:
        yield client
