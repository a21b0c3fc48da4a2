import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("STORE_BACKEND", "memory")

from app.main import app
from app.console.client import VPCApiClient
from app.dao.memory import InMemoryVPCRepository
from app.dependencies.console import get_console_client
from app.dependencies.dao import get_vpc_repository


@pytest.fixture()
def repo():
    return InMemoryVPCRepository()


@pytest.fixture()
def client(repo):
    app.dependency_overrides[get_vpc_repository] = lambda: repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def console(client):
    # The console reaches the API over HTTP; point it at the same app in-process.
    api = TestClient(app)
    app.dependency_overrides[get_console_client] = lambda: VPCApiClient(api)
    yield client


@pytest.fixture()
def vpc_payload():
    return {"name": "prod", "cidrBlock": "10.0.0.0/16", "region": "us-east-1"}
