import pytest
from typing import Generator
from fastapi.testclient import TestClient
import sys
import os

# Append sys.path to ensure the below imports work from tests folder
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.main import app


# Define test client fixture
@pytest.fixture(name="client")
def client_fixture() -> Generator[TestClient, None, None]:
    """Creates a TestClient for the API.

    Yields:
        TestClient: The FastAPI test client.
    """
    with TestClient(app) as client:
        yield client
