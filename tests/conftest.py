from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from ekrili.main import create_app
from ekrili.services.seed import seed_demo_data
from ekrili.services.storage import MemoryStorage


class StepClock:
    """Deterministic clock: every call returns a time one minute later than the last"""

    def __init__(self, start: datetime = datetime(2024, 6, 1, 12, 0)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(minutes=1)
        return self.current


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def storage(clock):
    return MemoryStorage(clock=clock)


@pytest.fixture
def seeded_storage(storage):
    seed_demo_data(storage)
    return storage


@pytest.fixture
def client(seeded_storage):
    return TestClient(create_app(storage=seeded_storage))


@pytest.fixture
def signup(client):
    """Create an account through the API and return (user, auth headers)"""

    def _signup(email: str, role: str = "tenant", password: str = "MotDePasse123"):
        response = client.post("/api/auth/signup", json={
            "email": email,
            "password": password,
            "first_name": "Test",
            "last_name": "User",
            "role": role,
        })
        assert response.status_code == 201, response.text
        login = client.post("/api/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        token = login.json()["access_token"]
        return response.json(), {"Authorization": f"Bearer {token}"}

    return _signup
