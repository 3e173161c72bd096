import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

_ROOT_DIR = Path(__file__).resolve().parents[1]
if str(_ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(_ROOT_DIR))

os.environ.setdefault("USER_SEARCH_ACCESS_TOKEN", "ok")

from usersearch.main import app  # noqa: E402
from usersearch.routers import search as search_router  # noqa: E402
from usersearch.schemas import User  # noqa: E402
from usersearch.services.user_store import UserStore  # noqa: E402

MOCK_USERS = [
    User(id=1, name="Serj", age=23, about="123", gender="male"),
    User(id=2, name="Serj2", age=23, about="123456", gender="male"),
]


@pytest.fixture()
def mock_users():
    return list(MOCK_USERS)


@pytest.fixture()
def store():
    return UserStore([
        User(id=3, name="Boyd Wolf", age=22, about="Nulla cillum enim", gender="male"),
        User(id=1, name="Hilda Mayer", age=21, about="Sit commodo consectetur", gender="female"),
        User(id=2, name="Brooks Aguilar", age=25, about="Velit ullamco est", gender="male"),
        User(id=4, name="Owen Lynn", age=30, about="Elit anim elit", gender="male"),
    ])


@pytest.fixture()
def client(store):
    app.dependency_overrides = {
        search_router.get_store: lambda: store,
        search_router.get_access_token: lambda: "ok",
    }
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides = {}
