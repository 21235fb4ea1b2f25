from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

SHANGHAI = ZoneInfo("Asia/Shanghai")


@pytest.fixture
def now_factory():
    def _make(year: int, month: int, day: int, hour: int = 9, minute: int = 30):
        return datetime(year, month, day, hour, minute, tzinfo=SHANGHAI)
    return _make


@pytest.fixture
def wednesday(now_factory):
    # 2026-10-14 is a Wednesday
    return now_factory(2026, 10, 14)


@pytest.fixture
def client(wednesday):
    from fastapi.testclient import TestClient

    from api import state
    from api.dependencies import get_now
    from api.main import app

    state.reset()
    app.dependency_overrides[get_now] = lambda: wednesday
    yield TestClient(app)
    app.dependency_overrides.clear()
    state.reset()
