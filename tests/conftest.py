"""Pytest configuration shared by planner and API tests."""

import sys
from pathlib import Path

import pytest

# `pip install -e .` なしでも src レイアウトのパッケージを import できるようにする。
_SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch):
    """FastAPI クライアントを生成し、メトリクスをリセットした状態で返す。"""

    from fastapi.testclient import TestClient

    from wordplan.config import settings
    from wordplan.main import create_app
    from wordplan.metrics import registry

    monkeypatch.setattr(settings, "max_total_words", 100_000)
    monkeypatch.setattr(settings, "max_plan_days", 3650)
    monkeypatch.setattr(settings, "default_include_review", True)
    monkeypatch.setattr(settings, "curve_days", 30)
    registry.reset()
    return TestClient(create_app())
