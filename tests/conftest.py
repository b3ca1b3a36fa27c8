# tests/conftest.py

from __future__ import annotations

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from taskboard_app.storage import MemStorage


@pytest.fixture()
def store(monkeypatch: pytest.MonkeyPatch) -> MemStorage:
    """
    Fresh seeded store, installed as the one the views use.

    Each test gets its own instance so ids always start from a known state.
    """
    fresh = MemStorage()
    monkeypatch.setattr(apps.get_app_config("taskboard_app"), "store", fresh)
    return fresh


@pytest.fixture()
def empty_store(monkeypatch: pytest.MonkeyPatch) -> MemStorage:
    fresh = MemStorage(seed_defaults=False)
    monkeypatch.setattr(apps.get_app_config("taskboard_app"), "store", fresh)
    return fresh


@pytest.fixture()
def api_client() -> APIClient:
    return APIClient()
