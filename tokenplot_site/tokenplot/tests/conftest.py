import pytest
from django.apps import apps

from tokenplot.services.history import SentenceHistory


@pytest.fixture
def history(monkeypatch):
    """Fresh history swapped into the app config for the duration of a test."""
    h = SentenceHistory(capacity=5)
    monkeypatch.setattr(apps.get_app_config("tokenplot"), "history", h)
    return h
