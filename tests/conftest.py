"""Shared fixtures for the stream code tests."""

import itertools

import pytest
from rest_framework.test import APIClient

from stream_codes.registry import StreamCodeRegistry


@pytest.fixture(autouse=True)
def share_settings(settings):
    settings.PUBLIC_SITE_URL = "https://live.example.com"
    settings.SITE_NAME = "Now Live"
    settings.PREVIEW_DEFAULT_IMAGE = "https://live.example.com/placeholder.svg"
    settings.STREAM_CODE_LENGTH = 4
    settings.STREAM_CODE_MAX_ATTEMPTS = 10
    settings.STREAM_CODE_TTL_SECONDS = 3600
    return settings


@pytest.fixture
def registry():
    """Registry bound to the test database."""
    return StreamCodeRegistry()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def single_descriptor():
    return {
        "kind": "single",
        "platform": "youtube",
        "playback_ref": "XYZ123",
        "display_name": "Member A",
    }


@pytest.fixture
def multi_descriptor():
    return {
        "kind": "multi",
        "members": [
            {"platform": "idn", "playback_ref": "r1"},
            {"platform": "idn", "playback_ref": "r2"},
        ],
    }


@pytest.fixture
def scripted_codes(monkeypatch):
    """Make code generation return the given codes in order, repeating the last one."""

    def install(*codes):
        last = codes[-1]
        sequence = itertools.chain(codes, itertools.repeat(last))
        monkeypatch.setattr(
            "stream_codes.registry.generate_code",
            lambda length, alphabet=None: next(sequence),
        )

    return install
