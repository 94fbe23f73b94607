"""Shared fixtures for live tests against the real Tenor API.

Run with ``pytest -m live``. Needs ``TENOR_API_KEY`` in the environment or in
a ``.env`` file at the project root; skipped otherwise.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from tenor_sdk import Tenor

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


@pytest.fixture
def api_key() -> str:
    key = os.environ.get("TENOR_API_KEY")
    if not key:
        pytest.skip("TENOR_API_KEY not set")
    return key


@pytest.fixture
def make_tenor(api_key):
    def _make(*args, **kwargs) -> Tenor:
        return Tenor(api_key, *args, **kwargs)

    return _make
