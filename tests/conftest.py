#!/usr/bin/env python
"""Test configuration and fixtures for sitefolio tests"""

import json
import tempfile
from pathlib import Path

import pytest

# Initialize context BEFORE any other sitefolio imports relying on it
# This must happen at module import time, before pytest collects tests
# This is hence not done in a fixture
from sitefolio.context import Context

tmpdir = tempfile.mkdtemp()
Context.setup(
    config_path=Path(tmpdir) / "site.json",
    output_dir=Path(tmpdir) / "output",
)

ROOT_DIR = Path(__file__).parent.parent


@pytest.fixture
def example_json_path():
    return ROOT_DIR / "site.example.json"


@pytest.fixture
def site_data():
    """settings of a valid site, using snake_case keys"""
    return {
        "site_title": "Jane Doe",
        "manifest_name": "Jane Doe Portfolio",
        "manifest_short_name": "Jane",
        "manifest_start_url": "/",
        "manifest_background_color": "#ffffff",
        "manifest_theme_color": "#000000",
        "manifest_display": "standalone",
        "manifest_icon": "assets/icon.png",
        "author_name": "Jane Doe",
        "heading": "Back-End Developer",
        "social_links": [
            {"icon": "fa-envelope", "name": "Email", "url": "mailto:jane@example.com"},
            {"icon": "fa-github", "name": "Github", "url": "https://github.com/jane"},
        ],
    }


@pytest.fixture
def write_config(tmp_path):
    def _write(data, name="site.json"):
        fpath = tmp_path / name
        fpath.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return fpath

    return _write
