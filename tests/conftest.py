# Headless Qt for the whole session; widget tests use pytest-qt's qtbot.

import json
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def theme_file(tmp_path):
    """Write a small two-scheme theme and return its path."""
    payload = {
        "name": "sample",
        "schemes": {
            "light": {"text": "#000000", "page": "#FFFFFF", "hint": "#777777", "card": "#FFFFFF"},
            "dark": {"text": "#777777", "page": "#6F6F6F", "hint": "#FFFFFF", "card": "#000000"},
        },
        "pairs": [["text", "page", "Text / Page"], ["hint", "card"]],
    }
    path = tmp_path / "sample.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
