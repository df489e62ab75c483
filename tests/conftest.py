"""Shared fixtures for keyaction_parser tests."""

from __future__ import annotations

import pytest

ACTIONS = "\n".join(
    [
        'set browser "firefox"; open-in-browser',
        "",
        '"a"b',
        ";;;",
        'set browser "lynx',
        "quit",
    ]
) + "\n"


@pytest.fixture
def actions_file(tmp_path):
    """Provide a file of actions with one malformed line (line 3)."""
    path = tmp_path / "actions"
    path.write_text(ACTIONS)
    return path
