"""Test fixtures: sample declarative queries in QuerySpec JSON form."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_FIXTURES_DIR = Path(__file__).parent


def load_query_spec_text(name: str) -> str:
    """Return the raw JSON text of ``<name>.json``."""
    return (_FIXTURES_DIR / f"{name}.json").read_text()


def load_query_spec(name: str) -> dict[str, Any]:
    """Return ``<name>.json`` decoded to a dict."""
    return json.loads(load_query_spec_text(name))
