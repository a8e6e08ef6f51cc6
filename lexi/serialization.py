"""Serialization helpers for token streams."""

from __future__ import annotations

import json
from pathlib import Path

from lexi.tokens import Token


def tokens_to_json(tokens: list[Token], indent: int = 2) -> str:
    """Serialize a token list to JSON text."""
    return json.dumps([token.to_dict() for token in tokens], indent=indent, sort_keys=True)


def tokens_from_json(payload: str) -> list[Token]:
    """Deserialize a token list from JSON text."""
    data = json.loads(payload)
    return [Token.from_dict(item) for item in data]


def write_tokens(tokens: list[Token], path: str | Path) -> None:
    """Write serialized token JSON to path."""
    target = Path(path)
    target.write_text(tokens_to_json(tokens), encoding="utf-8")
