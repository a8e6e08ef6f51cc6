"""lexi: a lexical scanner for a small C-like scripting language."""

from __future__ import annotations

from typing import Any


__version__ = "0.1.0"

__all__ = [
    "Lexer",
    "LiteralKind",
    "ScanArtifacts",
    "Token",
    "TokenKind",
    "dispatch_service",
    "summarize_source",
    "tokenize_file",
    "tokenize_source",
]


def tokenize_source(*args: Any, **kwargs: Any):
    from lexi.main import tokenize_source as _tokenize_source

    return _tokenize_source(*args, **kwargs)


def tokenize_file(*args: Any, **kwargs: Any):
    from lexi.main import tokenize_file as _tokenize_file

    return _tokenize_file(*args, **kwargs)


def summarize_source(*args: Any, **kwargs: Any):
    from lexi.main import summarize_source as _summarize_source

    return _summarize_source(*args, **kwargs)


def dispatch_service(*args: Any, **kwargs: Any):
    from lexi.service import dispatch as _dispatch

    return _dispatch(*args, **kwargs)


def __getattr__(name: str):
    if name == "Lexer":
        from lexi.lexer import Lexer

        return Lexer
    if name in ("Token", "TokenKind", "LiteralKind"):
        from lexi.tokens import LiteralKind, Token, TokenKind

        return {"Token": Token, "TokenKind": TokenKind, "LiteralKind": LiteralKind}[name]
    if name == "ScanArtifacts":
        from lexi.main import ScanArtifacts

        return ScanArtifacts
    raise AttributeError(name)
