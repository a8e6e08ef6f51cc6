"""Structured diagnostics and exception hierarchy for lexi tooling.

The lexer itself never raises; these types serve the file, service and CLI
layers wrapped around it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Diagnostic:
    """Machine-readable diagnostic emitted by tooling layers."""

    code: str
    message: str
    hint: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize the diagnostic for JSON output."""
        return {
            "code": self.code,
            "message": self.message,
            "hint": self.hint,
        }


class LexiError(Exception):
    """Base error carrying a stable code and an optional hint."""

    def __init__(self, code: str, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.hint = hint

    def to_diagnostic(self) -> Diagnostic:
        """Convert exception into serializable diagnostic."""
        return Diagnostic(code=self.code, message=self.message, hint=self.hint)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class SourceError(LexiError):
    """Raised when source text cannot be loaded."""


class CLIError(LexiError):
    """Raised by CLI usage or service request failures."""


def format_diagnostic(diag: Diagnostic) -> str:
    """Format diagnostic into a stable human-readable line."""
    hint = f" Hint: {diag.hint}" if diag.hint else ""
    return f"{diag.code}: {diag.message}{hint}"
