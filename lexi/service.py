"""Machine-oriented service layer for lexi integrations.

Request handlers take and return plain JSON-compatible mappings so transport
adapters can call the scanner deterministically.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

from lexi import __version__
from lexi.errors import CLIError, LexiError
from lexi.main import read_source, summarize_source, tokenize_source
from lexi.tokens import TokenKind


def scan_request(payload: dict[str, Any]) -> dict[str, Any]:
    """Scan source payload and return the token stream."""
    source, filename = _resolve_source_payload(payload)
    artifacts = tokenize_source(source, filename=filename)
    return {
        "file": artifacts.filename,
        "tokens": [token.to_dict() for token in artifacts.tokens],
        "metrics": {
            "tokens": len(artifacts.tokens),
            "unknown": len(artifacts.unknown_tokens()),
        },
    }


def summary_request(payload: dict[str, Any]) -> dict[str, Any]:
    """Return per-kind token counts for source payload."""
    source, filename = _resolve_source_payload(payload)
    return summarize_source(source, filename=filename)


def capabilities_request(payload: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return service capability metadata for automation clients."""
    return {
        "service": "lexi",
        "version": __version__,
        "methods": sorted(_METHODS.keys()),
        "token_kinds": [kind.name for kind in TokenKind],
    }


_METHODS: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
    "scan": scan_request,
    "summary": summary_request,
    "capabilities": capabilities_request,
}


def dispatch(method: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
    """Dispatch a method call for integration adapters."""
    fn = _METHODS.get(method)
    if fn is None:
        raise CLIError(
            code="SRV001",
            message=f"Unknown service method '{method}'.",
            hint=f"Available methods: {', '.join(sorted(_METHODS.keys()))}",
        )
    return fn(payload or {})


def safe_dispatch(method: str, payload: dict[str, Any] | None = None) -> tuple[bool, dict[str, Any]]:
    """Dispatch method and normalize errors for transport layers."""
    try:
        return True, dispatch(method, payload)
    except LexiError as err:
        return False, {"error": err.to_diagnostic().to_dict()}


def _resolve_source_payload(payload: dict[str, Any]) -> tuple[str, str]:
    source = payload.get("source")
    input_path = payload.get("input_path")

    if source is not None and input_path is not None:
        raise CLIError(
            code="SRV002",
            message="Provide only one of 'source' or 'input_path'.",
            hint="Use inline source for API calls or file path for local source files.",
        )

    if input_path is not None:
        path = Path(str(input_path))
        if not path.exists():
            raise CLIError(
                code="SRV003",
                message=f"Input file not found: {path}",
                hint="Check input_path and file permissions.",
            )
        return read_source(path), str(path)

    if source is not None:
        return str(source), str(payload.get("filename", "<inline>"))

    raise CLIError(
        code="SRV004",
        message="Missing source input.",
        hint="Provide 'source' or 'input_path'.",
    )
