"""Top-level scanning orchestration for lexi."""

from __future__ import annotations

import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lexi.errors import SourceError
from lexi.lexer import Lexer
from lexi.serialization import write_tokens
from lexi.tokens import Token, TokenKind


@dataclass
class ScanArtifacts:
    """Source text together with the tokens scanned from it."""

    filename: str
    source: str
    tokens: list[Token]

    def counts(self) -> dict[str, int]:
        """Token count per kind label, ordered by label."""
        counter = Counter(token.label for token in self.tokens)
        return dict(sorted(counter.items()))

    def unknown_tokens(self) -> list[Token]:
        return [token for token in self.tokens if token.kind is TokenKind.UNKNOWN]


def tokenize_source(
    source: str,
    *,
    filename: str = "<input>",
    debug: bool = False,
    emit_tokens_path: str | Path | None = None,
) -> ScanArtifacts:
    """Scan source text and return the artifacts."""
    tokens = Lexer(source).tokenize()
    artifacts = ScanArtifacts(filename=filename, source=source, tokens=tokens)

    if emit_tokens_path is not None:
        write_tokens(tokens, emit_tokens_path)

    if debug:
        print(
            f"debug: file={filename} tokens={len(tokens)} unknown={len(artifacts.unknown_tokens())}",
            file=sys.stderr,
        )
    return artifacts


def tokenize_file(
    path: str | Path,
    *,
    debug: bool = False,
    emit_tokens_path: str | Path | None = None,
) -> ScanArtifacts:
    """Read a UTF-8 source file and scan it."""
    source = read_source(path)
    return tokenize_source(
        source,
        filename=str(path),
        debug=debug,
        emit_tokens_path=emit_tokens_path,
    )


def summarize_source(source: str, *, filename: str = "<input>") -> dict[str, Any]:
    """Return a JSON-ready summary of the token stream for source."""
    artifacts = tokenize_source(source, filename=filename)
    return {
        "file": artifacts.filename,
        "tokens": len(artifacts.tokens),
        "counts": artifacts.counts(),
        "unknown": [token.literal for token in artifacts.unknown_tokens()],
    }


def read_source(path: str | Path) -> str:
    """Load source text, mapping I/O failures to SourceError."""
    target = Path(path)
    try:
        return target.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourceError(
            code="SRC001",
            message=f"Input file not found: {target}",
            hint="Check the input path.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(
            code="SRC002",
            message=f"Cannot read {target}: {exc}",
            hint="Input must be a readable UTF-8 text file.",
        ) from exc
