from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from lexi.lexer import tokenize
from lexi.serialization import tokens_from_json, tokens_to_json, write_tokens
from lexi.tokens import LiteralKind, Token, TokenKind


class SerializationTests(unittest.TestCase):
    def test_tokens_from_json_restores_kinds(self) -> None:
        payload = (
            '[{"kind": "IDENT", "literal": "n"},'
            ' {"kind": "LITERAL", "literal": "7", "literal_kind": "INT"},'
            ' {"kind": "UNKNOWN", "literal": "\\u20ac"}]'
        )
        self.assertEqual(
            tokens_from_json(payload),
            [
                Token(TokenKind.IDENT, 'n'),
                Token(TokenKind.LITERAL, '7', LiteralKind.INT),
                Token(TokenKind.UNKNOWN, '€'),
            ],
        )

    def test_tokens_to_json_sorts_keys(self) -> None:
        text = tokens_to_json([Token(TokenKind.LITERAL, '1', LiteralKind.INT)], indent=0)
        self.assertLess(text.index('"kind"'), text.index('"literal"'))
        self.assertLess(text.index('"literal"'), text.index('"literal_kind"'))

    def test_write_tokens(self) -> None:
        tokens = tokenize('while (i < 10) {}')
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / 'out' / 'tokens.json'
            path.parent.mkdir()
            write_tokens(tokens, str(path))
            text = path.read_text(encoding='utf-8')
        self.assertEqual(len(json.loads(text)), 8)
        self.assertEqual(tokens_from_json(text), tokens)

    def test_empty_stream(self) -> None:
        self.assertEqual(tokens_to_json([]), '[]')
        self.assertEqual(tokens_from_json('[]'), [])


if __name__ == '__main__':
    unittest.main()
