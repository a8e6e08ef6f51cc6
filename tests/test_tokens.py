from __future__ import annotations

import dataclasses
import unittest

from lexi.tokens import SINGLE_CHAR_TOKENS, LiteralKind, Token, TokenKind


class TokenTests(unittest.TestCase):
    def test_structural_equality(self) -> None:
        self.assertEqual(Token(TokenKind.IDENT, 'x'), Token(TokenKind.IDENT, 'x'))
        self.assertNotEqual(Token(TokenKind.IDENT, 'x'), Token(TokenKind.IDENT, 'y'))
        self.assertNotEqual(
            Token(TokenKind.LITERAL, '1', LiteralKind.INT),
            Token(TokenKind.LITERAL, '1', LiteralKind.FLOAT),
        )

    def test_tokens_are_immutable(self) -> None:
        token = Token(TokenKind.SEMI, ';')
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.literal = ','  # type: ignore[misc]

    def test_str_and_label(self) -> None:
        self.assertEqual(str(Token(TokenKind.EQ, '=')), "EQ('=')")
        literal = Token(TokenKind.LITERAL, '10', LiteralKind.INT)
        self.assertEqual(literal.label, 'LITERAL[INT]')
        self.assertEqual(str(literal), "LITERAL[INT]('10')")

    def test_dict_round_trip(self) -> None:
        for token in (Token(TokenKind.UNKNOWN, '№'), Token(TokenKind.LITERAL, '7', LiteralKind.INT)):
            with self.subTest(token=token):
                self.assertEqual(Token.from_dict(token.to_dict()), token)
        self.assertNotIn('literal_kind', Token(TokenKind.DOT, '.').to_dict())

    def test_single_char_table_is_ascii_and_unique(self) -> None:
        self.assertEqual(len(SINGLE_CHAR_TOKENS), 27)
        self.assertEqual(len(set(SINGLE_CHAR_TOKENS.values())), 27)
        for symbol in SINGLE_CHAR_TOKENS:
            self.assertEqual(len(symbol), 1)
            self.assertTrue(symbol.isascii())

    def test_reserved_kinds_are_declared(self) -> None:
        self.assertIn('WHITESPACE', TokenKind.__members__)
        self.assertIn('EOF', TokenKind.__members__)
        self.assertEqual([kind.name for kind in LiteralKind], ['BOOL', 'INT', 'FLOAT', 'CHAR', 'STR'])


if __name__ == '__main__':
    unittest.main()
