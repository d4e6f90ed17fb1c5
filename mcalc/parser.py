"""
再帰下降の構文解析器

Strict (既定) の文法:
    expression := primary ( (Plus | Minus) primary )*
    primary    := Number

Full の文法:
    expression := term ( (Plus | Minus) term )*
    term       := primary ( (Star | Slash) primary )*
    primary    := Number | "(" expression ")"

どちらの文法でも構文解析は失敗しない。期待したトークンが無いときは
空テキストのトークンを補って先へ進む。
"""
import logging
from typing import List

from classes import Constants
from lexer import Lexer
from syntax import (
    SyntaxKind,
    SyntaxToken,
    ExpressionSyntax,
    NumberExpressionSyntax,
    BinaryExpressionSyntax,
    ParenthesizedExpressionSyntax,
    Diagnostic,
)

logger = logging.getLogger(__name__)

# トークン列に積まないトークン
SKIPPED_KINDS = (SyntaxKind.WhitespaceToken, SyntaxKind.BadToken)

ADDITIVE_KINDS = (SyntaxKind.PlusToken, SyntaxKind.MinusToken)
MULTIPLICATIVE_KINDS = (SyntaxKind.StarToken, SyntaxKind.SlashToken)


class Parser:
    def __init__(self, text: str, grammar: str = Constants.GRAMMAR_STRICT):
        self.grammar = grammar
        self.tokens: List[SyntaxToken] = []
        self.diagnostics: List[Diagnostic] = []
        self.index = 0

        # 字句解析器を最後まで回してトークン列を作る (EndOfFileToken も含める)
        for token in Lexer(text):
            if token.kind in SKIPPED_KINDS:
                if token.kind is SyntaxKind.BadToken:
                    self.diagnostics.append(Diagnostic(token.position, token.text))
                logger.debug(f"drop {token}")
                continue
            self.tokens.append(token)
        logger.debug(f"tokens: {self.tokens}")

    # --- カーソル操作 ---

    def peek(self, offset: int) -> SyntaxToken:
        index = self.index + offset
        if index >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[index]

    @property
    def current(self) -> SyntaxToken:
        return self.peek(0)

    def next_token(self) -> SyntaxToken:
        current = self.current
        self.index += 1
        return current

    def match(self, kind: SyntaxKind) -> SyntaxToken:
        if self.current.kind is kind:
            return self.next_token()
        # 回復用のトークンを補う。現在のトークンは消費しない
        logger.debug(f"expected {kind.name}, got {self.current}. synthesize at {self.current.position}")
        return SyntaxToken(kind, self.current.position, "")

    # --- 文法規則 ---

    def parse(self) -> ExpressionSyntax:
        if self.grammar == Constants.GRAMMAR_FULL:
            return self.parse_expression()

        left = self.parse_primary_expression()
        while self.current.kind in ADDITIVE_KINDS:
            operator_token = self.next_token()
            right = self.parse_primary_expression()
            left = BinaryExpressionSyntax(left, operator_token, right)
        return left

    def parse_primary_expression(self) -> ExpressionSyntax:
        if self.grammar == Constants.GRAMMAR_FULL and self.current.kind is SyntaxKind.OpenParenthesisToken:
            open_token = self.next_token()
            expression = self.parse_expression()
            close_token = self.match(SyntaxKind.CloseParenthesisToken)
            return ParenthesizedExpressionSyntax(open_token, expression, close_token)

        number_token = self.match(SyntaxKind.NumberToken)
        return NumberExpressionSyntax(number_token)

    def parse_expression(self) -> ExpressionSyntax:
        left = self.parse_term()
        while self.current.kind in ADDITIVE_KINDS:
            operator_token = self.next_token()
            left = BinaryExpressionSyntax(left, operator_token, self.parse_term())
        return left

    def parse_term(self) -> ExpressionSyntax:
        left = self.parse_primary_expression()
        while self.current.kind in MULTIPLICATIVE_KINDS:
            operator_token = self.next_token()
            left = BinaryExpressionSyntax(left, operator_token, self.parse_primary_expression())
        return left
