"""
構文木のノード定義

SyntaxNode を基底に、終端 (SyntaxToken) と式ノード
(NumberExpressionSyntax, BinaryExpressionSyntax, ParenthesizedExpressionSyntax)
の2階層だけで構成する。ノードは構築後に変更しない。
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class SyntaxKind(Enum):
    # トークン
    NumberToken = auto()
    WhitespaceToken = auto()
    PlusToken = auto()
    MinusToken = auto()
    StarToken = auto()
    SlashToken = auto()
    OpenParenthesisToken = auto()
    CloseParenthesisToken = auto()
    EndOfFileToken = auto()
    BadToken = auto()

    # 式
    NumberExpression = auto()
    BinaryExpression = auto()
    ParenthesizedExpression = auto()


class SyntaxNode(ABC):
    """構文木ノードの共通インターフェース"""

    @property
    @abstractmethod
    def kind(self) -> SyntaxKind:
        ...

    @abstractmethod
    def get_children(self) -> Tuple["SyntaxNode", ...]:
        """子ノードを順番どおりに返す (コピーではなく保持しているノードそのもの)"""
        ...


@dataclass(frozen=True)
class SyntaxToken(SyntaxNode):
    """字句解析器が切り出したトークン。構文木の終端ノードも兼ねる"""
    token_kind: SyntaxKind
    position: int
    text: str
    value: int = 0

    @property
    def kind(self) -> SyntaxKind:
        return self.token_kind

    def get_children(self):
        return ()

    def __repr__(self):
        return f"SyntaxToken({self.kind.name}, {self.position}, {self.text!r}, {self.value})"


class ExpressionSyntax(SyntaxNode):
    """式ノードの基底"""


@dataclass(frozen=True)
class NumberExpressionSyntax(ExpressionSyntax):
    number_token: SyntaxToken

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.NumberExpression

    def get_children(self):
        return (self.number_token,)


@dataclass(frozen=True)
class BinaryExpressionSyntax(ExpressionSyntax):
    left: ExpressionSyntax
    operator_token: SyntaxToken
    right: ExpressionSyntax

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.BinaryExpression

    def get_children(self):
        return (self.left, self.operator_token, self.right)


@dataclass(frozen=True)
class ParenthesizedExpressionSyntax(ExpressionSyntax):
    """括弧式。Grammar = Full のときだけ作られる"""
    open_parenthesis_token: SyntaxToken
    expression: ExpressionSyntax
    close_parenthesis_token: SyntaxToken

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.ParenthesizedExpression

    def get_children(self):
        return (self.open_parenthesis_token, self.expression, self.close_parenthesis_token)


@dataclass(frozen=True)
class Diagnostic:
    """構文解析中に読み捨てた BadToken の記録"""
    position: int
    text: str

    def __str__(self):
        return f"位置 {self.position}: 不明な文字 '{self.text}' を無視しました"
