"""
字句解析器

入力1行を先頭から読み進め、next_token() を呼ぶたびにトークンを1つ返す。
カーソルは後戻りしない。
"""
import logging

from classes import Constants
from syntax import SyntaxKind, SyntaxToken

logger = logging.getLogger(__name__)

# 1文字で決まるトークン
SINGLE_CHAR_TOKENS = {
    "+": SyntaxKind.PlusToken,
    "-": SyntaxKind.MinusToken,
    "*": SyntaxKind.StarToken,
    "/": SyntaxKind.SlashToken,
    "(": SyntaxKind.OpenParenthesisToken,
    ")": SyntaxKind.CloseParenthesisToken,
}


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    @property
    def current(self) -> str:
        # 末尾を越えたら空文字 (isdigit/isspace はどちらも False になる)
        if self.pos >= len(self.text):
            return ""
        return self.text[self.pos]

    def advance(self):
        self.pos += 1

    def read_run(self, predicate) -> str:
        start = self.pos
        while self.current and predicate(self.current):
            self.advance()
        return self.text[start:self.pos]

    def next_token(self) -> SyntaxToken:
        start = self.pos

        if self.pos >= len(self.text):
            return SyntaxToken(SyntaxKind.EndOfFileToken, start, "")

        if self.current.isdigit():
            text = self.read_run(str.isdigit)
            try:
                value = int(text)
            except ValueError as e:
                # 「²」のような int() が受け付けない数字や桁数超過
                raise ValueError(Constants.ERR_NUMBER.format(text=text, position=start)) from e
            return SyntaxToken(SyntaxKind.NumberToken, start, text, value)

        if self.current.isspace():
            text = self.read_run(str.isspace)
            return SyntaxToken(SyntaxKind.WhitespaceToken, start, text)

        char = self.current
        self.advance()
        kind = SINGLE_CHAR_TOKENS.get(char, SyntaxKind.BadToken)
        if kind is SyntaxKind.BadToken:
            logger.debug(f"bad character {char!r} at {start}")
        return SyntaxToken(kind, start, char)

    def __iter__(self):
        """EndOfFileToken まで (それを含む) トークンを順に返す"""
        while True:
            token = self.next_token()
            yield token
            if token.kind is SyntaxKind.EndOfFileToken:
                return
