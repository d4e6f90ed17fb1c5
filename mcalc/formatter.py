"""
構文木を画面に出力する形に整形する

"""
import io
import logging
from abc import ABC, abstractmethod
from typing import Iterator

from rich.console import Console
from rich.tree import Tree

from classes import Constants
from syntax import SyntaxKind, SyntaxNode

logger = logging.getLogger(__name__)


def node_label(node: SyntaxNode) -> str:
    """ノード1行ぶんの表示。NumberToken のときだけ値を付ける"""
    if node.kind is SyntaxKind.NumberToken:
        return f"{node.kind.name} {node.value}"
    return node.kind.name


def pretty_print(node: SyntaxNode, indent: str = "") -> Iterator[str]:
    """
    前順の深さ優先で1ノード1行を返す

    Args:
        node: 出力を始めるノード (通常は式の根)
        indent: このノードの行頭に付けるインデント

    Yields:
        インデント付きの行
    """
    yield indent + node_label(node)

    indent += Constants.INDENT
    for child in node.get_children():
        yield from pretty_print(child, indent)


# ===== 継承を用いた構文木フォーマッター =====
class TreeFormatter(ABC):
    """構文木フォーマッターの抽象基底クラス"""

    @abstractmethod
    def format(self, node: SyntaxNode) -> str:
        """
        構文木をフォーマット

        Args:
            node: 構文木の根

        Returns:
            フォーマットされた文字列 (末尾の改行なし)
        """
        pass


class PlainTreeFormatter(TreeFormatter):
    """空白4つずつの字下げで表示する"""

    def format(self, node: SyntaxNode) -> str:
        return "\n".join(pretty_print(node))


class RichTreeFormatter(TreeFormatter):
    """Rich の Tree でガイド線つきに表示する"""

    def build(self, node: SyntaxNode, tree: Tree = None) -> Tree:
        label = node_label(node)
        branch = Tree(label) if tree is None else tree.add(label)
        for child in node.get_children():
            self.build(child, branch)
        return branch

    def format(self, node: SyntaxNode) -> str:
        buffer = io.StringIO()
        Console(file=buffer, width=120, color_system=None, highlight=False).print(self.build(node))
        return "\n".join(line.rstrip() for line in buffer.getvalue().splitlines())


class FormatterFactory:
    """Style 設定からフォーマッターを作る"""

    formatters = {
        Constants.STYLE_PLAIN: PlainTreeFormatter,
        Constants.STYLE_RICH: RichTreeFormatter,
    }

    @staticmethod
    def create_formatter(style: str) -> TreeFormatter:
        formatter_class = FormatterFactory.formatters.get(style, PlainTreeFormatter)
        logger.debug(f"formatter: {formatter_class.__name__}")
        return formatter_class()
