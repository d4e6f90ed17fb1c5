"""
REPL全体で共有する定数・設定・表示用クラス

構文木そのものは syntax.py、字句解析は lexer.py、構文解析は parser.py にある。
"""
import configparser
import logging
from typing import Optional

from rich.console import Console

logger = logging.getLogger(__name__)

# 画面出力 (Rich)。エラーは標準エラー出力へ
console = Console()
err_console = Console(stderr=True, highlight=False)


# ===== 定数定義 =====
class Constants:
    """定数クラス"""
    DEFAULT_LOG = "No"
    DEFAULT_GRAMMAR = "Strict"
    DEFAULT_STYLE = "Plain"
    DEFAULT_WARN = "No"

    GRAMMAR_STRICT = "Strict"
    GRAMMAR_FULL = "Full"
    GRAMMARS = (GRAMMAR_STRICT, GRAMMAR_FULL)

    STYLE_PLAIN = "Plain"
    STYLE_RICH = "Rich"
    STYLES = (STYLE_PLAIN, STYLE_RICH)

    INDENT = "    "             # 1階層ぶんのインデント (空白4つ)
    CONFIG_FILE = "config.ini"

    """エラーメッセージ"""
    ERR_GRAMMAR = "Grammar には Strict か Full を指定してください。"
    ERR_STYLE = "Style には Plain か Rich を指定してください。"
    ERR_UNKNOWN = "未知の設定項目です: {name}"
    ERR_NUMBER = "数値に変換できません: '{text}' (位置 {position})"


def boolean_setter(key_name: str):
    """
    1/0, on/off, true/false, yes/no を Yes/No に変換するデコレータ
    """
    def decorator(func):
        def wrapper(self, value):
            s_val = str(value).lower()
            if s_val in ["0", "off", "false", "no"]:
                final_val = "No"
            elif s_val in ["1", "on", "true", "yes"]:
                final_val = "Yes"
            else:
                final_val = value

            self.env[key_name] = final_val
            return f"{key_name} mode: {self.env.get(key_name)}"
        return wrapper
    return decorator


# ===== システム設定管理クラス =====
class CalcSystemConfig:
    """REPLの設定 (config.ini の [ENV] と set コマンドで変更できる)"""

    def __init__(self):
        self.env = {
            "Log"     : Constants.DEFAULT_LOG,
            "Grammar" : Constants.DEFAULT_GRAMMAR,
            "Style"   : Constants.DEFAULT_STYLE,
            "Warn"    : Constants.DEFAULT_WARN,
        }

    @boolean_setter("Warn")
    def set_Warn(self, value):
        """Bad文字の警告表示を設定"""
        pass

    def set_Log(self, value) -> str:
        """ログモードを設定 (Yes/No またはログレベル名)"""
        s_val = str(value)
        if isinstance(logging.getLevelName(s_val.upper()), int):
            self.env["Log"] = s_val.upper()
        elif s_val.lower() in ["1", "on", "true", "yes"]:
            self.env["Log"] = "Yes"
        else:
            self.env["Log"] = "No"
        return f"Log mode: {self.env['Log']}"

    def set_Grammar(self, value) -> str:
        """文法を設定"""
        name = str(value).capitalize()
        if name not in Constants.GRAMMARS:
            raise AttributeError(Constants.ERR_GRAMMAR)
        self.env["Grammar"] = name
        return f"Grammar: {name}"

    def set_Style(self, value) -> str:
        """構文木の表示スタイルを設定"""
        name = str(value).capitalize()
        if name not in Constants.STYLES:
            raise AttributeError(Constants.ERR_STYLE)
        self.env["Style"] = name
        return f"Style: {name}"

    def set(self, name: str, value) -> str:
        """名前で設定メソッドを呼び出す"""
        method = getattr(self, f"set_{name}", None)
        if name not in self.env or method is None:
            raise AttributeError(Constants.ERR_UNKNOWN.format(name=name))
        return method(value)

    def load(self, path: Optional[str] = None) -> bool:
        """config.ini の [ENV] セクションを読み込む。ファイルが無ければ既定値のまま"""
        ini = configparser.ConfigParser()
        path = path or Constants.CONFIG_FILE
        if not ini.read(path, encoding="utf-8"):
            logger.debug(f"{path} not found. use defaults.")
            return False
        if "ENV" not in ini:
            return False

        for name, value in ini["ENV"].items():
            # configparser はキーを小文字にするので先頭を大文字に戻す
            self.set(name.capitalize(), value.strip('"'))
        logger.debug(f"config loaded: {self.env}")
        return True

    def apply_log_level(self):
        """Log設定をルートロガーに反映する"""
        log_mode = self.env["Log"]
        if log_mode == "Yes":
            logging.getLogger().setLevel(logging.DEBUG)
        elif log_mode == "No":
            logging.getLogger().setLevel(logging.WARNING)
        else:
            logging.getLogger().setLevel(getattr(logging, log_mode, logging.WARNING))


from pygments.lexer import RegexLexer
from pygments.token import Number, Operator, Punctuation, Keyword, Name, Error, Text

class CalcLexer(RegexLexer):
    """入力中の式をハイライトするための Pygments レキサ"""
    name = 'mcalc'

    tokens = {
        'root': [
            # REPLコマンド
            (r'^(set|show|tokens|help|exit|quit)\b', Keyword),
            # 数値 (NumberToken)
            (r'\d+', Number.Integer),
            # 演算子
            (r'[+\-*/]', Operator),
            # 括弧
            (r'[()]', Punctuation),
            # 設定名・設定値
            (r'[A-Za-z_][A-Za-z0-9_]*', Name),
            # 空白
            (r'\s+', Text),
            # それ以外は BadToken になる文字
            (r'.', Error),
        ]
    }
