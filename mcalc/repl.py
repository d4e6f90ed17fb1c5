import logging # ログの設定
logging.basicConfig(
level=logging.WARNING, # 出力レベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger =  logging.getLogger(__name__)

import cmd

# プロジェクト内のクラスのインポート
from classes import CalcSystemConfig, CalcLexer
from classes import console, err_console
from formatter import FormatterFactory
from lexer import Lexer
from parser import Parser
from mcalchelp import help_help, command_help
from completer import calc_completer

# 以下、見栄えを改善するための外部システムのインポート

# 入力中の式にシンタックスハイライト
from prompt_toolkit import PromptSession
from prompt_toolkit.lexers import PygmentsLexer
from prompt_toolkit.formatted_text import HTML

from prompt_toolkit.styles.pygments import style_from_pygments_cls
from pygments.styles import get_style_by_name

# 黒背景に映える鮮やかな配色を適用
selected_style = style_from_pygments_cls(get_style_by_name('paraiso-dark'))

from rich.panel import Panel


class CalcShell(cmd.Cmd):
    misc_header = "その他のガイド・解説:"
    doc_header = "実行可能なコマンド一覧:"
    undoc_header = "ヘルプ未作成のコマンド:"

    # prompt_toolkitで使うためのHTMLタグ付きプロンプト
    colored_prompt = HTML('<ansicyan>></ansicyan> ')

    intro_text = """
[bold magenta]mcalc 構文木ビューア[/bold magenta] [dim]V0.1[/dim]

    [cyan]式を入力すると構文木を表示します。空行で終了します。[/cyan]
    [cyan]Type 'help' for commands, 'exit' to quit.[/cyan]
    """
    prompt = "> "

    # 式ではなくコマンドとして扱う先頭の単語
    commands = ("set", "show", "tokens", "help", "exit", "quit")

    def __init__(self, stdout=None, config_path=None):
        super().__init__(stdout=stdout)
        self.session = None
        self.config = CalcSystemConfig()
        try:
            self.config.load(config_path)
        except AttributeError as e:
            err_console.print(f"Error: config.ini: {e}", markup=False)

    def cmdloop(self, intro=None):
        # 標準のイントロ表示をスキップし、Richで表示
        console.print(Panel(self.intro_text, border_style="blue"))

        # 入力ハイライト用のセッション (端末が必要なのでここで作る)
        if self.session is None:
            self.session = PromptSession(
                    lexer=PygmentsLexer(CalcLexer),  # シンタックスハイライト
                    completer=calc_completer,        # 補完機能
                    style=selected_style
            )

        stop = None
        while not stop:
            try:
                text = self.session.prompt(self.colored_prompt, reserve_space_for_menu=0)
            except EOFError:
                break
            except KeyboardInterrupt:
                continue

            stop = self.onecmd(text)
            stop = self.postcmd(stop, text)

    def onecmd(self, line):
        # 長さ0の行だけが終了の合図。空白だけの行は式として解析する
        if line == "":
            return self.emptyline()
        # 先頭の単語がコマンドのときだけ cmd.Cmd に渡す。
        # それ以外は ? や EOF も含めて、字下げを残したまま式として解析する
        words = line.split(None, 1)
        if words and words[0] in self.commands:
            return super().onecmd(line)
        return self.default(line)

    def emptyline(self):
        # Trueを返すとループが終了する（標準では直前のコマンドが走る）
        logger.debug("emptyline")
        return True

    def default(self, line):
        logger.debug(f"default: line={line!r}")
        try:
            self.config.apply_log_level()

            parser = Parser(line, grammar=self.config.env["Grammar"])
            expression = parser.parse()
            logger.debug(f"expression: {expression}")

            if self.config.env["Warn"] == "Yes":
                for diagnostic in parser.diagnostics:
                    err_console.print(f"Warning: {diagnostic}", markup=False)

            formatter = FormatterFactory.create_formatter(self.config.env["Style"])
            self.stdout.write(formatter.format(expression) + "\n")

        except Exception as e:
            logger.debug("parse failed", exc_info=True)
            err_console.print(f"Error: {e}", markup=False)

    # --- シェル制御コマンド ---
    def do_set(self, arg):
        """set 項目名 値 : 設定を変更する (Log Grammar Style Warn)"""
        args = arg.split()
        if len(args) != 2:
            err_console.print("Error: set 項目名 値 の形式で入力してください。", markup=False)
            return
        try:
            self.stdout.write(self.config.set(*args) + "\n")
        except AttributeError as e:
            err_console.print(f"Error: {e}", markup=False)

    def do_show(self, arg):
        """show : 現在の設定を表示する"""
        for name, value in self.config.env.items():
            self.stdout.write(f"{name:<8}: {value}\n")

    def do_tokens(self, arg):
        """tokens 式 : 字句解析の結果をそのまま表示する"""
        try:
            for token in Lexer(arg):
                self.stdout.write(f"{token.kind.name:<22} {token.position:>3}  {token.text!r:<8} {token.value}\n")
        except ValueError as e:
            err_console.print(f"Error: {e}", markup=False)

    def do_exit(self, arg):
        """終了コマンド"""
        return True # Trueを返すとループが終了する

    def do_quit(self, arg):
        """終了コマンド"""
        return True

    def do_help(self, arg):
        """
        help と打つとコマンド一覧、help [コマンド名] で詳細を表示します。
        help [設定名] で設定項目の説明を表示します。
        """
        if not arg:
            self.stdout.write("\n".join(help_help) + "\n")
        elif arg in command_help:
            self.stdout.write(command_help[arg] + "\n")
            return

        # 親クラスの help 処理をそのまま呼び出す
        return cmd.Cmd.do_help(self, arg)


def main():
    try:
        CalcShell().cmdloop()
    except KeyboardInterrupt:
        # Ctrl+C での強制終了をきれいに処理
        print("\nGoodbye.")


if __name__ == "__main__":
    main()
