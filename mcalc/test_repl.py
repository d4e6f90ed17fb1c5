"""
REPL (CalcShell) のテスト。端末は使わず onecmd を直接呼ぶ

使用方法:
    python -m pytest test_repl.py -v
"""
import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr

from repl import CalcShell


class TestCalcShell(unittest.TestCase):
    """1行ずつの処理のテスト"""

    def setUp(self):
        """テストの前準備 (config.ini は読まない)"""
        self.tmp = tempfile.TemporaryDirectory()
        self.out = io.StringIO()
        self.shell = CalcShell(stdout=self.out, config_path=os.path.join(self.tmp.name, "config.ini"))

    def tearDown(self):
        self.tmp.cleanup()

    def run_line(self, line):
        err = io.StringIO()
        with redirect_stderr(err):
            stop = self.shell.onecmd(line)
        return stop, self.out.getvalue(), err.getvalue()

    def test_prints_tree(self):
        """式を入力すると構文木を表示する"""
        stop, out, err = self.run_line("1 + 2")
        self.assertFalse(stop)
        self.assertEqual(out.splitlines(), [
            "BinaryExpression",
            "    NumberExpression",
            "        NumberToken 1",
            "    PlusToken",
            "    NumberExpression",
            "        NumberToken 2",
        ])
        self.assertEqual(err, "")

    def test_empty_line_stops(self):
        """空行でループを終了し、何も表示しない"""
        stop, out, err = self.run_line("")
        self.assertTrue(stop)
        self.assertEqual(out, "")

    def test_whitespace_line_is_parsed(self):
        """空白だけの行は終了せず回復用の木を表示する"""
        stop, out, err = self.run_line("   ")
        self.assertFalse(stop)
        self.assertEqual(out.splitlines(), ["NumberExpression", "    NumberToken 0"])

    def test_expression_starting_with_parenthesis(self):
        """( で始まる行も式として扱う"""
        stop, out, err = self.run_line("(1)")
        self.assertFalse(stop)
        self.assertEqual(out.splitlines(), ["NumberExpression", "    NumberToken 0"])

    def test_multiplication_ignored(self):
        """2 * 3 は Strict では 2 だけ表示し、エラーも出さない"""
        stop, out, err = self.run_line("2 * 3")
        self.assertEqual(out.splitlines(), ["NumberExpression", "    NumberToken 2"])
        self.assertEqual(err, "")

    def test_hard_failure(self):
        """数値に変換できない場合はエラー出力に1行出して続行する"""
        stop, out, err = self.run_line("1 + ²")
        self.assertFalse(stop)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("Error: "))

        # 次の行は普通に処理できる
        stop, out, err = self.run_line("5")
        self.assertEqual(out.splitlines(), ["NumberExpression", "    NumberToken 5"])

    def test_bad_character_is_silent(self):
        """不明な文字は既定では何も報告しない"""
        stop, out, err = self.run_line("1 $ + 2")
        self.assertEqual(err, "")
        self.assertEqual(len(out.splitlines()), 6)

    def test_bad_character_warning(self):
        """Warn = Yes なら読み捨てた文字を警告する"""
        self.run_line("set Warn on")
        stop, out, err = self.run_line("1 $ + 2")
        self.assertIn("Warning:", err)
        self.assertIn("$", err)

    def test_set_grammar_full(self):
        """Grammar = Full で掛け算を解析する"""
        stop, out, err = self.run_line("set Grammar Full")
        self.assertIn("Grammar: Full", out)
        self.out.truncate(0)
        self.out.seek(0)

        stop, out, err = self.run_line("2 * 3")
        self.assertEqual(out.splitlines()[0], "BinaryExpression")
        self.assertIn("    StarToken", out.splitlines())

    def test_set_invalid(self):
        """不正な設定値はエラー出力"""
        stop, out, err = self.run_line("set Style Fancy")
        self.assertIn("Error:", err)
        stop, out, err = self.run_line("set Style")
        self.assertIn("Error:", err)

    def test_show(self):
        """show で設定一覧を表示する"""
        stop, out, err = self.run_line("show")
        self.assertIn("Grammar : Strict", out)
        self.assertIn("Style   : Plain", out)

    def test_tokens(self):
        """tokens で字句解析の結果をそのまま表示する"""
        stop, out, err = self.run_line("tokens 1 $")
        lines = out.splitlines()
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[0].startswith("NumberToken"))
        self.assertTrue(lines[1].startswith("WhitespaceToken"))
        self.assertTrue(lines[2].startswith("BadToken"))
        self.assertTrue(lines[3].startswith("EndOfFileToken"))

    def test_question_mark_is_expression(self):
        """? で始まる行は help ではなく式として解析する"""
        stop, out, err = self.run_line("?")
        self.assertFalse(stop)
        self.assertEqual(out.splitlines(), ["NumberExpression", "    NumberToken 0"])

    def test_eof_word_is_expression(self):
        """EOF と入力してもループは終了せず式として解析する"""
        stop, out, err = self.run_line("EOF")
        self.assertFalse(stop)
        self.assertEqual(out.splitlines(), ["NumberExpression", "    NumberToken 0"])

    def test_leading_whitespace_kept(self):
        """行頭の空白を残したまま解析するので警告の位置がずれない"""
        self.run_line("set Warn on")
        stop, out, err = self.run_line("  $ 1")
        self.assertIn("位置 2:", err)
        self.assertIn("'$'", err)

    def test_indented_command(self):
        """行頭に空白があってもコマンドは実行される"""
        stop, out, err = self.run_line("  exit")
        self.assertTrue(stop)

    def test_exit(self):
        """exit と quit で終了する"""
        self.assertTrue(self.shell.onecmd("exit"))
        self.assertTrue(self.shell.onecmd("quit"))

    def test_help_topic(self):
        """help 設定名 で説明を表示する"""
        stop, out, err = self.run_line("help Grammar")
        self.assertIn("set Grammar Full", out)

    def test_config_file(self):
        """config.ini の設定で起動する"""
        path = os.path.join(self.tmp.name, "config.ini")
        with open(path, "w", encoding="utf-8") as f:
            f.write("[ENV]\nGrammar = Full\n")
        out = io.StringIO()
        shell = CalcShell(stdout=out, config_path=path)
        shell.onecmd("(1)")
        self.assertEqual(out.getvalue().splitlines()[0], "ParenthesizedExpression")


if __name__ == '__main__':
    # テストの実行
    unittest.main(verbosity=2)
