help_help = [
        "\n" + "="*30,
        "【入力形式のガイド】",
        "  式   : 1 + 2 - 3",
        "  設定 : set 項目名 値",
        "  字句 : tokens 式",
        "",
        "入力した式の構文木を字下げして表示します。計算はしません。",
        "既定の文法 (Strict) は + と - だけを解析します。",
        "* / ( ) を解析するには set Grammar Full としてください。",
        "解析できないトークン以降は黙って無視されます。",
        "",
        "コマンド名や設定名はTabキーで文字入力補完機能が使えます。",
        "- 終了するには空行を入力するか 'exit' または 'quit' と入力してください。",
        "="*30 + "\n",
]


command_help = {
    "Log":      "ログ出力の設定\n" \
                "設定例: > set Log Yes    ＊DEBUG や INFO などのレベル名も指定できる",
    "Grammar":  "文法の設定\n" \
                "設定例: > set Grammar Strict   ＊+ と - だけ (既定)\n" \
                "      : > set Grammar Full     ＊* / ( ) も解析する",
    "Style":    "構文木の表示スタイル\n" \
                "設定例: > set Style Plain   ＊空白4つで字下げ (既定)\n" \
                "      : > set Style Rich    ＊ガイド線つき",
    "Warn":     "読み捨てた不明な文字を警告するか\n" \
                "設定例: > set Warn on",
}
