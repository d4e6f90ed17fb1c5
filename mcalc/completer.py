from prompt_toolkit.completion import WordCompleter
calc_completer = WordCompleter([
    'set', 'show', 'tokens', 'help',        # 上位ほど優先順位が高い
    'exit', 'quit',
    ### 設定項目 ###
    'Log', 'Grammar', 'Style', 'Warn',
    ### 設定値 ###
    'Strict', 'Full',
    'Plain', 'Rich',
    'Yes', 'No', 'DEBUG', 'INFO',
], ignore_case=True) # 大文字小文字を区別しない設定
