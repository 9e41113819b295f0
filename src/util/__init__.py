"""
どこで: `util` パッケージ。
何を: 設定ファイル読み込みなど、ドメインに依存しない補助関数。
"""
