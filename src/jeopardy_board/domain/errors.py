from __future__ import annotations


class NetworkError(Exception):
    """盤面構築中の取得失敗。

    HTTP エラー・タイムアウト・JSON 以外の応答・必要数に満たないカテゴリ/問題を含む。
    自動リトライは行わず、利用者がスタート/リスタートで再試行する。
    """
