from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from src.jeopardy_board.domain.errors import NetworkError


class Showing(IntEnum):
    """セルの公開状態。値の大小が進行順を表す。"""

    HIDDEN = 0
    QUESTION = 1
    ANSWER = 2


@dataclass
class Clue:
    """問題と答えの組（公開状態つき）。

    現状の契約:
    - question/answer: 正規化済みテキスト
    - showing: HIDDEN から始まり QUESTION → ANSWER の順にのみ進む
    """

    question: str
    answer: str
    showing: Showing = Showing.HIDDEN


@dataclass
class Category:
    """盤面の 1 列を占めるカテゴリ。"""

    title: str
    clues: list[Clue] = field(default_factory=list)


_TAG_RE = re.compile(r"<[^>]+>")


def _normalize_text(s: Any) -> str:
    """API 由来のテキストを表示用に軽量正規化する。

    - HTML エンティティを復号
    - タグ（<i> など）を除去
    - 連続空白を1つに圧縮し、前後空白を除去
    """
    if s is None:
        return ""
    s = html.unescape(str(s))
    s = _TAG_RE.sub("", s)
    s = re.sub(r"\s+", " ", s)
    return s.strip()


def extract_category_ids(items: Any, count: int) -> list[int]:
    """ランダム問題の配列から category_id を先頭 count 件ぶん取り出す。

    重複は許容する（それぞれを別の列候補として扱う）。
    件数不足や category_id の欠落は NetworkError。
    """
    if not isinstance(items, list):
        raise NetworkError("random 応答が配列ではありません。")
    if len(items) < count:
        raise NetworkError(f"random 応答の件数が不足しています: {len(items)}/{count}")
    ids: list[int] = []
    for item in items[:count]:
        raw = item.get("category_id") if isinstance(item, dict) else None
        ids.append(_parse_category_id(raw))
    return ids


def _parse_category_id(raw: Any) -> int:
    """category_id を整数に変換する。

    int（bool を除く）と数字のみの文字列だけを受け付け、
    1.5 や inf などの丸め・桁あふれが起きうる値は NetworkError。
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        return int(raw.strip())
    raise NetworkError(f"category_id を解釈できません: {raw!r}")


def parse_category_payload(payload: Any) -> tuple[str, list[Clue]]:
    """category 応答から (タイトル, 有効な問題のリスト) を返す。

    - question/answer が正規化後に空の問題はスキップ
    - 余分なフィールドは捨てる
    - title/clues が無い応答は NetworkError
    """
    if not isinstance(payload, dict):
        raise NetworkError("category 応答がオブジェクトではありません。")
    title = payload.get("title")
    raw_clues = payload.get("clues")
    if title is None or not isinstance(raw_clues, list):
        raise NetworkError("category 応答に title/clues がありません。")

    clues: list[Clue] = []
    for raw in raw_clues:
        if not isinstance(raw, dict):
            continue
        question = _normalize_text(raw.get("question"))
        answer = _normalize_text(raw.get("answer"))
        if not question or not answer:
            continue
        clues.append(Clue(question=question, answer=answer))
    return _normalize_text(title), clues
