"""
リクエストボディのJSONシリアライズ

署名に使ったバイト列と送信するバイト列は同一である必要があるため、
ボディは必ずこのモジュールで一度だけエンコードする。
"""
import json
from typing import Any

_SCALAR_TYPES = (str, int, float, bool, type(None))


class JSONArray(list):
    """auto_unbox で展開されないリスト

    TerminologyNames のように要素が1つでも配列で送る必要がある値に使う。
    """


def auto_unbox(value: Any) -> Any:
    """
    要素が1つだけのスカラーのリストをスカラーに展開する

    ["en"] -> "en"、{"a": [1]} -> {"a": 1}。
    2要素以上のリストや、辞書・リストを1つだけ含むリストは展開しない。
    """
    if isinstance(value, dict):
        return {key: auto_unbox(item) for key, item in value.items()}
    if isinstance(value, JSONArray):
        return [auto_unbox(item) for item in value]
    if isinstance(value, (list, tuple)):
        if len(value) == 1 and isinstance(value[0], _SCALAR_TYPES):
            return value[0]
        return [auto_unbox(item) for item in value]
    return value


def encode_json_body(body: Any) -> bytes:
    """
    ボディをコンパクトなJSONにエンコード

    Args:
        body: JSONシリアライズ可能な値。Noneの場合は空ボディ

    Returns:
        UTF-8のバイト列
    """
    if body is None:
        return b""
    return json.dumps(
        auto_unbox(body),
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")
