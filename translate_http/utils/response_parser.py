"""
レスポンスボディのパース

Translate APIは通常JSONでエラーを返すが、API Gateway層やCloudFront層で
拒否された場合はXMLが返ることがあるため両方を扱う。
"""
import json
from typing import Any
from xml.etree import ElementTree as ET

UNKNOWN_ERROR_TYPE = "UnknownError"


class ResponseParseError(ValueError):
    """レスポンスボディをパースできない"""


def parse_json(text: str) -> Any:
    """JSONとしてパース。失敗時は ResponseParseError"""
    try:
        return json.loads(text)
    except ValueError as e:
        raise ResponseParseError(f"JSONとしてパースできません: {e}") from e


def _strip_namespace(tag: str) -> str:
    # {http://...}Code -> Code
    return tag.rsplit("}", 1)[-1]


def _element_to_value(element: ET.Element) -> Any:
    children = list(element)
    if not children:
        return (element.text or "").strip()

    result: dict[str, Any] = {}
    for child in children:
        key = _strip_namespace(child.tag)
        value = _element_to_value(child)
        if key in result:
            existing = result[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                result[key] = [existing, value]
        else:
            result[key] = value
    return result


def parse_xml(text: str) -> dict[str, Any]:
    """
    XMLを {ルート要素名: 内容} の辞書としてパース

    同名の子要素が複数ある場合はリストにまとめる。

    Raises:
        ResponseParseError: XMLとして不正な場合
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ResponseParseError(f"XMLとしてパースできません: {e}") from e
    return {_strip_namespace(root.tag): _element_to_value(root)}


def _find_key(data: Any, names: tuple[str, ...]) -> Any:
    """ネストした辞書からキーを探す（最初に見つかった値）"""
    if isinstance(data, dict):
        for name in names:
            value = data.get(name)
            if isinstance(value, str) and value:
                return value
        for value in data.values():
            found = _find_key(value, names)
            if found:
                return found
    return None


def extract_error_type(data: Any, body_format: str | None) -> str:
    """
    エラーボディからAWSのエラー種別を取り出す

    JSON: "__type" (例 "com.amazonaws...#InvalidParameterValueException") または "code"
    XML: Code要素。なければルート要素名
    """
    if body_format == "json" and isinstance(data, dict):
        error_type = data.get("__type") or data.get("code") or data.get("Code")
        if isinstance(error_type, str) and error_type:
            return error_type.rsplit("#", 1)[-1]
        return UNKNOWN_ERROR_TYPE

    if body_format == "xml" and isinstance(data, dict):
        code = _find_key(data, ("Code", "code"))
        if code:
            return code
        if len(data) == 1:
            return next(iter(data))

    return UNKNOWN_ERROR_TYPE


def extract_error_message(data: Any) -> str | None:
    """エラーボディからメッセージを取り出す"""
    message = _find_key(data, ("Message", "message"))
    return message if isinstance(message, str) else None
