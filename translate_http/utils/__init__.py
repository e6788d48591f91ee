"""
ユーティリティモジュール
共通ユーティリティの公開
"""
from translate_http.utils.exceptions import (
    AppError,
    CredentialsNotConfiguredError,
    TranslateAPIError,
)
from translate_http.utils.json_body import JSONArray, auto_unbox, encode_json_body
from translate_http.utils.response_parser import (
    ResponseParseError,
    extract_error_message,
    extract_error_type,
    parse_json,
    parse_xml,
)

__all__ = [
    # exceptions
    "AppError",
    "CredentialsNotConfiguredError",
    "TranslateAPIError",
    # json_body
    "JSONArray",
    "auto_unbox",
    "encode_json_body",
    # response_parser
    "ResponseParseError",
    "extract_error_message",
    "extract_error_type",
    "parse_json",
    "parse_xml",
]
