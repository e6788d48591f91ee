"""
Translate APIの実行結果

kind で判別するタグ付きユニオン:
  - SuccessResult: 2xxでJSONボディ
  - ApiErrorResult: 4xx/5xx（ボディはJSON、XML、またはパース不能な生テキスト）
  - UnknownResult: 2xxだがJSONでないボディ
"""
from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Union

from translate_http.utils.exceptions import TranslateAPIError
from translate_http.utils.response_parser import extract_error_message


@dataclass
class SuccessResult:
    """成功レスポンス"""

    data: Any
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    kind: Literal["success"] = "success"

    @property
    def is_error(self) -> bool:
        return False

    def raise_for_error(self) -> "SuccessResult":
        return self


@dataclass
class ApiErrorResult:
    """
    エラーレスポンス

    body_format が None の場合、data はパースできなかった生テキスト。
    request_* は署名の診断情報で、表示用ではない。
    """

    status_code: int
    error_type: str
    data: Any
    body_format: Optional[Literal["json", "xml"]]
    raw_text: str
    headers: dict[str, str] = field(default_factory=dict)
    request_canonical: str = field(default="", repr=False)
    request_string_to_sign: str = field(default="", repr=False)
    request_signature: str = field(default="", repr=False)
    kind: Literal["aws_error"] = "aws_error"

    @property
    def is_error(self) -> bool:
        return True

    @property
    def is_parsed(self) -> bool:
        """ボディを構造化できたかどうか"""
        return self.body_format is not None

    @property
    def message(self) -> str:
        """AWSのエラーメッセージ（なければ生テキスト）"""
        if self.is_parsed:
            message = extract_error_message(self.data)
            if message:
                return message
        return self.raw_text or f"HTTP {self.status_code}"

    def to_exception(self) -> TranslateAPIError:
        """例外に変換"""
        return TranslateAPIError(
            message=f"{self.error_type}: {self.message}",
            status_code=self.status_code,
            error_type=self.error_type,
            headers=self.headers,
            request_canonical=self.request_canonical,
            request_string_to_sign=self.request_string_to_sign,
            request_signature=self.request_signature,
        )

    def raise_for_error(self) -> None:
        raise self.to_exception()


@dataclass
class UnknownResult:
    """2xxだがJSONとして解釈できなかったレスポンス"""

    text: str
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    kind: Literal["unknown"] = "unknown"

    @property
    def is_error(self) -> bool:
        return False

    def raise_for_error(self) -> "UnknownResult":
        return self


TranslateResult = Union[SuccessResult, ApiErrorResult, UnknownResult]
