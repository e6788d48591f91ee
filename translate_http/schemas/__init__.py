"""
スキーマ定義
"""
from translate_http.schemas.result import (
    ApiErrorResult,
    SuccessResult,
    TranslateResult,
    UnknownResult,
)

__all__ = [
    "ApiErrorResult",
    "SuccessResult",
    "TranslateResult",
    "UnknownResult",
]
