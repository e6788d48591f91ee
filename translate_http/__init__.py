"""
Amazon Translate HTTP APIクライアント
SigV4署名付きリクエストの送信とレスポンスの分類を行う
"""
from translate_http.config import Settings, get_settings
from translate_http.core.logging import configure_logging
from translate_http.schemas.result import (
    ApiErrorResult,
    SuccessResult,
    TranslateResult,
    UnknownResult,
)
from translate_http.services import (
    AWSCredentials,
    TranslateService,
    translate,
    translate_http,
    translate_http_async,
)
from translate_http.utils.exceptions import (
    AppError,
    CredentialsNotConfiguredError,
    TranslateAPIError,
)

__version__ = "0.1.0"

__all__ = [
    "AWSCredentials",
    "ApiErrorResult",
    "AppError",
    "CredentialsNotConfiguredError",
    "Settings",
    "SuccessResult",
    "TranslateAPIError",
    "TranslateResult",
    "TranslateService",
    "UnknownResult",
    "configure_logging",
    "get_settings",
    "translate",
    "translate_http",
    "translate_http_async",
]
