"""
サービス層
"""
from translate_http.services.request_executor import (
    translate_http,
    translate_http_async,
)
from translate_http.services.sigv4 import AWSCredentials, SignatureResult, sign_request
from translate_http.services.translate_service import TranslateService, translate

__all__ = [
    "AWSCredentials",
    "SignatureResult",
    "TranslateService",
    "sign_request",
    "translate",
    "translate_http",
    "translate_http_async",
]
