"""
カスタム例外クラス
パッケージ全体で使用する例外の定義
"""
from typing import Optional


class AppError(Exception):
    """アプリケーション基底例外"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "APP_ERROR"
        self.details = details or {}


class CredentialsNotConfiguredError(AppError):
    """AWS認証情報が設定されていない例外"""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            message=f"AWS認証情報が設定されていません: {', '.join(missing)}",
            error_code="CREDENTIALS_NOT_CONFIGURED",
            details={"missing": missing},
        )


class TranslateAPIError(AppError):
    """Translate APIがエラーを返した例外

    ステータスコード、AWSのエラー種別、署名の診断情報を保持する。
    署名不一致 (SignatureDoesNotMatch) の調査では request_canonical と
    request_string_to_sign をサーバー側のメッセージと突き合わせる。
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_type: Optional[str] = None,
        error_code: str = "TRANSLATE_API_ERROR",
        headers: Optional[dict] = None,
        request_canonical: Optional[str] = None,
        request_string_to_sign: Optional[str] = None,
        request_signature: Optional[str] = None,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.headers = headers or {}
        self.request_canonical = request_canonical
        self.request_string_to_sign = request_string_to_sign
        self.request_signature = request_signature
        super().__init__(
            message=message,
            error_code=error_code,
            details={
                "status_code": status_code,
                "error_type": error_type,
            },
        )
