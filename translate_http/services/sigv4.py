"""
AWS SigV4 署名ユーティリティ
Translate API呼び出しにAWS認証情報を注入する
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import botocore.auth
import botocore.credentials
import botocore.exceptions
from botocore.awsrequest import AWSRequest

from translate_http.config import DEFAULT_REGION, Settings


@dataclass
class AWSCredentials:
    """AWS認証情報"""

    access_key_id: str
    secret_access_key: str
    session_token: str | None = None
    region: str = DEFAULT_REGION

    @classmethod
    def from_settings(cls, settings: Settings) -> "AWSCredentials":
        """設定（環境変数）から認証情報を構築"""
        return cls(
            access_key_id=settings.aws_access_key_id or "",
            secret_access_key=settings.aws_secret_access_key or "",
            session_token=settings.aws_session_token or None,
            region=settings.aws_region,
        )


@dataclass(frozen=True)
class SignatureResult:
    """署名結果

    canonical_request と string_to_sign は通常の処理では使わないが、
    エラー時の診断情報として呼び出し元に返す。
    """

    signature_header: str
    body_hash: str
    canonical_request: str
    string_to_sign: str
    signed_headers: dict[str, str] = field(default_factory=dict)


def sigv4_timestamp(now: Optional[datetime] = None) -> str:
    """SigV4形式のUTCタイムスタンプ (YYYYMMDDTHHMMSSZ) を生成"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime(botocore.auth.SIGV4_TIMESTAMP)


class _FixedTimestampSigV4Auth(botocore.auth.SigV4Auth):
    """
    呼び出し元が指定したタイムスタンプで署名するSigV4Auth

    SigV4Auth.add_auth は内部で現在時刻を取得するため、X-Amz-Dateヘッダーと
    署名のタイムスタンプを呼び出し元で揃えられない。ここでは同じ手順を
    固定のタイムスタンプで実行し、途中の正規リクエストも保持する。
    """

    def __init__(self, credentials, service_name: str, region_name: str, timestamp: str):
        super().__init__(credentials, service_name, region_name)
        self._timestamp = timestamp
        self.last_canonical_request = ""
        self.last_string_to_sign = ""

    def add_auth(self, request: AWSRequest) -> None:
        if self.credentials is None:
            raise botocore.exceptions.NoCredentialsError()
        request.context["timestamp"] = self._timestamp
        self._modify_request_before_signing(request)
        canonical_request = self.canonical_request(request)
        string_to_sign = self.string_to_sign(request, canonical_request)
        signature = self.signature(string_to_sign, request)
        self._inject_signature_to_request(request, signature)
        self.last_canonical_request = canonical_request
        self.last_string_to_sign = string_to_sign


def sign_request(
    credentials: AWSCredentials,
    method: str,
    url: str,
    headers: dict[str, str],
    body: bytes,
    service: str = "translate",
    timestamp: Optional[str] = None,
) -> SignatureResult:
    """
    リクエストにSigV4署名を付与する

    Args:
        credentials: AWS認証情報
        method: HTTPメソッド
        url: リクエストURL（クエリ文字列はエンコード済みであること）
        headers: 署名対象ヘッダー
        body: リクエストボディ
        service: AWSサービス名
        timestamp: 署名タイムスタンプ。省略時は現在時刻

    Returns:
        署名結果
    """
    creds = botocore.credentials.Credentials(
        access_key=credentials.access_key_id,
        secret_key=credentials.secret_access_key,
        token=credentials.session_token or None,
    )

    aws_request = AWSRequest(method=method, url=url, headers=headers, data=body)
    signer = _FixedTimestampSigV4Auth(
        creds,
        service,
        credentials.region,
        timestamp or sigv4_timestamp(),
    )
    signer.add_auth(aws_request)

    return SignatureResult(
        signature_header=aws_request.headers["Authorization"],
        body_hash=signer.payload(aws_request),
        canonical_request=signer.last_canonical_request,
        string_to_sign=signer.last_string_to_sign,
        signed_headers=dict(aws_request.headers),
    )
