"""
Translate API リクエスト実行

SigV4署名付きのPOSTリクエストを1回だけ送信し、レスポンスを
SuccessResult / ApiErrorResult / UnknownResult のいずれかに分類する。

- action あり: X-Amz-Target でオペレーションを指定（パス "/"）
- action なし: バージョンなしの形式（ターゲットヘッダーなし、空パス）

リトライは行わない。通信エラー（httpx.HTTPError）はそのまま送出する。
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode

import httpx
import structlog

from translate_http.config import DEFAULT_REGION, Settings, get_settings
from translate_http.schemas.result import (
    ApiErrorResult,
    SuccessResult,
    TranslateResult,
    UnknownResult,
)
from translate_http.services.sigv4 import (
    AWSCredentials,
    SignatureResult,
    sign_request,
    sigv4_timestamp,
)
from translate_http.utils.exceptions import CredentialsNotConfiguredError
from translate_http.utils.json_body import encode_json_body
from translate_http.utils.log_sanitizer import (
    mask_canonical_request,
    mask_headers,
    mask_signature_header,
    mask_url,
)
from translate_http.utils.response_parser import (
    ResponseParseError,
    extract_error_type,
    parse_json,
    parse_xml,
)

logger = structlog.get_logger(__name__)

SERVICE_NAME = "translate"
TARGET_PREFIX = "AWSShineFrontendService_20170701"
CONTENT_TYPE = "application/x-amz-json-1.1"

# 署名後に変更されると署名が一致しなくなる httpx の引数
SIGNED_REQUEST_KWARGS = frozenset(
    {"params", "headers", "content", "data", "json", "files", "cookies"}
)


@dataclass
class PreparedRequest:
    """署名済みの送信可能なリクエスト"""

    url: str
    headers: dict[str, str]
    body: bytes
    timestamp: str
    canonical_headers: dict[str, str]
    signature: SignatureResult


def resolve_credentials(
    credentials: Optional[AWSCredentials] = None,
    key: Optional[str] = None,
    secret: Optional[str] = None,
    session_token: Optional[str] = None,
    region: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> AWSCredentials:
    """
    呼び出し引数、認証情報オブジェクト、設定の順に認証情報を解決

    リージョンは引数、認証情報オブジェクトの順に使い、どちらも空なら
    us-east-1 とする。環境変数 AWS_REGION はここでは参照しない。

    Raises:
        CredentialsNotConfiguredError: アクセスキーまたはシークレットキーがない場合
    """
    base = credentials or AWSCredentials.from_settings(settings or get_settings())
    explicit_region = credentials.region if credentials is not None else None

    resolved = AWSCredentials(
        access_key_id=key if key is not None else base.access_key_id,
        secret_access_key=secret if secret is not None else base.secret_access_key,
        session_token=session_token if session_token is not None else base.session_token,
        region=region or explicit_region or DEFAULT_REGION,
    )

    missing = []
    if not resolved.access_key_id:
        missing.append("AWS_ACCESS_KEY_ID")
    if not resolved.secret_access_key:
        missing.append("AWS_SECRET_ACCESS_KEY")
    if missing:
        raise CredentialsNotConfiguredError(missing)

    return resolved


def translate_host(region: Optional[str]) -> str:
    """リージョンからエンドポイントのホスト名を組み立てる"""
    return f"translate.{region or DEFAULT_REGION}.amazonaws.com"


def encode_query(query: Optional[Mapping[str, Any]]) -> str:
    """クエリパラメータをSigV4の正規形と同じエンコードで文字列化"""
    if not query:
        return ""
    return urlencode(
        [(str(k), str(v)) for k, v in query.items()],
        safe="-_.~",
        quote_via=quote,
    )


def build_url(host: str, action: Optional[str], query: Optional[Mapping[str, Any]]) -> str:
    """リクエストURLを組み立てる（action なしの場合はパスなし）"""
    url = f"https://{host}/" if action is not None else f"https://{host}"
    query_string = encode_query(query)
    if query_string:
        url = f"{url}?{query_string}"
    return url


def prepare_request(
    action: Optional[str],
    query: Optional[Mapping[str, Any]],
    body: Any,
    credentials: AWSCredentials,
    timestamp: Optional[str] = None,
) -> PreparedRequest:
    """
    リクエストを組み立てて署名する

    Args:
        action: オペレーション名（例 "TranslateText"）。None でバージョンなし形式
        query: クエリパラメータ
        body: JSONシリアライズ可能なボディ
        credentials: 解決済みの認証情報
        timestamp: 署名タイムスタンプ。省略時は現在時刻

    Returns:
        署名済みリクエスト
    """
    # X-Amz-Date と署名で同じ文字列を使う
    timestamp = timestamp or sigv4_timestamp()
    host = translate_host(credentials.region)
    url = build_url(host, action, query)
    payload = encode_json_body(body)

    canonical_headers = {
        "host": host,
        "X-Amz-Date": timestamp,
    }
    if action is not None:
        canonical_headers["X-Amz-Target"] = f"{TARGET_PREFIX}.{action}"
        canonical_headers["Content-Type"] = CONTENT_TYPE
    if credentials.session_token:
        canonical_headers["x-amz-security-token"] = credentials.session_token

    signature = sign_request(
        credentials=credentials,
        method="POST",
        url=url,
        headers=dict(canonical_headers),
        body=payload,
        service=SERVICE_NAME,
        timestamp=timestamp,
    )

    headers: dict[str, str] = {}
    if action is not None:
        headers["host"] = host
        headers["X-Amz-Target"] = canonical_headers["X-Amz-Target"]
        headers["Content-Type"] = CONTENT_TYPE
    headers["X-Amz-Date"] = timestamp
    headers["x-amz-content-sha256"] = signature.body_hash
    if credentials.session_token:
        headers["x-amz-security-token"] = credentials.session_token
    headers["Authorization"] = signature.signature_header

    logger.debug(
        "Translate API リクエスト署名",
        action=action,
        url=mask_url(url),
        headers=mask_headers(headers),
        canonical_request=mask_canonical_request(signature.canonical_request),
        string_to_sign=signature.string_to_sign,
    )

    return PreparedRequest(
        url=url,
        headers=headers,
        body=payload,
        timestamp=timestamp,
        canonical_headers=canonical_headers,
        signature=signature,
    )


def classify_response(
    response: httpx.Response,
    signature: SignatureResult,
    action: Optional[str] = None,
) -> TranslateResult:
    """
    レスポンスを分類する

    - 4xx/5xx: JSON → XML → 生テキストの順に解釈し ApiErrorResult
    - それ以外: JSONなら SuccessResult、解釈できなければ UnknownResult
    """
    text = response.content.decode("utf-8", errors="replace")
    headers = dict(response.headers)

    if response.status_code >= 400:
        data: Any = text
        body_format = None
        try:
            data = parse_json(text)
            body_format = "json"
        except ResponseParseError:
            try:
                data = parse_xml(text)
                body_format = "xml"
            except ResponseParseError:
                logger.debug(
                    "Translate API エラーボディを解釈できません",
                    status_code=response.status_code,
                )

        error_type = extract_error_type(data, body_format)
        logger.warning(
            "Translate API HTTPエラー",
            action=action,
            status_code=response.status_code,
            error_type=error_type,
            request_id=headers.get("x-amzn-requestid"),
            request_signature=mask_signature_header(signature.signature_header),
        )
        return ApiErrorResult(
            status_code=response.status_code,
            error_type=error_type,
            data=data,
            body_format=body_format,
            raw_text=text,
            headers=headers,
            request_canonical=signature.canonical_request,
            request_string_to_sign=signature.string_to_sign,
            request_signature=signature.signature_header,
        )

    try:
        return SuccessResult(
            data=parse_json(text),
            status_code=response.status_code,
            headers=headers,
        )
    except ResponseParseError:
        logger.info(
            "Translate API レスポンスがJSONではありません",
            action=action,
            status_code=response.status_code,
        )
        return UnknownResult(text=text, status_code=response.status_code, headers=headers)


def _check_request_kwargs(request_kwargs: Mapping[str, Any]) -> None:
    """署名済みの内容を書き換える追加オプションを拒否"""
    conflicts = sorted(SIGNED_REQUEST_KWARGS.intersection(request_kwargs))
    if conflicts:
        raise ValueError(
            f"署名済みリクエストを変更するオプションは指定できません: {', '.join(conflicts)}"
        )


def translate_http(
    action: Optional[str] = None,
    query: Optional[Mapping[str, Any]] = None,
    body: Any = None,
    *,
    region: Optional[str] = None,
    key: Optional[str] = None,
    secret: Optional[str] = None,
    session_token: Optional[str] = None,
    credentials: Optional[AWSCredentials] = None,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
    **request_kwargs: Any,
) -> TranslateResult:
    """
    Translate APIを呼び出す

    Args:
        action: オペレーション名。None でバージョンなし形式
        query: クエリパラメータ
        body: リクエストボディ
        region: リージョン。空の場合は us-east-1
        key: アクセスキー（credentials / 環境変数より優先）
        secret: シークレットキー
        session_token: セッショントークン
        credentials: 認証情報オブジェクト
        client: 送信に使う httpx.Client。省略時は呼び出しごとに生成
        settings: 設定。省略時は get_settings()
        **request_kwargs: httpx.Client.post に渡す追加オプション（timeout, extensions など）。
            署名対象を変える params / headers / content などは ValueError

    Returns:
        SuccessResult / ApiErrorResult / UnknownResult
    """
    _check_request_kwargs(request_kwargs)
    settings = settings or get_settings()
    resolved = resolve_credentials(
        credentials=credentials,
        key=key,
        secret=secret,
        session_token=session_token,
        region=region,
        settings=settings,
    )
    prepared = prepare_request(action, query, body, resolved)

    if client is not None:
        response = client.post(
            prepared.url,
            content=prepared.body,
            headers=prepared.headers,
            **request_kwargs,
        )
    else:
        with httpx.Client(timeout=settings.translate_timeout) as owned_client:
            response = owned_client.post(
                prepared.url,
                content=prepared.body,
                headers=prepared.headers,
                **request_kwargs,
            )

    return classify_response(response, prepared.signature, action=action)


async def translate_http_async(
    action: Optional[str] = None,
    query: Optional[Mapping[str, Any]] = None,
    body: Any = None,
    *,
    region: Optional[str] = None,
    key: Optional[str] = None,
    secret: Optional[str] = None,
    session_token: Optional[str] = None,
    credentials: Optional[AWSCredentials] = None,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
    **request_kwargs: Any,
) -> TranslateResult:
    """translate_http の非同期版"""
    _check_request_kwargs(request_kwargs)
    settings = settings or get_settings()
    resolved = resolve_credentials(
        credentials=credentials,
        key=key,
        secret=secret,
        session_token=session_token,
        region=region,
        settings=settings,
    )
    prepared = prepare_request(action, query, body, resolved)

    if client is not None:
        response = await client.post(
            prepared.url,
            content=prepared.body,
            headers=prepared.headers,
            **request_kwargs,
        )
    else:
        async with httpx.AsyncClient(timeout=settings.translate_timeout) as owned_client:
            response = await owned_client.post(
                prepared.url,
                content=prepared.body,
                headers=prepared.headers,
                **request_kwargs,
            )

    return classify_response(response, prepared.signature, action=action)
