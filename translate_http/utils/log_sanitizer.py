"""
ログサニタイザー

認証情報や署名をマスクしてログに出力するためのユーティリティ
"""
import re
from typing import Any, Mapping
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse


# マスクするキー名のパターン（大文字小文字を区別しない）
SENSITIVE_KEY_PATTERNS = [
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*access[_-]?key.*", re.IGNORECASE),
    re.compile(r".*auth.*", re.IGNORECASE),
    re.compile(r".*credential.*", re.IGNORECASE),
    re.compile(r".*signature.*", re.IGNORECASE),
]

# URLのクエリパラメータでマスクするキー（署名付きURL対策）
SENSITIVE_URL_PARAMS = {
    "x-amz-credential",
    "x-amz-signature",
    "x-amz-security-token",
}

# マスク文字列
MASK = "***"


def is_sensitive_key(key: str) -> bool:
    """
    キー名がセンシティブかどうかを判定

    Args:
        key: キー名

    Returns:
        センシティブならTrue
    """
    return any(pattern.match(key) for pattern in SENSITIVE_KEY_PATTERNS)


def mask_headers(headers: Mapping[str, Any]) -> dict[str, Any]:
    """
    HTTPヘッダーのセンシティブな値をマスク

    x-amz-content-sha256 はボディのハッシュなのでマスクしない。

    Args:
        headers: ヘッダー

    Returns:
        マスクされたヘッダー
    """
    masked = {}
    for key, value in headers.items():
        if is_sensitive_key(key) and value:
            masked[key] = MASK
        else:
            masked[key] = value
    return masked


def mask_url(url: str) -> str:
    """
    URL内のセンシティブなクエリパラメータをマスク

    Args:
        url: マスクするURL

    Returns:
        マスクされたURL
    """
    parsed = urlparse(url)
    if not parsed.query:
        return url
    params = parse_qs(parsed.query, keep_blank_values=True)
    masked_params = {}
    for key, values in params.items():
        if key.lower() in SENSITIVE_URL_PARAMS:
            masked_params[key] = [MASK]
        else:
            masked_params[key] = values
    masked_query = urlencode(masked_params, doseq=True)
    return urlunparse(parsed._replace(query=masked_query))


def mask_signature_header(value: str | None) -> str | None:
    """
    Authorizationヘッダーの署名部分のみマスク

    Credentialスコープは調査に必要なので残す。
    """
    if not value:
        return value
    return re.sub(r"Signature=[0-9a-fA-F]+", f"Signature={MASK}", value)


def mask_canonical_request(canonical_request: str | None) -> str | None:
    """
    正規リクエスト内のセキュリティトークン行をマスク

    署名対象ヘッダーは正規リクエストに平文で含まれるため、
    x-amz-security-token の値だけを置き換える。
    """
    if not canonical_request:
        return canonical_request
    return re.sub(
        r"^(x-amz-security-token:).*$",
        rf"\g<1>{MASK}",
        canonical_request,
        flags=re.IGNORECASE | re.MULTILINE,
    )
