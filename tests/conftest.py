"""
テスト用共通設定
"""
from typing import Callable

import httpx
import pytest

from translate_http.config import Settings, clear_settings_cache
from translate_http.services.sigv4 import AWSCredentials

# 環境変数から設定を読むため、テスト間で漏れないように毎回消す
AWS_ENV_VARS = (
    "AWS_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "TRANSLATE_TIMEOUT",
    "LOG_LEVEL",
)

FIXED_TIMESTAMP = "20240115T093000Z"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """AWS関連の環境変数と設定キャッシュをリセット"""
    for name in AWS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    """.env を読まないテスト用設定"""
    return Settings(_env_file=None)


@pytest.fixture
def credentials() -> AWSCredentials:
    """テスト用AWS認証情報"""
    return AWSCredentials(
        access_key_id="AKIDEXAMPLE",
        secret_access_key="wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY",
    )


@pytest.fixture
def session_credentials() -> AWSCredentials:
    """セッショントークン付きのテスト用AWS認証情報"""
    return AWSCredentials(
        access_key_id="ASIAEXAMPLE",
        secret_access_key="wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY",
        session_token="session-token-example",
    )


@pytest.fixture
def fixed_timestamp(monkeypatch) -> str:
    """署名タイムスタンプを固定"""
    monkeypatch.setattr(
        "translate_http.services.request_executor.sigv4_timestamp",
        lambda: FIXED_TIMESTAMP,
    )
    return FIXED_TIMESTAMP


@pytest.fixture
def mock_translate() -> Callable[..., tuple[httpx.Client, list[httpx.Request]]]:
    """
    固定レスポンスを返すhttpxクライアントを作る

    戻り値の2番目のリストに送信されたリクエストが記録される。
    """

    def _factory(
        status_code: int = 200,
        content: bytes | str = b"{}",
        headers: dict[str, str] | None = None,
    ) -> tuple[httpx.Client, list[httpx.Request]]:
        requests: list[httpx.Request] = []
        if isinstance(content, str):
            content = content.encode("utf-8")

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                status_code,
                content=content,
                headers={"x-amzn-requestid": "req-0001", **(headers or {})},
            )

        return httpx.Client(transport=httpx.MockTransport(handler)), requests

    return _factory
