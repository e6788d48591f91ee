"""
Translate サービス
Translate APIのオペレーションを呼び出すラッパー
"""
from typing import Any, Optional

import httpx
import structlog

from translate_http.config import Settings
from translate_http.schemas.result import ApiErrorResult, TranslateResult, UnknownResult
from translate_http.services.request_executor import translate_http
from translate_http.services.sigv4 import AWSCredentials
from translate_http.utils.exceptions import TranslateAPIError
from translate_http.utils.json_body import JSONArray

logger = structlog.get_logger(__name__)


class TranslateService:
    """
    Translate APIのオペレーション

    各メソッドはエラー結果を TranslateAPIError として送出する。
    結果をそのまま扱いたい場合は translate_http を直接使う。
    """

    def __init__(
        self,
        credentials: Optional[AWSCredentials] = None,
        client: Optional[httpx.Client] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.credentials = credentials
        self.client = client
        self.settings = settings

    def _call(self, action: str, body: dict[str, Any]) -> Any:
        result: TranslateResult = translate_http(
            action,
            body=body,
            credentials=self.credentials,
            client=self.client,
            settings=self.settings,
        )
        if isinstance(result, ApiErrorResult):
            raise result.to_exception()
        if isinstance(result, UnknownResult):
            # 空ボディは結果なしとして扱う
            if not result.text.strip():
                return None
            raise TranslateAPIError(
                message=f"{action} のレスポンスを解釈できません",
                status_code=result.status_code,
                error_code="UNEXPECTED_RESPONSE",
                headers=result.headers,
            )
        return result.data

    def translate_text(
        self,
        text: str,
        source_language: str = "auto",
        target_language: str = "en",
        terminology_names: Optional[list[str]] = None,
    ) -> str:
        """
        テキストを翻訳

        Args:
            text: 翻訳するテキスト
            source_language: 元言語コード。"auto" で自動判定
            target_language: 翻訳先の言語コード
            terminology_names: 適用するカスタム用語集の名前

        Returns:
            翻訳後のテキスト
        """
        body: dict[str, Any] = {
            "Text": text,
            "SourceLanguageCode": source_language,
            "TargetLanguageCode": target_language,
        }
        if terminology_names:
            body["TerminologyNames"] = JSONArray(terminology_names)

        data = self._call("TranslateText", body)
        if not isinstance(data, dict) or "TranslatedText" not in data:
            raise TranslateAPIError(
                message="TranslateText のレスポンスに TranslatedText がありません",
                error_code="UNEXPECTED_RESPONSE",
            )
        logger.debug(
            "翻訳完了",
            source_language=data.get("SourceLanguageCode", source_language),
            target_language=target_language,
            length=len(text),
        )
        return data["TranslatedText"]

    def list_languages(
        self,
        display_language_code: Optional[str] = None,
        max_results: Optional[int] = None,
        next_token: Optional[str] = None,
    ) -> dict[str, Any]:
        """対応言語の一覧を取得"""
        body: dict[str, Any] = {}
        if display_language_code:
            body["DisplayLanguageCode"] = display_language_code
        if max_results is not None:
            body["MaxResults"] = max_results
        if next_token:
            body["NextToken"] = next_token
        return self._call("ListLanguages", body)

    def list_terminologies(
        self,
        max_results: Optional[int] = None,
        next_token: Optional[str] = None,
    ) -> dict[str, Any]:
        """カスタム用語集の一覧を取得"""
        body: dict[str, Any] = {}
        if max_results is not None:
            body["MaxResults"] = max_results
        if next_token:
            body["NextToken"] = next_token
        return self._call("ListTerminologies", body)

    def get_terminology(self, name: str, data_format: str = "CSV") -> dict[str, Any]:
        """カスタム用語集を取得"""
        return self._call(
            "GetTerminology",
            {"Name": name, "TerminologyDataFormat": data_format},
        )

    def delete_terminology(self, name: str) -> None:
        """カスタム用語集を削除"""
        self._call("DeleteTerminology", {"Name": name})
        logger.info("用語集を削除", name=name)


def translate(
    text: str,
    source_language: str = "auto",
    target_language: str = "en",
    terminology_names: Optional[list[str]] = None,
    **kwargs: Any,
) -> str:
    """TranslateService.translate_text のショートカット

    kwargs は TranslateService に渡す (credentials, client, settings)。
    """
    return TranslateService(**kwargs).translate_text(
        text,
        source_language=source_language,
        target_language=target_language,
        terminology_names=terminology_names,
    )
