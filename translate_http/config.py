"""
アプリケーション設定
環境変数からの読み込みと設定値の管理を行う
"""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# リージョン未指定時のデフォルト
DEFAULT_REGION = "us-east-1"


class Settings(BaseSettings):
    """アプリケーション設定クラス"""

    # ============================================
    # AWS認証情報
    # ============================================
    aws_region: str = DEFAULT_REGION
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_session_token: str | None = None

    # ============================================
    # Translate API設定
    # ============================================
    translate_timeout: float = 30.0  # 秒

    # ============================================
    # アプリケーション設定
    # ============================================
    log_level: str = "INFO"

    # ============================================
    # バリデーション
    # ============================================

    @field_validator("aws_region")
    @classmethod
    def validate_aws_region(cls, v: str) -> str:
        """空のリージョンはデフォルトに置き換える"""
        v = (v or "").strip()
        return v or DEFAULT_REGION

    @field_validator("translate_timeout")
    @classmethod
    def validate_translate_timeout(cls, v: float) -> float:
        """タイムアウト値のバリデーション"""
        if v <= 0:
            raise ValueError("TRANSLATE_TIMEOUTは正の値である必要があります")
        return v

    # ============================================
    # プロパティ
    # ============================================

    @property
    def has_credentials(self) -> bool:
        """アクセスキーとシークレットキーが揃っているかどうか"""
        return bool(self.aws_access_key_id and self.aws_secret_access_key)

    @property
    def log_level_int(self) -> int:
        """ログレベルを数値で取得"""
        import logging
        return getattr(logging, self.log_level.upper(), logging.INFO)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """設定インスタンスを取得（キャッシュ付き）"""
    return Settings()


def clear_settings_cache() -> None:
    """設定キャッシュをクリア（テスト用）"""
    get_settings.cache_clear()
