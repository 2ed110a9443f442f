"""Application Settings"""
import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    # Service
    service_name: str = "charon"
    environment: str = "development"
    log_level: str = "INFO"

    # AWS
    aws_region: str = Field(default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"))

    # S3 client
    s3_max_attempts: int = 3
    s3_retry_mode: str = "standard"
    s3_connect_timeout: int = 5
    s3_read_timeout: int = 10

    # Path filter (空なら AlwaysProcess)
    filter_key_prefixes: list[str] = []
    filter_key_suffixes: list[str] = []
    filter_key_pattern: str = ""
    filter_denied_buckets: list[str] = []

    class Config:
        env_prefix = "CHARON_"
        env_file = ".env"
        case_sensitive = False

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def use_json_logs(self) -> bool:
        """Lambda 上では environment に関わらず JSON ログ"""
        return not self.is_development or bool(os.getenv("AWS_LAMBDA_FUNCTION_NAME"))

    @property
    def has_path_filter(self) -> bool:
        """フィルタ設定が一つでもあるか"""
        return bool(
            self.filter_key_prefixes
            or self.filter_key_suffixes
            or self.filter_key_pattern
            or self.filter_denied_buckets
        )


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
