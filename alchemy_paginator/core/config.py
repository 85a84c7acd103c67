from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """페이지네이션 라이브러리 설정"""

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = False

    # Database
    database_echo: bool = False

    # Pagination
    default_page_size: int = 20
    max_page_size: int = 100  # PageParams 쿼리 파라미터 상한

    @model_validator(mode="after")
    def validate_page_sizes(self) -> "Settings":
        """페이지 크기 설정 검증"""
        if self.max_page_size < 1:
            raise ValueError("MAX_PAGE_SIZE must be at least 1.")

        if self.default_page_size < 1:
            raise ValueError("DEFAULT_PAGE_SIZE must be at least 1.")

        if self.default_page_size > self.max_page_size:
            raise ValueError(
                "DEFAULT_PAGE_SIZE must not exceed MAX_PAGE_SIZE "
                f"({self.max_page_size})."
            )

        return self

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """설정 인스턴스를 반환 (캐싱됨)"""
    return Settings()


settings = get_settings()
