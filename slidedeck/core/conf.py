from functools import lru_cache
from typing import Any, Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from slidedeck.core.path_conf import BASE_PATH


class Settings(BaseSettings):
    """Global settings"""

    model_config = SettingsConfigDict(
        env_file=f'{BASE_PATH}/.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=True,
    )

    # .env environment
    ENVIRONMENT: Literal['dev', 'prod'] = 'dev'

    # FastAPI
    FASTAPI_API_V1_PATH: str = '/api/v1'
    FASTAPI_TITLE: str = 'SlideDeck'
    FASTAPI_DESCRIPTION: str = 'AI-assisted slide deck generation and editing'
    FASTAPI_DOCS_URL: str = '/docs'
    FASTAPI_REDOC_URL: str = '/redoc'
    FASTAPI_OPENAPI_URL: str | None = '/openapi'

    # .env database
    DATABASE_TYPE: Literal['mysql', 'postgresql', 'sqlite'] = 'sqlite'
    DATABASE_HOST: str = '127.0.0.1'
    DATABASE_PORT: int = 5432
    DATABASE_USER: str = 'postgres'
    DATABASE_PASSWORD: str = ''

    # Database
    DATABASE_ECHO: bool | Literal['debug'] = False
    DATABASE_POOL_ECHO: bool | Literal['debug'] = False
    DATABASE_SCHEMA: str = 'slidedeck'
    DATABASE_CHARSET: str = 'utf8mb4'
    DATABASE_SQLITE_FILENAME: str = 'slidedeck.sqlite3'
    DATABASE_SKIP_CREATE_TABLES: bool = False  # Use Alembic in prod

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = [  # no trailing slash
        'http://127.0.0.1:8000',
        'http://localhost:3000',
    ]
    CORS_EXPOSE_HEADERS: list[str] = [
        'X-Request-ID',
    ]

    # Middleware
    MIDDLEWARE_CORS: bool = True

    # Datetime
    DATETIME_TIMEZONE: str = 'UTC'

    # Trace ID
    TRACE_ID_REQUEST_HEADER_KEY: str = 'X-Request-ID'
    TRACE_ID_LOG_LENGTH: int = 32  # UUID length, must be <= 32
    TRACE_ID_LOG_DEFAULT_VALUE: str = '-'

    # Log
    LOG_FORMAT: str = (
        '<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</> | <lvl>{level: <8}</> | <cyan>{request_id}</> | <lvl>{message}</>'
    )

    # Log (console)
    LOG_STD_LEVEL: str = 'INFO'

    # Log (file)
    LOG_FILE_ENABLED: bool = True
    LOG_FILE_ACCESS_LEVEL: str = 'INFO'
    LOG_FILE_ERROR_LEVEL: str = 'ERROR'
    LOG_ACCESS_FILENAME: str = 'slidedeck_access.log'
    LOG_ERROR_FILENAME: str = 'slidedeck_error.log'

    ##################################################
    # [ App ] deck
    ##################################################
    # Presentation defaults
    DECK_DEFAULT_THEME: str = 'modern'
    DECK_DEFAULT_PRIMARY_COLOR: str = '#3b82f6'
    DECK_DEFAULT_SECONDARY_COLOR: str = '#1e40af'
    DECK_DEFAULT_FONT_FAMILY: str = 'Inter'

    # Placeholder image for layouts that need one
    DECK_PLACEHOLDER_IMAGE_URL: str = (
        'https://images.unsplash.com/photo-1557804506-669a67965ba0'
        '?ixlib=rb-4.0.3&auto=format&fit=crop&w=1200&h=800&q=80'
    )

    # Minimum WCAG contrast ratio when applying theme colors
    DECK_MIN_TEXT_CONTRAST: float = 4.5

    # Slide content generator: 'template' works offline, 'llm' calls the configured provider
    SLIDE_GENERATOR: Literal['template', 'llm'] = 'template'

    ##################################################
    # [ Module ] LLM
    ##################################################
    # Select provider: openai, anthropic, ollama, openai_compat
    LLM_PROVIDER: Literal['openai', 'anthropic', 'ollama', 'openai_compat'] = 'openai'

    # Common LLM settings (applies to all providers)
    LLM_MAX_RETRIES: int = 3
    LLM_TEMPERATURE: float = 0.7
    LLM_TIMEOUT_SECONDS: float = 120.0

    # OpenAI (provider: openai)
    OPENAI_API_KEY: str = ''
    OPENAI_MODEL: str = 'gpt-4o'
    OPENAI_BASE_URL: str = ''  # Optional: custom base URL for proxies

    # Anthropic (provider: anthropic)
    ANTHROPIC_API_KEY: str = ''
    ANTHROPIC_MODEL: str = 'claude-sonnet-4-20250514'

    # Ollama (provider: ollama)
    OLLAMA_MODEL: str = 'llama3'
    OLLAMA_BASE_URL: str = 'http://localhost:11434'

    # OpenAI-compatible API (provider: openai_compat), e.g. vLLM, LocalAI, LMStudio
    OPENAI_COMPAT_API_KEY: str = ''
    OPENAI_COMPAT_MODEL: str = ''
    OPENAI_COMPAT_BASE_URL: str = ''  # REQUIRED for this provider

    @model_validator(mode='before')
    @classmethod
    def check_env(cls, values: Any) -> Any:
        """Check environment variables"""
        if values.get('ENVIRONMENT') == 'prod':
            # FastAPI
            values['FASTAPI_OPENAPI_URL'] = None

        return values


@lru_cache
def get_settings() -> Settings:
    """Get the global settings singleton"""
    return Settings()


settings = get_settings()
