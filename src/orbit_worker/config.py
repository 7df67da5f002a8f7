"""Application configuration loaded from environment variables."""

import os
from typing import Literal

from pydantic import BaseModel, ValidationError, model_validator

from orbit_worker.exceptions import ConfigurationError


class ServerConfig(BaseModel, frozen=True):
    """HTTP listener configuration."""

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


class StoreConfig(BaseModel, frozen=True):
    """Backend store configuration."""

    backend: Literal["supabase", "sql"] = "supabase"
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    database_url: str = ""
    table_name: str = "entries"

    @model_validator(mode="after")
    def _check_credentials(self) -> "StoreConfig":
        if self.backend == "supabase":
            if not self.supabase_url:
                raise ValueError("SUPABASE_URL must be set")
            if not self.supabase_service_role_key:
                raise ValueError("SUPABASE_SERVICE_ROLE_KEY must be set")
        elif not self.database_url:
            raise ValueError("DATABASE_URL must be set when STORE_BACKEND=sql")
        return self


class GeminiConfig(BaseModel, frozen=True):
    """Gemini summarization configuration."""

    api_key: str = ""
    model_name: str = "gemini-2.5-flash"

    @model_validator(mode="after")
    def _check_api_key(self) -> "GeminiConfig":
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY must be set")
        return self


class TranscriberConfig(BaseModel, frozen=True):
    """Speech-recognition engine configuration."""

    engine: Literal["faster-whisper", "assemblyai"] = "faster-whisper"
    model_size: str = "small"
    language: str = "en"
    device: str = "cpu"
    compute_type: str = "int8"
    assemblyai_api_key: str = ""

    @model_validator(mode="after")
    def _check_engine(self) -> "TranscriberConfig":
        if self.engine == "assemblyai" and not self.assemblyai_api_key:
            raise ValueError("ASSEMBLYAI_API_KEY must be set when TRANSCRIBER=assemblyai")
        return self


class DownloadConfig(BaseModel, frozen=True):
    """Audio download configuration."""

    timeout_seconds: float = 60.0
    temp_dir: str | None = None


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    server: ServerConfig
    store: StoreConfig
    gemini: GeminiConfig
    transcriber: TranscriberConfig
    download: DownloadConfig


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        ConfigurationError: If a required value is missing or malformed.
    """
    try:
        return AppConfig(
            server=ServerConfig(
                host=os.getenv("HOST", "0.0.0.0"),
                port=int(os.getenv("PORT", "3000")),
                log_level=os.getenv("LOG_LEVEL", "INFO"),
            ),
            store=StoreConfig(
                backend=os.getenv("STORE_BACKEND", "supabase"),
                supabase_url=os.getenv("SUPABASE_URL", ""),
                supabase_service_role_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY", ""),
                database_url=os.getenv("DATABASE_URL", ""),
                table_name=os.getenv("ENTRIES_TABLE", "entries"),
            ),
            gemini=GeminiConfig(
                api_key=os.getenv("GEMINI_API_KEY", ""),
                model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            ),
            transcriber=TranscriberConfig(
                engine=os.getenv("TRANSCRIBER", "faster-whisper"),
                model_size=os.getenv("WHISPER_MODEL", "small"),
                language=os.getenv("WHISPER_LANGUAGE", "en"),
                device=os.getenv("WHISPER_DEVICE", "cpu"),
                compute_type=os.getenv("WHISPER_COMPUTE_TYPE", "int8"),
                assemblyai_api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            ),
            download=DownloadConfig(
                timeout_seconds=float(os.getenv("DOWNLOAD_TIMEOUT_SECONDS", "60")),
                temp_dir=os.getenv("TEMP_DIR") or None,
            ),
        )
    except (ValidationError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}", cause=e) from e
