"""Dependency wiring for the orbit worker."""

import logging

import httpx
from fastapi import Request
from google import genai
from sqlalchemy import create_engine
from supabase import create_client

from orbit_worker.config import AppConfig, StoreConfig
from orbit_worker.db_models import entries_table
from orbit_worker.handlers import EntryHandler
from orbit_worker.infrastructure import (
    AssemblyAITranscriber,
    FasterWhisperTranscriber,
    GeminiSummarizer,
    HttpAudioSource,
    SQLEntryRepository,
    SupabaseEntryRepository,
)
from orbit_worker.infrastructure.interfaces import (
    AudioSource,
    EntryRepository,
    Summarizer,
    TranscriptionService,
)

logger = logging.getLogger(__name__)


def build_audio_source(config: AppConfig) -> AudioSource:
    """Creates the HTTP audio downloader."""
    client = httpx.Client(
        timeout=config.download.timeout_seconds,
        follow_redirects=True,
    )
    return HttpAudioSource(client)


def build_transcriber(config: AppConfig) -> TranscriptionService:
    """Creates the configured transcription engine. It still has to be loaded."""
    transcriber_config = config.transcriber
    if transcriber_config.engine == "assemblyai":
        return AssemblyAITranscriber(
            api_key=transcriber_config.assemblyai_api_key,
            language_code=transcriber_config.language,
        )
    return FasterWhisperTranscriber(
        model_size=transcriber_config.model_size,
        language=transcriber_config.language,
        device=transcriber_config.device,
        compute_type=transcriber_config.compute_type,
    )


def build_summarizer(config: AppConfig) -> Summarizer:
    """Creates the Gemini summarizer."""
    client = genai.Client(api_key=config.gemini.api_key)
    return GeminiSummarizer(client, config.gemini.model_name)


def build_repository(store: StoreConfig) -> EntryRepository:
    """Creates the entries repository for the configured backend."""
    if store.backend == "sql":
        engine = create_engine(store.database_url)
        table = entries_table(store.table_name)
        table.metadata.create_all(engine)
        logger.info("Database initialized", extra={"table": store.table_name})
        return SQLEntryRepository(engine, table)

    client = create_client(store.supabase_url, store.supabase_service_role_key)
    logger.info("Supabase client initialized", extra={"table": store.table_name})
    return SupabaseEntryRepository(client, store.table_name)


def build_handler(config: AppConfig) -> EntryHandler:
    """Composes the entry handler from the configured collaborators."""
    return EntryHandler(
        audio_source=build_audio_source(config),
        transcriber=build_transcriber(config),
        summarizer=build_summarizer(config),
        repository=build_repository(config.store),
        temp_dir=config.download.temp_dir,
    )


def get_handler(request: Request) -> EntryHandler:
    """Returns the handler created during application startup."""
    return request.app.state.handler
