"""
RAG pipeline configuration settings.

Document location, chunking, persisted index path and retrieval bounds for
the Lesson 5 pipeline. An instance is passed explicitly to the pipeline.

Dependencies: pydantic, pydantic_settings
System role: Retrieval pipeline configuration
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class RAGSettings(BaseSettings):
    """Document ingestion and retrieval configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAG_",
        case_sensitive=False,
        extra="ignore",
    )

    vectorstore: Path = Field(
        default=Path("vectorstore.json"),
        description="Persisted vector index file",
    )
    data_dir: Path = Field(default=DEFAULT_DATA_DIR, description="Directory holding source documents")
    data_glob: str = Field(default="*.txt", description="Glob pattern selecting source documents")

    chunk_size: int = Field(default=300, gt=0, description="Chunk size in tokens")
    encoding_name: str = Field(default="cl100k_base", description="tiktoken encoding used for chunking")

    top_k: int = Field(default=2, gt=0, description="Number of chunks retrieved per query")
    max_context_chars: int = Field(
        default=12000,
        gt=0,
        description="Upper bound on retrieved text substituted into the prompt",
    )
    validate_fingerprint: bool = Field(
        default=False,
        description="Rebuild the persisted index when source documents changed",
    )
