"""Retrieval-augmented generation pipeline."""

from ai_lessons.core.rag.chunker import TokenChunker
from ai_lessons.core.rag.document_loader import DocumentLoader
from ai_lessons.core.rag.index_builder import IndexState, VectorIndexBootstrap
from ai_lessons.core.rag.pipeline import RagPipeline, create_rag_pipeline
from ai_lessons.core.rag.prompt_assembler import PromptAssembler
from ai_lessons.core.rag.retriever import Retriever
from ai_lessons.core.rag.vector_index import VectorIndex

__all__ = [
    "DocumentLoader",
    "IndexState",
    "PromptAssembler",
    "RagPipeline",
    "Retriever",
    "TokenChunker",
    "VectorIndex",
    "VectorIndexBootstrap",
    "create_rag_pipeline",
]
