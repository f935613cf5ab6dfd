"""
Model client factories.

Builds the hosted Google Generative AI chat and embedding clients from
settings. GOOGLE_API_KEY is read from the environment or a .env file.

Dependencies: langchain_google_genai, python-dotenv, ai_lessons.configs
System role: Construction of external model collaborators
"""

import logging

from dotenv import load_dotenv
from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from ai_lessons.configs.llm import LLMSettings

logger = logging.getLogger(__name__)
load_dotenv()


def create_chat_model(settings: LLMSettings) -> ChatGoogleGenerativeAI:
    """
    Create the chat model used by all lessons.

    Args:
        settings: LLM settings

    Returns:
        ChatGoogleGenerativeAI: Configured chat model
    """
    logger.info(f"{__name__}:create_chat_model - model={settings.chat_model}")
    return ChatGoogleGenerativeAI(
        model=settings.chat_model,
        temperature=settings.temperature,
        timeout=settings.timeout_seconds,
        max_retries=settings.max_retries,
    )


def create_embeddings(settings: LLMSettings) -> GoogleGenerativeAIEmbeddings:
    """
    Create the embedding model used by the RAG pipeline.

    Args:
        settings: LLM settings

    Returns:
        GoogleGenerativeAIEmbeddings: Configured embedding model
    """
    logger.info(f"{__name__}:create_embeddings - model={settings.embedding_model}")
    return GoogleGenerativeAIEmbeddings(model=settings.embedding_model)
