"""
AI lessons: chat, prompt templates, structured output, prompt stuffing and RAG
served as a small FastAPI application on top of LangChain.
"""

__version__ = "0.1.0"
