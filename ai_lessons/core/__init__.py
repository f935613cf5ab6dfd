"""Core domain logic: exceptions, RAG pipeline, prompts and output parsing."""
