"""Adapters for external services (hosted language and embedding models)."""
