"""Application services orchestrating prompts, parsers and model calls."""
