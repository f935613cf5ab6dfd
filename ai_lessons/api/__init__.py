"""HTTP API for the AI lessons."""
