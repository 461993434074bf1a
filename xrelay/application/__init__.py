"""Application layer - use cases wiring domain and ports together."""
