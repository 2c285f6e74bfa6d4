"""Application layer (use cases) for commuter."""
