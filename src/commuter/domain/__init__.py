"""Domain layer for commuter."""
