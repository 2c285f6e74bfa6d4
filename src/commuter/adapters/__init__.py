"""Adapters (infrastructure) for commuter."""
