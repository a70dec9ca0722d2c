"""Configuration helpers for cloud records."""
