"""Configuration package initialization."""
