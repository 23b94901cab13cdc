"""Infrastructure adapters and settings."""
