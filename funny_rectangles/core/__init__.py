"""Core rectangle models and factory."""
