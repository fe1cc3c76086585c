"""Data model for lined screenplays: production vocabulary, commands and annotated documents."""

__version__ = "0.1.0"
__all__ = ["commands", "document", "production"]