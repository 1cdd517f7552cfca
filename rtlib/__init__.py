"""Text search and manipulation helpers, a string builder and scene record types."""

__version__ = "0.1.0"
__all__ = ["scene", "strbuilder", "textops", "textsearch"]