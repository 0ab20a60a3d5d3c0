"""Infrastructure layer implementations."""

from madafacture.infrastructure import pdf, storage

__all__ = ["storage", "pdf"]
