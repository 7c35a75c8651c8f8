"""CLI command handlers."""

from .build import build_documents

__all__ = ['build_documents']
