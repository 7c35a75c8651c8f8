"""Resolve <partial src="..."/> includes in HTML documents."""

from .config import ConfigLoader, PartialConfig
from .exceptions import (
    ConfigValidationError,
    CycleDetectedError,
    MissingSourceAttributeError,
    PartialError,
    SourceNotFoundError,
    UnsupportedInputKindError,
)
from .pipeline import (
    BufferedInput,
    DocumentResult,
    SourceDocument,
    StreamedInput,
    process_document,
    process_documents,
    render,
)
from .reporting import PLUGIN_NAME, ListReporter, LoggingReporter
from .resolver import PartialResolver, ResolutionResult

__version__ = '1.0.0'

__all__ = [
    'ConfigLoader',
    'PartialConfig',
    'ConfigValidationError',
    'CycleDetectedError',
    'MissingSourceAttributeError',
    'PartialError',
    'SourceNotFoundError',
    'UnsupportedInputKindError',
    'BufferedInput',
    'DocumentResult',
    'SourceDocument',
    'StreamedInput',
    'process_document',
    'process_documents',
    'render',
    'PLUGIN_NAME',
    'ListReporter',
    'LoggingReporter',
    'PartialResolver',
    'ResolutionResult',
]
