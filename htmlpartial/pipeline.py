"""Document boundary: input kinds and per-document processing."""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Iterator, List, Optional, Union

from htmlpartial.config import PartialConfig
from htmlpartial.exceptions import UnsupportedInputKindError
from htmlpartial.reporting import LoggingReporter, Reporter
from htmlpartial.resolver import PartialResolver


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BufferedInput:
    """Fully loaded document text."""
    text: str


@dataclass(frozen=True)
class StreamedInput:
    """A file-like object; never handed to the resolver."""
    stream: Any


InputKind = Union[BufferedInput, StreamedInput]


def classify_input(contents: Any, encoding: str = 'utf-8') -> InputKind:
    """Decide once whether document contents are buffered or streamed.

    Args:
        contents: str, bytes, or a file-like object
        encoding: Used to decode bytes

    Returns:
        BufferedInput or StreamedInput

    Raises:
        TypeError: If contents are neither text, bytes nor readable
    """
    if isinstance(contents, str):
        return BufferedInput(contents)
    if isinstance(contents, (bytes, bytearray)):
        return BufferedInput(bytes(contents).decode(encoding))
    if hasattr(contents, 'read'):
        return StreamedInput(contents)
    raise TypeError(f"Unsupported document contents: {type(contents).__name__}")


@dataclass
class SourceDocument:
    """One document moving through the pipeline."""
    path: str
    contents: Any


@dataclass
class DocumentResult:
    """A processed document and the errors reported while processing it."""
    document: SourceDocument
    errors: List[Exception] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def render(text: str, config: Optional[PartialConfig] = None, reporter: Optional[Reporter] = None) -> str:
    """Resolve the partials in one document text."""
    return PartialResolver(config, reporter).resolve(text).text


def process_document(
    document: SourceDocument,
    config: Optional[PartialConfig] = None,
    reporter: Optional[Reporter] = None
) -> DocumentResult:
    """Resolve one document.

    Streamed contents are rejected before the resolver runs: the error is
    reported and the document is returned unmodified. Bytes in, bytes out.

    Args:
        document: Document to process
        config: Resolution settings
        reporter: Receives one line per error

    Returns:
        DocumentResult with the resolved document
    """
    config = config or PartialConfig()
    reporter = reporter or LoggingReporter()

    kind = classify_input(document.contents, config.encoding)
    if isinstance(kind, StreamedInput):
        error = UnsupportedInputKindError()
        reporter.report(str(error))
        return DocumentResult(document=document, errors=[error])

    logger.debug(f"Resolving partials in {document.path}")
    result = PartialResolver(config, reporter).resolve(kind.text, source_path=document.path)

    contents: Any = result.text
    if isinstance(document.contents, (bytes, bytearray)):
        contents = result.text.encode(config.encoding)

    return DocumentResult(document=replace(document, contents=contents), errors=result.errors)


def process_documents(
    documents: Iterable[SourceDocument],
    config: Optional[PartialConfig] = None,
    reporter: Optional[Reporter] = None
) -> Iterator[DocumentResult]:
    """Resolve documents one after another; each is processed in isolation.

    A document that cannot be decoded or whose partials cannot be read is
    reported and yielded unmodified, and the batch carries on.
    """
    config = config or PartialConfig()
    reporter = reporter or LoggingReporter()

    for document in documents:
        try:
            result = process_document(document, config, reporter)
        except (OSError, UnicodeDecodeError, TypeError) as e:
            reporter.report(f"Failed to resolve {document.path}: {e}")
            result = DocumentResult(document=document, errors=[e])
        yield result
