"""Recursive partial resolution."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from htmlpartial.config import PartialConfig
from htmlpartial.exceptions import (
    CycleDetectedError,
    MissingSourceAttributeError,
    PartialError,
    SourceNotFoundError,
)
from htmlpartial.formatting import normalize_tags, pretty_print
from htmlpartial.reporting import LoggingReporter, Reporter
from htmlpartial.scanner import TagOccurrence, TagScanner, partition_attributes
from htmlpartial.variables import VariableSubstitutor
from .loader import SourceLoader


logger = logging.getLogger(__name__)


@dataclass
class ResolutionResult:
    """Outcome of resolving one document."""
    text: str
    errors: List[PartialError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class PartialResolver:
    """Replaces partial tags with the resolved content of their source files.

    Each included file is treated as a document of its own: normalized,
    resolved, pretty-printed, and only then has its variables substituted
    and gets spliced into the including document. Missing attributes,
    missing files and (optionally) include cycles are reported and the
    offending tag resolves to an empty string; resolution carries on.
    """

    def __init__(
        self,
        config: Optional[PartialConfig] = None,
        reporter: Optional[Reporter] = None,
        scanner: Optional[TagScanner] = None,
        loader: Optional[SourceLoader] = None,
        substitutor: Optional[VariableSubstitutor] = None
    ):
        """Initialize resolver.

        Args:
            config: Resolution settings
            reporter: Receives one line per recoverable error
            scanner: Tag discovery strategy
            loader: Filesystem access for partial sources
            substitutor: Placeholder replacement
        """
        self.config = config or PartialConfig()
        self.reporter = reporter or LoggingReporter()
        self.scanner = scanner or TagScanner(self.config.tag_name)
        self.loader = loader or SourceLoader(self.config)
        self.substitutor = substitutor or VariableSubstitutor(self.config.variable_prefix)

    def resolve(self, text: str, source_path: Optional[str] = None) -> ResolutionResult:
        """Resolve every partial in a document, recursively.

        Args:
            text: Full document text
            source_path: Where the document itself lives, so that a page
                including itself is reported as a cycle straight away

        Returns:
            ResolutionResult with the resolved text and reported errors
        """
        errors: List[PartialError] = []
        stack: Tuple[str, ...] = ()
        if source_path:
            stack = (self.loader.identity(source_path),)
        resolved = self._resolve_document(text, stack, errors)
        return ResolutionResult(text=resolved, errors=errors)

    def _resolve_document(self, text: str, stack: Tuple[str, ...], errors: List[PartialError]) -> str:
        content = normalize_tags(text, self.config.tag_name)
        content = self._replace_tags(content, stack, errors)
        if self.config.pretty_print:
            content = pretty_print(content, self.config.indent)
        return content

    def _replace_tags(self, text: str, stack: Tuple[str, ...], errors: List[PartialError]) -> str:
        tags = self.scanner.scan(text)
        partials = [self._resolve_partial(tag, stack, errors) for tag in tags]

        # Keyed on the literal tag text: byte-identical tags are filled in
        # document order, first match first.
        output = text
        for tag, partial in zip(tags, partials):
            output = output.replace(tag.text, partial, 1)
        return output

    def _resolve_partial(self, tag: TagOccurrence, stack: Tuple[str, ...], errors: List[PartialError]) -> str:
        source, variables = partition_attributes(tag.attributes)

        if source is None:
            self._report(MissingSourceAttributeError(tag.text), errors)
            return self.substitutor.substitute(None, variables)

        path = self.loader.candidate_path(source.value)
        if not self.loader.exists(path):
            self._report(SourceNotFoundError(path), errors)
            return self.substitutor.substitute(None, variables)

        identity = self.loader.identity(path)
        if self.config.detect_cycles and identity in stack:
            chain = list(stack[stack.index(identity):]) + [identity]
            self._report(CycleDetectedError(chain), errors)
            return ''

        logger.debug(f"Resolving partial {path}")
        content = self._resolve_document(self.loader.read(path), stack + (identity,), errors)

        return self.substitutor.substitute(content, variables)

    def _report(self, error: PartialError, errors: List[PartialError]):
        errors.append(error)
        self.reporter.report(str(error))
