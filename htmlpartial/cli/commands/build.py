"""Build command implementation."""

import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Optional

from htmlpartial.config import ConfigLoader, PartialConfig
from htmlpartial.exceptions import ConfigValidationError, PartialError
from htmlpartial.pipeline import SourceDocument, process_documents
from htmlpartial.reporting import LoggingReporter


logger = logging.getLogger(__name__)

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'error': logging.ERROR,
}


def load_config(args: Namespace) -> PartialConfig:
    """Build settings from the optional config file and CLI overrides.

    Raises:
        ConfigValidationError: If the config file or an override is invalid
    """
    config = PartialConfig()
    if args.config:
        config = ConfigLoader(Path.cwd()).load(Path(args.config))

    return config.merged(
        base_path=args.base_path,
        tag_name=args.tag_name,
        variable_prefix=args.variable_prefix,
        pretty_print=False if args.no_pretty else None,
        detect_cycles=False if args.no_cycle_check else None,
    )


def read_source(source: str) -> Optional[SourceDocument]:
    """Load one document; stdin is read to the end."""
    if source == '-':
        return SourceDocument(path='<stdin>', contents=sys.stdin.read())

    path = Path(source)
    if not path.is_file():
        logger.error(f"Source file not found: {path}")
        return None

    return SourceDocument(path=str(path), contents=path.read_bytes())


def write_result(document: SourceDocument, out_dir: Optional[Path], config: PartialConfig) -> None:
    """Write a resolved document to out_dir, or to stdout."""
    contents = document.contents
    if out_dir is None:
        if isinstance(contents, bytes):
            contents = contents.decode(config.encoding)
        sys.stdout.write(contents)
        return

    name = 'stdin.html' if document.path == '<stdin>' else Path(document.path).name
    target = out_dir / name
    if isinstance(contents, bytes):
        target.write_bytes(contents)
    else:
        target.write_text(contents, encoding=config.encoding)
    logger.info(f"Wrote {target}")


def build_documents(args: Namespace) -> int:
    """
    Resolve partials in every source document.

    Returns 0 on success, 1 if any document had errors, 2 on invalid config.
    """
    log_level = LOG_LEVELS[args.log_level]
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = load_config(args)
    except ConfigValidationError as e:
        for error in e.errors:
            logger.error(f"Validation error: {error.message}")
        return e.exit_code

    out_dir = None
    if args.out_dir:
        out_dir = Path(args.out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

    documents = [read_source(source) for source in args.sources]
    exit_code = 0 if None not in documents else 1

    results = process_documents([d for d in documents if d is not None], config, LoggingReporter())
    for result in results:
        if not result.ok:
            exit_code = 1
        # Documents that could not be processed at all are not written
        if any(not isinstance(e, PartialError) for e in result.errors):
            continue
        write_result(result.document, out_dir, config)

    return exit_code
