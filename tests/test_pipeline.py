"""Tests for the document boundary: input kinds and batch processing."""

import io
from unittest.mock import patch

import pytest

from htmlpartial.config import PartialConfig
from htmlpartial.exceptions import CycleDetectedError, SourceNotFoundError, UnsupportedInputKindError
from htmlpartial.pipeline import (
    BufferedInput,
    SourceDocument,
    StreamedInput,
    classify_input,
    process_document,
    process_documents,
    render,
)
from htmlpartial.reporting import ListReporter


@pytest.fixture
def site(tmp_path):
    (tmp_path / 'nav.html').write_text('<nav>@@label</nav>', encoding='utf-8')
    return PartialConfig(base_path=str(tmp_path) + '/')


class TestClassifyInput:
    """Test buffered/streamed detection."""

    def test_text_is_buffered(self):
        assert classify_input('<p>x</p>') == BufferedInput('<p>x</p>')

    def test_bytes_are_decoded(self):
        assert classify_input('<p>é</p>'.encode('utf-8')) == BufferedInput('<p>é</p>')

    def test_bytes_use_given_encoding(self):
        assert classify_input('é'.encode('latin-1'), 'latin-1') == BufferedInput('é')

    def test_file_like_is_streamed(self):
        stream = io.StringIO('<p>x</p>')

        kind = classify_input(stream)

        assert isinstance(kind, StreamedInput)
        assert kind.stream is stream

    def test_other_types_are_rejected(self):
        with pytest.raises(TypeError):
            classify_input(42)


class TestProcessDocument:
    """Test single-document processing."""

    def test_buffered_document_is_resolved(self, site):
        reporter = ListReporter()
        document = SourceDocument('index.html', '<header><partial src="nav.html" label="Home"/></header>')

        result = process_document(document, site, reporter)

        assert result.ok
        assert result.document.path == 'index.html'
        assert result.document.contents == '<header>\n  <nav>\n    Home\n  </nav>\n</header>\n'

    def test_bytes_in_bytes_out(self, site):
        document = SourceDocument('index.html', b'<partial src="nav.html" label="Home"/>')

        result = process_document(document, site, ListReporter())

        assert isinstance(result.document.contents, bytes)
        assert b'Home' in result.document.contents

    def test_original_document_is_not_mutated(self, site):
        document = SourceDocument('index.html', '<partial src="nav.html"/>')

        process_document(document, site, ListReporter())

        assert document.contents == '<partial src="nav.html"/>'

    def test_stream_is_rejected_without_resolving(self, site):
        """Streams pass through untouched and the resolver never runs."""
        reporter = ListReporter()
        stream = io.StringIO('<partial src="nav.html"/>')
        document = SourceDocument('index.html', stream)

        with patch('htmlpartial.pipeline.PartialResolver') as resolver_class:
            result = process_document(document, site, reporter)

        resolver_class.assert_not_called()
        assert result.document is document
        assert result.document.contents is stream
        assert stream.read() == '<partial src="nav.html"/>'
        assert reporter.messages == ['Streams are not supported']
        assert isinstance(result.errors[0], UnsupportedInputKindError)

    def test_resolution_errors_are_collected(self, site):
        reporter = ListReporter()
        document = SourceDocument('index.html', '<partial src="missing.html"/>')

        result = process_document(document, site, reporter)

        assert not result.ok
        assert isinstance(result.errors[0], SourceNotFoundError)
        assert len(reporter.messages) == 1


class TestProcessDocuments:
    """Test batches of documents."""

    def test_stream_does_not_stop_the_batch(self, site):
        reporter = ListReporter()
        documents = [
            SourceDocument('streamed.html', io.StringIO('<p>x</p>')),
            SourceDocument('buffered.html', '<partial src="nav.html" label="Docs"/>'),
        ]

        results = list(process_documents(documents, site, reporter))

        assert len(results) == 2
        assert isinstance(results[0].errors[0], UnsupportedInputKindError)
        assert results[1].ok
        assert 'Docs' in results[1].document.contents

    def test_documents_are_independent(self, site):
        reporter = ListReporter()
        documents = [
            SourceDocument('a.html', '<partial src="missing.html"/>'),
            SourceDocument('b.html', '<partial src="nav.html" label="B"/>'),
        ]

        results = list(process_documents(documents, site, reporter))

        assert len(results[0].errors) == 1
        assert results[1].errors == []

    def test_undecodable_document_does_not_stop_the_batch(self, site):
        reporter = ListReporter()
        bad = SourceDocument('a.html', b'\xff<p>bad</p>')
        documents = [bad, SourceDocument('b.html', '<p>good</p>')]

        results = list(process_documents(documents, site, reporter))

        assert len(results) == 2
        assert results[0].document is bad
        assert isinstance(results[0].errors[0], UnicodeDecodeError)
        assert reporter.messages[0].startswith('Failed to resolve a.html: ')
        assert results[1].ok
        assert results[1].document.contents == '<p>\n  good\n</p>\n'

    def test_unsupported_contents_do_not_stop_the_batch(self, site):
        documents = [SourceDocument('a.html', 42), SourceDocument('b.html', '<p>good</p>')]

        results = list(process_documents(documents, site, ListReporter()))

        assert isinstance(results[0].errors[0], TypeError)
        assert results[1].ok

    def test_page_including_itself_is_a_cycle(self, tmp_path):
        page = tmp_path / 'index.html'
        page.write_text('<p>page</p><partial src="index.html"/>', encoding='utf-8')
        config = PartialConfig(base_path=str(tmp_path) + '/')

        result = process_document(SourceDocument(str(page), page.read_bytes()), config, ListReporter())

        assert result.document.contents == b'<p>\n  page\n</p>\n'
        assert isinstance(result.errors[0], CycleDetectedError)


class TestRender:
    """Test the one-call helper."""

    def test_render(self, site):
        reporter = ListReporter()

        html = render('<partial src="nav.html" label="Top"/>', site, reporter)

        assert html == '<nav>\n  Top\n</nav>\n'
        assert reporter.messages == []
