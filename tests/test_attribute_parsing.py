"""Tests for attribute extraction from partial tags."""

import pytest

from htmlpartial.scanner.attributes import Attribute, parse_attributes, partition_attributes


class TestParseAttributes:
    """Test key=value extraction."""

    def test_double_quoted_values(self):
        """Double quoted values may contain spaces."""
        attributes = parse_attributes(' src="header.html" title="Hello world"')

        assert attributes == [
            Attribute('src', 'header.html'),
            Attribute('title', 'Hello world'),
        ]

    def test_single_quoted_values(self):
        attributes = parse_attributes(" src='header.html' title='It works'")

        assert attributes == [
            Attribute('src', 'header.html'),
            Attribute('title', 'It works'),
        ]

    def test_bare_value_stops_at_next_attribute(self):
        """An unquoted value runs until the next key= begins."""
        attributes = parse_attributes(' title=Hello world src=page.html')

        assert attributes == [
            Attribute('title', 'Hello world'),
            Attribute('src', 'page.html'),
        ]

    def test_quoted_value_may_contain_equals(self):
        attributes = parse_attributes(' href="/search?q=partial" src="link.html"')

        assert attributes[0] == Attribute('href', '/search?q=partial')
        assert attributes[1] == Attribute('src', 'link.html')

    def test_hyphenated_keys(self):
        attributes = parse_attributes(' data-id="7" aria-label="Close"')

        assert [a.key for a in attributes] == ['data-id', 'aria-label']

    def test_source_order_is_kept(self):
        attributes = parse_attributes(' c="3" a="1" b="2"')

        assert [a.key for a in attributes] == ['c', 'a', 'b']

    def test_malformed_segments_are_skipped(self):
        """Segments that are not key=value produce nothing."""
        attributes = parse_attributes(' ="orphan" broken src="a.html"')

        assert attributes == [Attribute('src', 'a.html')]

    @pytest.mark.parametrize('text', ['', '   ', ' disabled'])
    def test_no_attributes(self, text):
        assert parse_attributes(text) == []

    def test_empty_quoted_value(self):
        assert parse_attributes(' title=""') == [Attribute('title', '')]


class TestPartitionAttributes:
    """Test splitting the source attribute from variables."""

    def test_src_is_separated(self):
        source, variables = partition_attributes([
            Attribute('title', 'X'),
            Attribute('src', 'a.html'),
            Attribute('lang', 'en'),
        ])

        assert source == Attribute('src', 'a.html')
        assert variables == [Attribute('title', 'X'), Attribute('lang', 'en')]

    def test_first_src_wins(self):
        """Later src attributes are dropped entirely."""
        source, variables = partition_attributes([
            Attribute('src', 'first.html'),
            Attribute('src', 'second.html'),
        ])

        assert source.value == 'first.html'
        assert variables == []

    def test_missing_src(self):
        source, variables = partition_attributes([Attribute('title', 'X')])

        assert source is None
        assert variables == [Attribute('title', 'X')]
