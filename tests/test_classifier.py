"""Tests for the ResponseClassifier module."""

import pytest
from term_gopher.core.address import Address, ItemType
from term_gopher.core.classifier import (
    BinaryBlob,
    Menu,
    ResponseClassifier,
    TextBody,
    split_lines,
)


class TestSplitLines:
    """Tests for split_lines."""

    def test_crlf_and_terminator(self):
        assert split_lines("a\r\nb\r\n.\r\n") == ["a", "b"]

    def test_bare_lf(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_drops_after_terminator(self):
        assert split_lines("a\r\n.\r\ntrailing junk\r\n") == ["a"]

    def test_keeps_inner_empty_lines(self):
        assert split_lines("a\r\n\r\nb\r\n") == ["a", "", "b"]

    def test_empty(self):
        assert split_lines("") == []


class TestResponseClassifier:
    """Tests for ResponseClassifier.classify."""

    @pytest.fixture
    def classifier(self):
        """Create a ResponseClassifier instance."""
        return ResponseClassifier()

    def test_single_menu_line(self, classifier):
        """A one-line menu reply parses to one submenu entry."""
        raw = b"1Home\t/home\texample.org\t70\r\n.\r\n"
        document = classifier.classify(ItemType.SUBMENU, raw)

        assert isinstance(document, Menu)
        assert len(document.entries) == 1
        entry = document.entries[0]
        assert entry.item_type is ItemType.SUBMENU
        assert entry.display == "Home"
        assert entry.address.host == "example.org"
        assert entry.address.port == 70
        assert entry.address.selector == "/home"

    def test_no_tabs_is_text(self, classifier):
        """A reply without any TAB is a text body, one element per line."""
        raw = b"First line\r\nSecond line\r\nThird\r\n.\r\n"
        document = classifier.classify(ItemType.TEXT_FILE, raw)

        assert isinstance(document, TextBody)
        assert document.lines == ("First line", "Second line", "Third")

    def test_no_tabs_without_terminator(self, classifier):
        document = classifier.classify(ItemType.SUBMENU, b"just text\nmore\n")
        assert isinstance(document, TextBody)
        assert document.lines == ("just text", "more")

    def test_binary_type_is_blob(self, classifier):
        """Binary item types are never parsed."""
        raw = b"1Looks\t/like\ta\t70\r\n"
        document = classifier.classify(ItemType.BINARY, raw)
        assert isinstance(document, BinaryBlob)
        assert document.data == raw

    def test_image_type_is_blob(self, classifier):
        document = classifier.classify(ItemType.GIF, b"GIF89a")
        assert isinstance(document, BinaryBlob)

    def test_single_error_line(self, classifier):
        """A lone error line becomes a menu with one error entry."""
        document = classifier.classify(ItemType.SUBMENU, b"3Selector not found\r\n")
        assert isinstance(document, Menu)
        assert len(document.entries) == 1
        assert document.entries[0].item_type is ItemType.ERROR
        assert document.entries[0].display == "Selector not found"

    def test_error_line_with_fields(self, classifier):
        raw = b"3'/nope' does not exist\t\terror.host\t1\r\n.\r\n"
        document = classifier.classify(ItemType.SUBMENU, raw)
        assert isinstance(document, Menu)
        assert document.entries[0].item_type is ItemType.ERROR

    def test_info_lines_without_tabs_allowed_in_menu(self, classifier):
        raw = b"iBanner text\r\n1Home\t/home\texample.org\t70\r\n.\r\n"
        document = classifier.classify(ItemType.SUBMENU, raw)
        assert isinstance(document, Menu)
        assert [e.item_type for e in document.entries] == [ItemType.INFO, ItemType.SUBMENU]

    def test_gross_violation_falls_back_to_text(self, classifier):
        """A tab-less non-info line means the reply is not a menu."""
        raw = b"Name\tValue\r\nplain prose line\r\n"
        document = classifier.classify(ItemType.TEXT_FILE, raw)
        assert isinstance(document, TextBody)
        assert document.lines == ("Name\tValue", "plain prose line")

    def test_origin_fills_missing_host(self, classifier):
        origin = Address(host="srv.org", port=7070)
        document = classifier.classify(ItemType.SUBMENU, b"0Notes\t/notes\r\n.\r\n", origin=origin)
        assert document.entries[0].address.host == "srv.org"
        assert document.entries[0].address.port == 7070

    def test_terminator_never_an_entry(self, classifier):
        raw = b"1A\t/a\th\t70\r\n0B\t/b\th\t70\r\n.\r\n"
        document = classifier.classify(ItemType.SUBMENU, raw)
        assert len(document.entries) == 2
        assert all(e.display != "." for e in document.entries)

    def test_empty_reply_is_empty_text(self, classifier):
        document = classifier.classify(ItemType.SUBMENU, b"")
        assert isinstance(document, TextBody)
        assert document.lines == ()

    def test_invalid_utf8_replaced(self, classifier):
        document = classifier.classify(ItemType.TEXT_FILE, b"caf\xe9\r\n")
        assert isinstance(document, TextBody)
        assert document.lines[0].startswith("caf")

    def test_latin1_encoding(self):
        classifier = ResponseClassifier(encoding="latin-1")
        document = classifier.classify(ItemType.TEXT_FILE, b"caf\xe9\r\n")
        assert document.lines == ("café",)


class TestMenu:
    """Tests for the Menu document."""

    def test_entry_at(self):
        menu = ResponseClassifier().classify(ItemType.SUBMENU, b"1A\t/a\th\t70\r\n")
        assert menu.entry_at(0).display == "A"
        assert menu.entry_at(1) is None
        assert menu.entry_at(-1) is None

    def test_equality(self):
        assert Menu([]) == Menu(())
        assert TextBody(["a"]) == TextBody(("a",))
