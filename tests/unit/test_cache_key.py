"""Unit tests for the cache_key module."""

import hashlib

from docbridge.editor.cache_key import KEY_LENGTH, digest_message, document_key


class TestDigestMessage:
    """Tests for digest_message function."""

    def test_known_vector(self):
        """Matches the standard SHA-256 test vector."""
        assert (
            digest_message("abc")
            == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_empty_message(self):
        assert (
            digest_message("")
            == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_utf8_input(self):
        """Text is hashed as UTF-8 bytes."""
        assert digest_message("é") == hashlib.sha256("é".encode("utf-8")).hexdigest()


class TestDocumentKey:
    """Tests for document_key function."""

    def test_truncated_digest_of_name_and_mtime(self):
        """Key is the 20-char prefix of sha256(name + mtime)."""
        expected = hashlib.sha256(b"report.docx1700000000").hexdigest()[:20]

        assert document_key("report.docx", "1700000000") == expected

    def test_length_and_charset(self):
        key = document_key("report.docx", "1700000000")

        assert len(key) == KEY_LENGTH == 20
        assert all(c in "0123456789abcdef" for c in key)

    def test_deterministic(self):
        assert document_key("a.xlsx", "42") == document_key("a.xlsx", "42")

    def test_mtime_changes_key(self):
        """A new modification time invalidates the cached copy."""
        assert document_key("a.xlsx", "42") != document_key("a.xlsx", "43")

    def test_name_changes_key(self):
        assert document_key("a.xlsx", "42") != document_key("b.xlsx", "42")
