"""
Tests for document loading and normalization.
"""

import logging

import pytest
from policy_gap.ingestion import (
    DOCXLoader,
    HTMLLoader,
    PDFLoader,
    PolicyDocument,
    TextLoader,
    TextNormalizer,
    UniversalLoader,
)


class TestLoaders:
    """Test suite for document loaders."""

    @pytest.fixture
    def loader(self):
        return UniversalLoader()

    def test_load_text(self, loader, tmp_path):
        """Test loading a plain text document."""
        path = tmp_path / "policy.txt"
        path.write_text("Privacy Policy\nWe collect data.", encoding="utf-8")

        doc = loader.load(str(path), owner="legal")

        assert isinstance(doc, PolicyDocument)
        assert doc.document_type == "txt"
        assert doc.content.startswith("Privacy Policy")
        assert doc.metadata == {"owner": "legal"}
        assert not doc.is_pdf_source

    def test_load_markdown_with_text_loader(self, tmp_path):
        """Test that markdown files use the text loader."""
        path = tmp_path / "policy.md"
        path.write_text("# Privacy Policy\n", encoding="utf-8")

        assert TextLoader().supports(str(path))
        assert UniversalLoader().load(str(path)).content == "# Privacy Policy\n"

    def test_load_html_strips_markup(self, tmp_path):
        """Test HTML text extraction."""
        path = tmp_path / "policy.html"
        path.write_text(
            "<html><head><style>p {color: red}</style></head>"
            "<body><h1>Privacy Policy</h1><p>We collect data.</p>"
            "<script>track()</script></body></html>",
            encoding="utf-8",
        )

        doc = HTMLLoader().load(str(path))

        assert "Privacy Policy" in doc.content
        assert "We collect data." in doc.content
        assert "track()" not in doc.content
        assert "color" not in doc.content

    def test_missing_file(self, loader, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            loader.load(str(tmp_path / "absent.txt"))

    def test_unsupported_type(self, loader, tmp_path):
        """Test that unknown extensions are rejected."""
        path = tmp_path / "policy.xyz"
        path.write_text("content", encoding="utf-8")

        with pytest.raises(ValueError):
            loader.load(str(path))

    def test_empty_document(self, loader, tmp_path):
        """Test that an empty document is rejected."""
        path = tmp_path / "empty.txt"
        path.write_text("   \n", encoding="utf-8")

        with pytest.raises(ValueError):
            loader.load(str(path))

    def test_load_directory_skips_failures(self, loader, tmp_path, caplog):
        """Test directory loading with one unreadable document."""
        (tmp_path / "a.txt").write_text("first policy", encoding="utf-8")
        (tmp_path / "b.txt").write_text("", encoding="utf-8")
        (tmp_path / "c.xyz").write_text("ignored", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="policy_gap.ingestion.loaders"):
            docs = loader.load_directory(str(tmp_path))

        assert [d.content for d in docs] == ["first policy"]
        assert "b.txt" in caplog.text

    def test_corrupt_pdf_raises_value_error(self, tmp_path):
        """Test that an unreadable PDF is reported as ValueError."""
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"this is not a pdf")

        with pytest.raises(ValueError, match="Could not read"):
            PDFLoader().load(str(path))

    def test_corrupt_docx_raises_value_error(self, tmp_path):
        """Test that an unreadable DOCX is reported as ValueError."""
        path = tmp_path / "broken.docx"
        path.write_bytes(b"this is not a zip archive")

        with pytest.raises(ValueError, match="Could not read"):
            DOCXLoader().load(str(path))

    def test_load_directory_skips_corrupt_pdf(self, loader, tmp_path, caplog):
        """Test that a corrupt PDF does not abort a directory load."""
        (tmp_path / "broken.pdf").write_bytes(b"this is not a pdf")
        (tmp_path / "good.txt").write_text("second policy", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="policy_gap.ingestion.loaders"):
            docs = loader.load_directory(str(tmp_path))

        assert [d.content for d in docs] == ["second policy"]
        assert "broken.pdf" in caplog.text


class TestTextNormalizer:
    """Test suite for TextNormalizer."""

    @pytest.fixture
    def normalizer(self):
        return TextNormalizer()

    def test_whitespace(self, normalizer):
        """Test whitespace standardization."""
        result = normalizer.normalize("  Privacy   Policy \r\n\r\n\r\n\r\nWe  collect\tdata.  ")

        assert result.normalized == "Privacy Policy\n\nWe collect data."
        assert result.word_count == 5
        assert result.paragraph_count == 2

    def test_typographic_punctuation(self, normalizer):
        """Test that curly quotes and dashes become ASCII."""
        result = normalizer.normalize(
            "You may opt\u2011out of \u201cmarketing\u201d \u2013 anytime."
        )

        assert result.normalized == 'You may opt-out of "marketing" - anytime.'

    def test_rejoins_hyphenated_words(self, normalizer):
        """Test joining of words split across lines."""
        result = normalizer.normalize("personal data pro-\ncessing")

        assert result.normalized == "personal data processing"

    def test_keeps_hyphenation_when_disabled(self):
        """Test that rejoining can be turned off."""
        result = TextNormalizer(join_hyphenated=False).normalize("pro-\ncessing")

        assert result.normalized == "pro-\ncessing"

    def test_unicode_compatibility(self, normalizer):
        """Test NFKC normalization of ligatures."""
        assert normalizer.normalize("\ufb01nancial").normalized == "financial"

    def test_original_preserved(self, normalizer):
        """Test that the original text is kept."""
        text = "  Policy  "
        assert normalizer.normalize(text).original == text
