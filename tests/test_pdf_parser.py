import pytest

from cvchat.tools.pdf_parser import (
    DocumentReadError,
    extract_document_text,
    parse_pdf,
    read_document_from_path,
)


def test_markdown_and_text_decoded():
    assert extract_document_text("cv.md", "# Zoë".encode()) == "# Zoë"
    assert extract_document_text("CV.TXT", b"plain") == "plain"


def test_bom_stripped():
    assert extract_document_text("cv.markdown", b"\xef\xbb\xbf# Jane") == "# Jane"


def test_invalid_utf8():
    with pytest.raises(DocumentReadError):
        extract_document_text("cv.md", b"\xff\xfe\xfa")


def test_unsupported_suffix():
    with pytest.raises(DocumentReadError, match="Unsupported file type"):
        extract_document_text("cv.docx", b"data")


def test_broken_pdf():
    with pytest.raises(DocumentReadError, match="Failed to read PDF"):
        parse_pdf(b"not a pdf at all")


def test_read_from_path(tmp_path):
    path = tmp_path / "cv.md"
    path.write_text("# Jane Doe\n## Skills\nGo", encoding="utf-8")
    assert read_document_from_path(str(path)).startswith("# Jane Doe")
