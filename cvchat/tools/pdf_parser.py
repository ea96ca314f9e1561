"""
Text extraction for uploaded CV documents.

Markdown and plain text are decoded as UTF-8; PDFs go through pypdf.
"""

from io import BytesIO
from pathlib import Path

from pypdf import PdfReader
from pypdf.errors import PdfReadError

TEXT_SUFFIXES = (".md", ".markdown", ".txt")
SUPPORTED_SUFFIXES = TEXT_SUFFIXES + (".pdf",)


class DocumentReadError(ValueError):
    """The uploaded document could not be turned into text."""


def parse_pdf(pdf_content: bytes) -> str:
    """
    Extract text from a PDF file.

    Args:
        pdf_content: Raw bytes of the PDF file

    Returns:
        Extracted text content from all pages
    """
    try:
        reader = PdfReader(BytesIO(pdf_content))
        text_parts = []

        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)

        return "\n\n".join(text_parts)

    except (PdfReadError, ValueError) as e:
        raise DocumentReadError(f"Failed to read PDF: {e}") from e


def extract_document_text(filename: str, content: bytes) -> str:
    """Extract text from an uploaded CV by file extension."""
    suffix = Path(filename).suffix.lower()
    if suffix == ".pdf":
        return parse_pdf(content)
    if suffix in TEXT_SUFFIXES:
        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise DocumentReadError(f"File is not valid UTF-8: {e}") from e
    raise DocumentReadError(f"Unsupported file type: {suffix or filename}")


def read_document_from_path(file_path: str) -> str:
    """
    Extract text from a CV file on disk.

    Args:
        file_path: Path to a markdown, text or PDF file

    Returns:
        Extracted text content
    """
    path = Path(file_path)
    return extract_document_text(path.name, path.read_bytes())
