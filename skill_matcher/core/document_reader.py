"""
Document Reader - Loads resume / job description text from files.
Supports PDF, DOCX, Markdown and plain text.
"""

from pathlib import Path

import pdfplumber
from docx import Document


TEXT_SUFFIXES = (".txt", ".md")


def read_document(file_path: str) -> str:
    """
    Read the text content of a document.

    Args:
        file_path: Path to a .txt, .md, .pdf or .docx file

    Returns:
        Extracted text

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is not supported
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    extension = path.suffix.lower()

    if extension in TEXT_SUFFIXES:
        return path.read_text(encoding="utf-8")
    elif extension == ".pdf":
        return _read_pdf(path)
    elif extension == ".docx":
        return _read_docx(path)
    else:
        raise ValueError(f"Unsupported file format: {extension}")


def _read_pdf(path: Path) -> str:
    pages = []
    with pdfplumber.open(path) as pdf:
        for page in pdf.pages:
            pages.append(page.extract_text() or "")
    return "\n".join(pages)


def _read_docx(path: Path) -> str:
    doc = Document(str(path))
    return "\n".join(para.text for para in doc.paragraphs)
