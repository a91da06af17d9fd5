from collections.abc import Callable, Iterator
from pathlib import Path
from zipfile import BadZipFile

from docx import Document as load_docx
from docx.document import Document as DocxDocument
from docx.opc.exceptions import OpcError
from docx.table import Table
from lxml.etree import XMLSyntaxError
from pypdf import PdfReader
from pypdf.errors import PyPdfError

from constants import UTF8
from enums import DocumentType
from exceptions import DocumentCorruptedError, DocumentNotSupportedError


def _normalize_extracted_text(text: str) -> str:
    """Normalize extracted text without empty lines."""
    return "\n".join(line.strip() for line in text.splitlines() if line.strip())


def _extract_txt_text(filepath: Path) -> str:
    """Extract txt text."""
    try:
        return filepath.read_bytes().decode(UTF8)
    except UnicodeDecodeError as error:
        raise DocumentCorruptedError(message="Text file is not valid UTF-8") from error


def _extract_pdf_text(filepath: Path) -> str:
    """Extract pdf text, all pages in document order."""
    try:
        reader = PdfReader(stream=filepath)
        text = "\n".join(page.extract_text() or "" for page in reader.pages)
    except (PyPdfError, ValueError, KeyError) as error:
        raise DocumentCorruptedError(message="PDF file could not be parsed") from error

    return _normalize_extracted_text(text=text)


def _iter_docx_blocks(document: DocxDocument) -> Iterator[str]:
    """Yield paragraph and table cell text in body order."""
    for block in document.iter_inner_content():
        if isinstance(block, Table):
            for row in block.rows:
                for cell in row.cells:
                    yield cell.text
        else:
            yield block.text


def _extract_docx_text(filepath: Path) -> str:
    """Extract docx body text, discarding markup."""
    try:
        document = load_docx(str(filepath))
        text = "\n".join(_iter_docx_blocks(document=document))
    except (
        BadZipFile,
        OpcError,
        XMLSyntaxError,
        KeyError,
        ValueError,
    ) as error:
        raise DocumentCorruptedError(message="DOCX file could not be parsed") from error

    return _normalize_extracted_text(text=text)


EXTRACTORS: dict[DocumentType, Callable[[Path], str]] = {
    DocumentType.TXT: _extract_txt_text,
    DocumentType.PDF: _extract_pdf_text,
    DocumentType.DOCX: _extract_docx_text,
}


def extract_text(document_type: DocumentType, filepath: Path) -> str:
    """Extract UTF-8 text from a stored document.

    Args:
        document_type: The declared document type.
        filepath: The path of the stored document.

    Returns:
        The extracted plain text.

    Raises:
        DocumentNotSupportedError: If no extractor handles the document type.
        DocumentCorruptedError: If the document cannot be parsed.
        OSError: If the document cannot be read.

    """
    extractor = EXTRACTORS.get(document_type)
    if not extractor:
        raise DocumentNotSupportedError

    return extractor(filepath)
