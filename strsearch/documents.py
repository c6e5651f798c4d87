# documents.py
# Optional document input: read the text of a .txt, .pdf or .docx file and
# search it. Needs the "documents" extra; nothing in the core imports this
# module, and the parsers are only loaded when a document of their type is read.

import logging
import os

from .engine import search, search_auto
from .exceptions import StrSearchError

logger = logging.getLogger(__name__)


class DocumentError(StrSearchError, OSError):
    """Raised when no text could be read from a document."""


def _read_txt(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


def _read_pdf(path):
    import pdfplumber

    with pdfplumber.open(path) as pdf:
        pages = [page.extract_text() for page in pdf.pages]
    return "\n".join(page for page in pages if page)


def _read_docx(path):
    import docx

    return "\n".join(para.text for para in docx.Document(path).paragraphs)


READERS = {
    ".txt": _read_txt,
    ".pdf": _read_pdf,
    ".docx": _read_docx,
}


def extract_text(path):
    """Return the text of the document at path.

    Raises DocumentError for unsupported extensions and for files the parser
    cannot read.
    """
    ext = os.path.splitext(path)[1].lower()
    reader = READERS.get(ext)
    if reader is None:
        raise DocumentError(f"Unsupported document type {ext!r}: {path}")
    try:
        return reader(path)
    except ImportError:
        raise
    except Exception as e:
        logger.error("Could not read %s: %s", path, e)
        raise DocumentError(f"Could not read text from {path}") from e


def read_documents(folder):
    """Map the path of every readable document under folder to its text.

    Paths are relative to folder. Unreadable documents are logged and skipped.
    """
    documents = {}
    for root, _, files in os.walk(folder):
        for name in sorted(files):
            if os.path.splitext(name)[1].lower() not in READERS:
                continue
            path = os.path.join(root, name)
            try:
                documents[os.path.relpath(path, folder)] = extract_text(path)
            except DocumentError as e:
                logger.warning("Skipping %s: %s", path, e)
    return documents


def search_document(path, pattern, algorithm=None, selector=None):
    """Search the text of a document.

    With an algorithm name the match offsets are returned directly, otherwise
    the result of search_auto.
    """
    text = extract_text(path)
    if algorithm is not None:
        return search(algorithm, text, pattern)
    return search_auto(text, pattern, selector=selector)
