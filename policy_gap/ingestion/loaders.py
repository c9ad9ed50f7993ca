"""
Document loaders for PDF, HTML, DOCX and plain-text policy documents.
"""

import logging
import os
import zipfile
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

import pypdf
from bs4 import BeautifulSoup
from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from pypdf.errors import PyPdfError

logger = logging.getLogger(__name__)


@dataclass
class PolicyDocument:
    """A policy document loaded from disk."""

    content: str
    source_path: str
    document_type: str
    metadata: dict = field(default_factory=dict)

    def __post_init__(self):
        if not self.content or not self.content.strip():
            raise ValueError(f"Document content cannot be empty: {self.source_path}")

    @property
    def is_pdf_source(self) -> bool:
        """True when the text was extracted from a PDF."""
        return self.document_type == "pdf"


class DocumentLoader(ABC):
    """Abstract base class for document loaders."""

    extensions: tuple[str, ...] = ()

    def supports(self, path: str) -> bool:
        """Check if this loader supports the given file type."""
        return path.lower().endswith(self.extensions)

    def load(self, path: str, **metadata) -> PolicyDocument:
        """
        Load a document.

        Args:
            path: Path to the file
            **metadata: Extra metadata stored on the document

        Returns:
            PolicyDocument with extracted text

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If no text could be extracted
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"{self.document_type.upper()} file not found: {path}")

        return PolicyDocument(
            content=self.extract_text(path),
            source_path=path,
            document_type=self.document_type,
            metadata=metadata,
        )

    @property
    @abstractmethod
    def document_type(self) -> str:
        """Short type tag stored on loaded documents."""

    @abstractmethod
    def extract_text(self, path: str) -> str:
        """Extract the text content of the file."""


class PDFLoader(DocumentLoader):
    """Loader for PDF documents."""

    extensions = ('.pdf',)
    document_type = "pdf"

    def extract_text(self, path: str) -> str:
        text_parts = []
        with open(path, 'rb') as f:
            try:
                reader = pypdf.PdfReader(f)
                for page in reader.pages:
                    page_text = page.extract_text()
                    if page_text:
                        text_parts.append(page_text)
            except PyPdfError as e:
                raise ValueError(f"Could not read {path}: {e}") from e
        return "\n\n".join(text_parts)


class HTMLLoader(DocumentLoader):
    """Loader for HTML documents."""

    extensions = ('.html', '.htm')
    document_type = "html"

    def extract_text(self, path: str) -> str:
        with open(path, 'r', encoding='utf-8') as f:
            soup = BeautifulSoup(f.read(), 'html.parser')

        for element in soup(['script', 'style', 'nav', 'footer']):
            element.decompose()

        return soup.get_text(separator='\n', strip=True)


class DOCXLoader(DocumentLoader):
    """Loader for DOCX documents."""

    extensions = ('.docx',)
    document_type = "docx"

    def extract_text(self, path: str) -> str:
        try:
            doc = Document(path)
        except (PackageNotFoundError, zipfile.BadZipFile) as e:
            raise ValueError(f"Could not read {path}: {e}") from e
        paragraphs = [p.text for p in doc.paragraphs if p.text.strip()]
        return "\n\n".join(paragraphs)


class TextLoader(DocumentLoader):
    """Loader for plain text and Markdown documents."""

    extensions = ('.txt', '.md', '.markdown')
    document_type = "txt"

    def extract_text(self, path: str) -> str:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()


class UniversalLoader:
    """Selects the appropriate loader based on file extension."""

    def __init__(self):
        self.loaders = [
            PDFLoader(),
            HTMLLoader(),
            DOCXLoader(),
            TextLoader(),
        ]

    def load(self, path: str, **metadata) -> PolicyDocument:
        """Load a document using the appropriate loader."""
        for loader in self.loaders:
            if loader.supports(path):
                return loader.load(path, **metadata)

        raise ValueError(f"Unsupported file type: {path}")

    def load_directory(self, directory: str, **metadata) -> list[PolicyDocument]:
        """Load all supported documents from a directory, skipping failures."""
        documents = []

        for file_path in sorted(Path(directory).rglob("*")):
            if not file_path.is_file():
                continue
            for loader in self.loaders:
                if loader.supports(str(file_path)):
                    try:
                        documents.append(loader.load(str(file_path), **metadata))
                    except (OSError, ValueError) as e:
                        logger.warning("Failed to load %s: %s", file_path, e)
                    break

        return documents
