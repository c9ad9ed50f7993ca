"""Ingestion module for loading and normalizing policy documents."""

from .loaders import (
    PolicyDocument,
    DocumentLoader,
    PDFLoader,
    HTMLLoader,
    DOCXLoader,
    TextLoader,
    UniversalLoader,
)
from .normalizer import TextNormalizer, NormalizedText

__all__ = [
    "PolicyDocument",
    "DocumentLoader",
    "PDFLoader",
    "HTMLLoader",
    "DOCXLoader",
    "TextLoader",
    "UniversalLoader",
    "TextNormalizer",
    "NormalizedText",
]
