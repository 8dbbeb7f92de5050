"""Text extraction for uploaded office documents, with truncation for AI
summarization and a lightweight Markdown renderer for model replies."""

from docdigest.config import FILE_LIMITS, ExtractorConfig, FileLimits
from docdigest.detector import FormatSniffer, SupportedExtension
from docdigest.exceptions import (
    CorruptArchiveError,
    DocumentParserError,
    ExtractionError,
    FileTooLargeError,
    LegacyFormatUnsupportedError,
    NoExtractableTextError,
    NoReadableTextError,
    NoSlidesFoundError,
    UnsupportedFormatError,
)
from docdigest.extractor import DocumentExtractor
from docdigest.handler import DocumentHandler
from docdigest.markdown import render
from docdigest.models import DocumentExtractionResult, TruncatedText, UploadedFile
from docdigest.parser import extract_document, extract_document_async
from docdigest.truncation import truncate, truncate_text

__version__ = "0.1.0"

__all__ = [
    # High-level API
    "extract_document",
    "extract_document_async",
    "truncate_text",
    "truncate",
    "render",
    # Core classes
    "DocumentHandler",
    "DocumentExtractor",
    "FormatSniffer",
    # Data models
    "UploadedFile",
    "DocumentExtractionResult",
    "TruncatedText",
    "SupportedExtension",
    # Configuration
    "FILE_LIMITS",
    "FileLimits",
    "ExtractorConfig",
    # Exceptions
    "DocumentParserError",
    "FileTooLargeError",
    "UnsupportedFormatError",
    "ExtractionError",
    "NoExtractableTextError",
    "NoSlidesFoundError",
    "NoReadableTextError",
    "CorruptArchiveError",
    "LegacyFormatUnsupportedError",
]
