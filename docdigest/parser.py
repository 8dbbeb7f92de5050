"""High-level API for document extraction."""

import asyncio
from pathlib import Path
from typing import Optional, Union

from docdigest.config import ExtractorConfig
from docdigest.handler import DocumentHandler
from docdigest.models import DocumentExtractionResult, UploadedFile


def _load_upload(
    file_path: Optional[Union[str, Path]],
    file_bytes: Optional[bytes],
    file_name: Optional[str],
) -> UploadedFile:
    if file_path and file_bytes is not None:
        raise ValueError("Provide either file_path or file_bytes, not both")

    if not file_path and file_bytes is None:
        raise ValueError("Must provide either file_path or file_bytes")

    if file_path:
        path = Path(file_path)
        if not path.exists():
            raise ValueError(f"File not found: {file_path}")
        return UploadedFile.from_path(path)

    if not file_name:
        raise ValueError("file_name is required when using file_bytes")
    return UploadedFile.from_bytes(file_name, file_bytes)


def extract_document(
    file_path: Optional[Union[str, Path]] = None,
    file_bytes: Optional[bytes] = None,
    file_name: Optional[str] = None,
    config: Optional[ExtractorConfig] = None,
    max_chars: Optional[int] = None,
) -> DocumentExtractionResult:
    """Extract text from a document and bound it for the summarization model.

    Accepts either a file path or raw bytes plus the original file name.

    Args:
        file_path: Path to document file (alternative to file_bytes)
        file_bytes: Raw document bytes (alternative to file_path)
        file_name: Original filename (required if using file_bytes)
        config: Extractor configuration (optional, uses defaults if not provided)
        max_chars: Character budget for the returned text. Defaults to
            ``max_chars_for_ai`` of the configured limits.

    Returns:
        DocumentExtractionResult with the (possibly truncated) text and metadata

    Raises:
        ValueError: If neither or both of file_path and file_bytes are provided,
            or file_bytes is given without file_name
        FileTooLargeError: If the file exceeds the size limit
        UnsupportedFormatError: If the extension is not supported
        ExtractionError: If text extraction fails

    Examples:
        >>> result = extract_document(file_path="slides.pptx")
        >>> print(result.text)

        >>> with open("report.pdf", "rb") as f:
        ...     result = extract_document(file_bytes=f.read(), file_name="report.pdf")
        >>> result.truncated
        False
    """
    upload = _load_upload(file_path, file_bytes, file_name)
    handler = DocumentHandler(config=config)
    return handler.process(upload, max_chars=max_chars)


async def extract_document_async(
    file_path: Optional[Union[str, Path]] = None,
    file_bytes: Optional[bytes] = None,
    file_name: Optional[str] = None,
    config: Optional[ExtractorConfig] = None,
    max_chars: Optional[int] = None,
) -> DocumentExtractionResult:
    """Awaitable ``extract_document``; the work runs in a worker thread."""
    return await asyncio.to_thread(
        extract_document, file_path, file_bytes, file_name, config, max_chars
    )
