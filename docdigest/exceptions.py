"""Custom exceptions for docdigest."""


class DocumentParserError(Exception):
    """Base exception for docdigest errors."""

    pass


class FileTooLargeError(DocumentParserError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, size_bytes: int, limit_bytes: int, limit_mb: int):
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes
        size_mb = size_bytes / (1024 * 1024)
        super().__init__(
            f"File is too large ({size_mb:.1f} MB). Maximum allowed size is "
            f"{limit_mb} MB. Please compress or split the file."
        )


class UnsupportedFormatError(DocumentParserError):
    """Raised when the file extension has no extractor."""

    def __init__(self, extension: str, supported: tuple[str, ...]):
        self.extension = extension
        super().__init__(
            f'Unsupported file type ".{extension}". '
            f"Supported formats: {', '.join(supported)}."
        )


class ExtractionError(DocumentParserError):
    """Raised when text extraction fails."""

    pass


class NoExtractableTextError(ExtractionError):
    """Raised when a document parsed fine but contained no text."""

    pass


class NoSlidesFoundError(ExtractionError):
    """Raised when a presentation package has no slide parts."""

    def __init__(self):
        super().__init__(
            "No slides found in this PowerPoint file. It may be an unsupported "
            "format or an empty presentation."
        )


class NoReadableTextError(ExtractionError):
    """Raised when every slide stripped down to empty text."""

    def __init__(self):
        super().__init__(
            "No readable text found in this presentation. Slides may contain "
            "only images or shapes without text."
        )


class CorruptArchiveError(ExtractionError):
    """Raised when a presentation cannot be opened as a zip archive."""

    def __init__(self):
        super().__init__(
            "Could not open this PowerPoint file. It may be corrupted or in the "
            "older .ppt binary format. Please save it as .pptx and try again."
        )


class LegacyFormatUnsupportedError(ExtractionError):
    """Raised when a legacy .doc/.ppt file could not be read."""

    pass
