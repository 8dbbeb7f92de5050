"""Configuration classes for docdigest."""

from dataclasses import dataclass, field

BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class FileLimits:
    """Upload limits shared by the sniffer and the upload UI.

    Instances are immutable; the module-level ``FILE_LIMITS`` is the
    process-wide default and is never mutated after import. The byte limit
    is always derived from ``max_size_mb``.

    Examples:
        >>> FILE_LIMITS.max_size_bytes
        20971520

        >>> # Tighter limits for a constrained deployment
        >>> limits = FileLimits(max_size_mb=5, max_chars_for_ai=4000)
        >>> limits.max_size_bytes
        5242880
    """

    max_size_mb: int = 20
    """Maximum accepted upload size in megabytes."""

    max_size_bytes: int = field(init=False)
    """Same limit in bytes, ``max_size_mb * 1024 * 1024``."""

    max_chars_for_ai: int = 12_000
    """Character budget for text forwarded to the summarization model."""

    supported_types: tuple[str, ...] = ("pdf", "docx", "pptx", "txt")
    """Extensions advertised to users. Legacy ``doc``/``ppt`` are accepted
    but only mentioned in ``notes``."""

    notes: tuple[str, ...] = ()
    """User-facing notes rendered next to the upload area. Generated from
    the other limits when left empty."""

    def __post_init__(self):
        if self.max_size_mb <= 0:
            raise ValueError("max_size_mb must be positive")
        if self.max_chars_for_ai <= 0:
            raise ValueError("max_chars_for_ai must be positive")

        # Frozen dataclass: derived fields go through object.__setattr__
        object.__setattr__(self, "max_size_bytes", self.max_size_mb * BYTES_PER_MB)
        object.__setattr__(self, "supported_types", tuple(self.supported_types))
        if not self.notes:
            object.__setattr__(self, "notes", self._default_notes())
        else:
            object.__setattr__(self, "notes", tuple(self.notes))

    def _default_notes(self) -> tuple[str, ...]:
        formats = ", ".join(ext.upper() for ext in self.supported_types)
        return (
            f"Maximum file size: {self.max_size_mb} MB",
            f"Supported formats: {formats}",
            f"Text is capped at ~{self.max_chars_for_ai:,} characters sent to AI",
            "Scanned PDFs (image-only) cannot be extracted",
            ".doc and .ppt (legacy binary) have limited support - "
            "convert to .docx/.pptx for best results",
        )


FILE_LIMITS = FileLimits()


@dataclass
class ExtractorConfig:
    """Configuration for document extraction."""

    limits: FileLimits = field(default_factory=lambda: FILE_LIMITS)
    """Size and character limits enforced by the handler."""

    mupdf_display_errors: bool = False
    """Whether MuPDF prints its own warnings to stderr.

    This is a process-wide PyMuPDF switch; it is applied once when the
    PDF extractor is constructed, not at import time.
    """

    docx_include_tables: bool = True
    """Include the text of table cells when reading DOCX files."""
