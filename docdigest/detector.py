"""Upload validation: size limit and extension sniffing."""

from enum import Enum
from typing import Optional

from docdigest.config import FILE_LIMITS, FileLimits
from docdigest.exceptions import FileTooLargeError, UnsupportedFormatError
from docdigest.logger import get_logger

logger = get_logger(__name__)


PDF_SIGNATURE = b"%PDF"
ZIP_SIGNATURE = b"PK\x03\x04"
OLE_SIGNATURE = b"\xd0\xcf\x11\xe0"  # Legacy Office container


class SupportedExtension(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    PPTX = "pptx"
    PPT = "ppt"
    TXT = "txt"

    @property
    def is_legacy(self) -> bool:
        return self in (SupportedExtension.DOC, SupportedExtension.PPT)


# Container signature each extension is expected to carry
_EXPECTED_SIGNATURE = {
    SupportedExtension.PDF: "pdf",
    SupportedExtension.DOCX: "zip",
    SupportedExtension.PPTX: "zip",
    SupportedExtension.DOC: "ole",
    SupportedExtension.PPT: "ole",
}


def file_extension(file_name: str) -> str:
    """Return the lowercased text after the last dot, or "" when there is none."""
    _, dot, ext = file_name.rpartition(".")
    return ext.lower() if dot else ""


def describe_signature(data: bytes) -> Optional[str]:
    """Name the container format from its magic bytes."""
    head = data[:4]
    if head.startswith(PDF_SIGNATURE):
        return "pdf"
    if head.startswith(ZIP_SIGNATURE):
        return "zip"
    if head.startswith(OLE_SIGNATURE):
        return "ole"
    return None


class FormatSniffer:
    """Validates an upload and maps its extension to a SupportedExtension."""

    def __init__(self, limits: Optional[FileLimits] = None):
        self.limits = limits or FILE_LIMITS

    def sniff(self, upload) -> SupportedExtension:
        """Check size, then extension. Never reads file contents.

        Raises:
            FileTooLargeError: If ``upload.size`` exceeds the limit
            UnsupportedFormatError: If the extension has no extractor
        """
        if upload.size > self.limits.max_size_bytes:
            logger.warning(
                "Upload rejected - file too large",
                extra_data={
                    "file_name": upload.name,
                    "file_size_bytes": upload.size,
                    "limit_bytes": self.limits.max_size_bytes,
                },
            )
            raise FileTooLargeError(
                upload.size, self.limits.max_size_bytes, self.limits.max_size_mb
            )

        ext = file_extension(upload.name)
        try:
            extension = SupportedExtension(ext)
        except ValueError:
            logger.warning(
                "Upload rejected - unsupported extension",
                extra_data={"file_name": upload.name, "file_extension": ext},
            )
            raise UnsupportedFormatError(ext, self.limits.supported_types) from None

        logger.debug(
            "Upload accepted",
            extra_data={
                "file_name": upload.name,
                "file_extension": extension.value,
                "file_size_bytes": upload.size,
            },
        )
        return extension

    @staticmethod
    def check_signature(extension: SupportedExtension, data: bytes, file_name: str) -> None:
        """Log when the magic bytes disagree with the extension.

        Diagnostic only; dispatch is always by extension.
        """
        expected = _EXPECTED_SIGNATURE.get(extension)
        if expected is None:
            return
        actual = describe_signature(data)
        if actual != expected:
            logger.warning(
                "File signature does not match extension",
                extra_data={
                    "file_name": file_name,
                    "file_extension": extension.value,
                    "expected_signature": expected,
                    "detected_signature": actual,
                },
            )
