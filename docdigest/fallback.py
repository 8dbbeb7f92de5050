"""Best-effort handling of legacy .doc/.ppt uploads.

Legacy binary Office formats cannot be parsed here. Some of these files are
really OOXML packages with the old extension, so the modern reader is tried
first; if that fails for any reason the caller gets a fixed message asking
for a conversion, and the original error is dropped.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from docdigest.exceptions import LegacyFormatUnsupportedError
from docdigest.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

LEGACY_DOC_MESSAGE = (
    "Legacy .doc format has limited support. Please open the file in Word and "
    "save it as .docx, then re-upload."
)
LEGACY_PPT_MESSAGE = (
    "Legacy .ppt binary format cannot be extracted. Open the file in "
    "PowerPoint and save as .pptx, then re-upload."
)


@dataclass(frozen=True)
class Attempt(Generic[T]):
    """Outcome of one extraction attempt: a value or the error it raised."""

    value: Optional[T] = None
    error: Optional[Exception] = None

    @classmethod
    def run(cls, func: Callable[..., T], *args: Any) -> "Attempt[T]":
        try:
            return cls(value=func(*args))
        except Exception as exc:
            return cls(error=exc)

    @property
    def ok(self) -> bool:
        return self.error is None

    def or_raise(self, error: Exception) -> T:
        """Return the value, or raise ``error`` in place of the original failure."""
        if self.ok:
            return self.value
        logger.debug(
            "Discarding primary extraction error",
            extra_data={
                "error_type": type(self.error).__name__,
                "error": str(self.error),
                "replacement": type(error).__name__,
            },
        )
        raise error from None


def extract_legacy_doc(extract_docx: Callable[[bytes, str], str], data: bytes, file_name: str) -> str:
    return Attempt.run(extract_docx, data, file_name).or_raise(
        LegacyFormatUnsupportedError(LEGACY_DOC_MESSAGE)
    )


def extract_legacy_ppt(extract_pptx: Callable[[bytes, str], str], data: bytes, file_name: str) -> str:
    return Attempt.run(extract_pptx, data, file_name).or_raise(
        LegacyFormatUnsupportedError(LEGACY_PPT_MESSAGE)
    )
