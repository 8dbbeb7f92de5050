"""Data models for docdigest."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Union


@dataclass
class UploadedFile:
    """A file handed in by the caller.

    Only ``name`` (for its extension) and ``size`` are looked at before the
    content is needed; bytes are loaded on first read.
    """

    name: str
    size: int
    loader: Callable[[], bytes] = field(repr=False)

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> "UploadedFile":
        return cls(name=name, size=len(data), loader=lambda: data)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "UploadedFile":
        path = Path(path)
        return cls(name=path.name, size=path.stat().st_size, loader=path.read_bytes)

    def read_bytes(self) -> bytes:
        return self.loader()

    def read_text(self, encoding: str = "utf-8-sig") -> str:
        # Leading BOM dropped and invalid sequences become U+FFFD, as a browser's File.text() does
        return self.read_bytes().decode(encoding, errors="replace")


@dataclass(frozen=True)
class TruncatedText:
    """Text bounded for the model, plus whether anything was cut."""

    text: str
    truncated: bool


@dataclass
class DocumentExtractionResult:
    """Result of document extraction."""

    text: str  # truncated to the AI budget when requested
    file_name: str
    extension: str
    character_count: int  # length of the full extracted text
    truncated: bool = False
