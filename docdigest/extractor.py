"""Format-specific text extractors: PyMuPDF for PDF, python-docx for DOCX,
raw slide XML for PPTX."""

import io
import re
import threading
import zipfile
import zlib
from typing import Optional

import fitz  # PyMuPDF
from docx import Document
from docx.table import Table

from docdigest.config import ExtractorConfig
from docdigest.detector import SupportedExtension, file_extension
from docdigest.exceptions import (
    CorruptArchiveError,
    ExtractionError,
    NoExtractableTextError,
    NoReadableTextError,
    NoSlidesFoundError,
    UnsupportedFormatError,
)
from docdigest.fallback import extract_legacy_doc, extract_legacy_ppt
from docdigest.logger import Timer, get_logger

logger = get_logger(__name__)

# MuPDF is not thread-safe; extract_async runs extractions on worker threads
_MUPDF_LOCK = threading.Lock()

SLIDE_PART_RE = re.compile(r"^ppt/slides/slide(\d+)\.xml$", re.IGNORECASE)

_TEXT_RUN_TAG_RE = re.compile(r"</?a:t(?:\s[^>]*)?>")
_LINE_BREAK_RE = re.compile(r"<a:br\b[^>]*?/?>")
_ANY_TAG_RE = re.compile(r"<[^>]+>")
_CR_ENTITY_RE = re.compile(r"&#x0*d;", re.IGNORECASE)
_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")

# &amp; goes last so "&amp;lt;" decodes to "&lt;" and not "<"
_XML_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&apos;", "'"),
    ("&quot;", '"'),
    ("&amp;", "&"),
)


def slide_xml_to_text(xml: str) -> str:
    """Reduce one slide part to plain text."""
    text = _TEXT_RUN_TAG_RE.sub(" ", xml)
    text = _LINE_BREAK_RE.sub("\n", text)
    text = _ANY_TAG_RE.sub("", text)
    text = _CR_ENTITY_RE.sub("\n", text)
    for entity, char in _XML_ENTITIES:
        text = text.replace(entity, char)
    return _WHITESPACE_RUN_RE.sub(" ", text).strip()


def sorted_slide_parts(names: list[str]) -> list[str]:
    """Slide part names in presentation order (slide2 before slide10)."""
    numbered = []
    for name in names:
        match = SLIDE_PART_RE.match(name)
        if match:
            numbered.append((int(match.group(1)), name))
    numbered.sort(key=lambda item: item[0])
    return [name for _, name in numbered]


class DocumentExtractor:
    """Routes a file to the extractor for its extension.

    Errors raised by the PDF, DOCX and PPTX paths reach the caller as they
    are; only .doc and .ppt failures are rewritten into a conversion hint.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        """Initialize extractor with configuration.

        Args:
            config: Extractor configuration. If None, uses defaults.
        """
        self.config = config or ExtractorConfig()

        # Process-wide MuPDF switch, set once here rather than on import
        fitz.TOOLS.mupdf_display_errors(self.config.mupdf_display_errors)

        logger.debug(
            "Initializing DocumentExtractor",
            extra_data={
                "mupdf_display_errors": self.config.mupdf_display_errors,
                "docx_include_tables": self.config.docx_include_tables,
            },
        )

    def extract(
        self,
        file_bytes: bytes,
        file_name: str,
        extension: Optional[SupportedExtension] = None,
    ) -> str:
        """Extract plain text from a binary document.

        Args:
            file_bytes: Raw file bytes
            file_name: Original filename (used for the extension and logging)
            extension: Already sniffed extension, derived from ``file_name`` if omitted

        Returns:
            Non-empty extracted text

        Raises:
            UnsupportedFormatError: If there is no binary extractor for the extension
            ExtractionError: Or one of its subclasses, if extraction fails
        """
        if extension is None:
            ext = file_extension(file_name)
            try:
                extension = SupportedExtension(ext)
            except ValueError:
                raise UnsupportedFormatError(
                    ext, self.config.limits.supported_types
                ) from None

        if extension is SupportedExtension.PDF:
            return self.extract_pdf(file_bytes, file_name)
        elif extension is SupportedExtension.DOCX:
            return self.extract_docx(file_bytes, file_name)
        elif extension is SupportedExtension.DOC:
            return extract_legacy_doc(self.extract_docx, file_bytes, file_name)
        elif extension is SupportedExtension.PPTX:
            return self.extract_pptx(file_bytes, file_name)
        elif extension is SupportedExtension.PPT:
            return extract_legacy_ppt(self.extract_pptx, file_bytes, file_name)
        else:
            # Plain text is decoded by the handler, not parsed
            raise UnsupportedFormatError(
                extension.value, self.config.limits.supported_types
            )

    def extract_pdf(self, file_bytes: bytes, file_name: str = "unknown.pdf") -> str:
        """Extract text page by page, each page prefixed with ``[Page N]``."""
        parts: list[str] = []
        pages_with_text = 0
        with _MUPDF_LOCK, Timer("pdf_extraction") as timer:
            try:
                document = fitz.open(stream=file_bytes, filetype="pdf")
            except Exception as exc:
                raise ExtractionError(f"Failed to open PDF: {exc}") from exc

            with document:
                # Recent MuPDF builds open Office and image streams despite the filetype hint
                if not document.is_pdf:
                    raise ExtractionError(
                        "Failed to open PDF: the file content is not a PDF document"
                    )
                page_count = document.page_count
                for page_number, page in enumerate(document, start=1):
                    words = [word[4] for word in page.get_text("words")]
                    page_text = " ".join(words)
                    if page_text.strip():
                        pages_with_text += 1
                    parts.append(f"[Page {page_number}]\n{page_text}\n\n")

        text = "".join(parts).strip()

        logger.debug(
            "PDF extraction completed",
            extra_data={
                "file_name": file_name,
                "page_count": page_count,
                "pages_with_text": pages_with_text,
                "characters_extracted": len(text),
                "extraction_time_ms": timer.get_elapsed_ms(),
            },
        )

        # Page markers alone do not count as text
        if pages_with_text == 0:
            raise NoExtractableTextError(
                "No text could be extracted from this PDF. It may be a scanned "
                "image-only PDF. Try running OCR on it first."
            )
        return text

    def extract_docx(self, file_bytes: bytes, file_name: str = "unknown.docx") -> str:
        """Extract the raw text layer of a Word document using python-docx."""
        try:
            doc = Document(io.BytesIO(file_bytes))
        except Exception as exc:
            raise ExtractionError(f"Failed to open Word document: {exc}") from exc

        with Timer("docx_extraction") as timer:
            blocks: list[str] = []
            table_count = 0
            for item in doc.iter_inner_content():
                if isinstance(item, Table):
                    if not self.config.docx_include_tables:
                        continue
                    table_count += 1
                    blocks.extend(self._table_rows(item))
                elif item.text.strip():
                    blocks.append(item.text.strip())

            text = "\n\n".join(blocks).strip()

        logger.debug(
            "DOCX extraction completed",
            extra_data={
                "file_name": file_name,
                "block_count": len(blocks),
                "table_count": table_count,
                "characters_extracted": len(text),
                "extraction_time_ms": timer.get_elapsed_ms(),
            },
        )

        if not text:
            raise NoExtractableTextError(
                "No text found in this Word document. It may be empty or image-only."
            )
        return text

    @staticmethod
    def _table_rows(table: Table) -> list[str]:
        rows = []
        for row in table.rows:
            cells = []
            previous = None
            for cell in row.cells:
                # Horizontally merged cells are repeated by python-docx
                if previous is not None and cell._tc is previous:
                    continue
                previous = cell._tc
                cells.append(cell.text.strip())
            line = " | ".join(cells).strip(" |")
            if line:
                rows.append(line)
        return rows

    def extract_pptx(self, file_bytes: bytes, file_name: str = "unknown.pptx") -> str:
        """Extract slide text straight from the slide XML parts of the package."""
        try:
            archive = zipfile.ZipFile(io.BytesIO(file_bytes))
        except zipfile.BadZipFile as exc:
            logger.debug(
                "Presentation is not a zip archive",
                extra_data={"file_name": file_name, "error": str(exc)},
            )
            raise CorruptArchiveError() from exc

        with Timer("pptx_extraction") as timer, archive:
            slide_parts = sorted_slide_parts(archive.namelist())
            if not slide_parts:
                raise NoSlidesFoundError()

            parts: list[str] = []
            for position, part_name in enumerate(slide_parts, start=1):
                # Entry data can be damaged even when the directory reads fine
                try:
                    xml = archive.read(part_name).decode("utf-8", errors="replace")
                except (
                    zipfile.BadZipFile,
                    zlib.error,
                    EOFError,
                    NotImplementedError,
                    RuntimeError,
                    OSError,
                ) as exc:
                    logger.debug(
                        "Slide part could not be read",
                        extra_data={"file_name": file_name, "part": part_name, "error": str(exc)},
                    )
                    raise CorruptArchiveError() from exc
                slide_text = slide_xml_to_text(xml)
                if slide_text:
                    parts.append(f"[Slide {position}]\n{slide_text}\n\n")

        text = "".join(parts).strip()

        logger.debug(
            "PPTX extraction completed",
            extra_data={
                "file_name": file_name,
                "slide_count": len(slide_parts),
                "slides_with_text": len(parts),
                "characters_extracted": len(text),
                "extraction_time_ms": timer.get_elapsed_ms(),
            },
        )

        if not text:
            raise NoReadableTextError()
        return text

