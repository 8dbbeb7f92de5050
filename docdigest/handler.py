"""Document handler orchestration."""

import asyncio
from typing import Optional

from docdigest.config import ExtractorConfig
from docdigest.detector import FormatSniffer, SupportedExtension, file_extension
from docdigest.exceptions import DocumentParserError, NoExtractableTextError
from docdigest.extractor import DocumentExtractor
from docdigest.logger import Timer, get_logger, set_extraction_id
from docdigest.models import DocumentExtractionResult
from docdigest.truncation import truncate

logger = get_logger(__name__)


class DocumentHandler:
    def __init__(
        self,
        sniffer: Optional[FormatSniffer] = None,
        extractor: Optional[DocumentExtractor] = None,
        config: Optional[ExtractorConfig] = None,
    ) -> None:
        """Initialize document handler.

        Args:
            sniffer: Upload validator. If None, creates one with the configured limits.
            extractor: Document extractor. If None, creates default with config.
            config: Extractor configuration. Only used for defaults that are not passed.
        """
        self.config = config or ExtractorConfig()
        self.sniffer = sniffer or FormatSniffer(self.config.limits)
        self.extractor = extractor or DocumentExtractor(config=self.config)

    def extract(self, upload) -> str:
        """Extract plain text from an uploaded file.

        Args:
            upload: An ``UploadedFile`` or any object with ``name``, ``size``,
                ``read_bytes()`` and ``read_text()``

        Returns:
            Non-empty extracted text

        Raises:
            FileTooLargeError: If the file exceeds the size limit
            UnsupportedFormatError: If the extension is not supported
            ExtractionError: Or one of its subclasses, if extraction fails
        """
        set_extraction_id()
        extension = self.sniffer.sniff(upload)

        with Timer("extraction") as timer:
            try:
                if extension is SupportedExtension.TXT:
                    text = upload.read_text()
                    if not text.strip():
                        raise NoExtractableTextError("This text file is empty.")
                else:
                    file_bytes = upload.read_bytes()
                    self.sniffer.check_signature(extension, file_bytes, upload.name)
                    text = self.extractor.extract(file_bytes, upload.name, extension)
            except DocumentParserError as exc:
                logger.warning(
                    "Document extraction failed",
                    extra_data={
                        "file_name": upload.name,
                        "file_extension": extension.value,
                        "error_type": type(exc).__name__,
                        "error": str(exc),
                        "extraction_time_ms": timer.get_elapsed_ms(),
                    },
                )
                raise

        logger.info(
            "Successfully extracted text from document",
            extra_data={
                "file_name": upload.name,
                "file_extension": extension.value,
                "character_count": len(text),
                "extraction_time_ms": timer.get_elapsed_ms(),
            },
        )
        return text

    def process(self, upload, max_chars: Optional[int] = None) -> DocumentExtractionResult:
        """Extract and bound the text for the summarization model.

        Args:
            upload: File to extract
            max_chars: Character budget. Defaults to the configured ``max_chars_for_ai``.
        """
        text = self.extract(upload)
        if max_chars is None:
            max_chars = self.config.limits.max_chars_for_ai
        bounded = truncate(text, max_chars)

        if bounded.truncated:
            logger.info(
                "Extracted text truncated for AI",
                extra_data={
                    "file_name": upload.name,
                    "character_count": len(text),
                    "max_chars": max_chars,
                },
            )

        return DocumentExtractionResult(
            text=bounded.text,
            file_name=upload.name,
            extension=file_extension(upload.name),
            character_count=len(text),
            truncated=bounded.truncated,
        )

    async def extract_async(self, upload) -> str:
        """Run ``extract`` in a worker thread so the event loop stays free."""
        return await asyncio.to_thread(self.extract, upload)

    async def process_async(self, upload, max_chars: Optional[int] = None) -> DocumentExtractionResult:
        return await asyncio.to_thread(self.process, upload, max_chars)
