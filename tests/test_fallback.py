import pytest

from docdigest.exceptions import (
    CorruptArchiveError,
    LegacyFormatUnsupportedError,
    NoExtractableTextError,
)
from docdigest.extractor import DocumentExtractor
from docdigest.fallback import Attempt

OLE_BYTES = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 64


@pytest.fixture
def extractor():
    return DocumentExtractor()


def test_attempt_returns_value():
    assert Attempt.run(lambda a, b: a + b, 2, 3).or_raise(RuntimeError("unused")) == 5


def test_attempt_replaces_error_and_drops_cause():
    def boom():
        raise KeyError("inner detail")

    attempt = Attempt.run(boom)
    assert not attempt.ok

    with pytest.raises(RuntimeError) as excinfo:
        attempt.or_raise(RuntimeError("fixed message"))

    assert str(excinfo.value) == "fixed message"
    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__


def test_legacy_ppt_binary(extractor):
    with pytest.raises(LegacyFormatUnsupportedError) as excinfo:
        extractor.extract(OLE_BYTES, "deck.ppt")

    assert ".pptx" in str(excinfo.value)
    assert excinfo.value.__cause__ is None


def test_same_bytes_as_pptx_report_corrupt_archive(extractor):
    with pytest.raises(CorruptArchiveError):
        extractor.extract(OLE_BYTES, "deck.pptx")
    with pytest.raises(LegacyFormatUnsupportedError):
        extractor.extract(OLE_BYTES, "deck.ppt")


def test_renamed_pptx_with_ppt_extension_is_read(extractor, make_pptx, slide_xml):
    data = make_pptx({"ppt/slides/slide1.xml": slide_xml("Actually OOXML")})

    assert extractor.extract(data, "mislabeled.ppt") == "[Slide 1]\nActually OOXML"


def test_legacy_doc_binary(extractor):
    with pytest.raises(LegacyFormatUnsupportedError) as excinfo:
        extractor.extract(OLE_BYTES, "report.doc")

    message = str(excinfo.value)
    assert ".docx" in message
    assert "Word" in message


def test_renamed_docx_with_doc_extension_is_read(extractor, make_docx):
    data = make_docx(["Saved with the wrong extension"])

    assert extractor.extract(data, "report.doc") == "Saved with the wrong extension"


def test_empty_doc_becomes_legacy_error(extractor, make_docx):
    data = make_docx([])

    with pytest.raises(NoExtractableTextError):
        extractor.extract(data, "empty.docx")
    with pytest.raises(LegacyFormatUnsupportedError):
        extractor.extract(data, "empty.doc")
