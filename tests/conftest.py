import io
import zipfile

import docx
import fitz
import pytest

SLIDE_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<p:sld xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
    'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main">'
    "<p:cSld><p:spTree><p:sp><p:txBody>{paragraphs}</p:txBody></p:sp></p:spTree></p:cSld>"
    "</p:sld>"
)


def slide_xml(*runs: str) -> str:
    paragraphs = "".join(f"<a:p><a:r><a:t>{run}</a:t></a:r></a:p>" for run in runs)
    return SLIDE_TEMPLATE.format(paragraphs=paragraphs)


@pytest.fixture(name="slide_xml")
def slide_xml_fixture():
    return slide_xml


@pytest.fixture
def make_pdf():
    def _build(pages: list[str]) -> bytes:
        document = fitz.open()
        for text in pages:
            page = document.new_page()
            if text:
                page.insert_text((72, 72), text)
        data = document.tobytes()
        document.close()
        return data

    return _build


@pytest.fixture
def make_docx():
    def _build(paragraphs: list[str], table_rows: list[list[str]] | None = None) -> bytes:
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        if table_rows:
            table = document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
            for row, values in zip(table.rows, table_rows):
                for cell, value in zip(row.cells, values):
                    cell.text = value
        payload = io.BytesIO()
        document.save(payload)
        return payload.getvalue()

    return _build


@pytest.fixture
def make_pptx():
    """Build a minimal presentation package; entries keep the given order."""

    def _build(parts: dict[str, str]) -> bytes:
        payload = io.BytesIO()
        with zipfile.ZipFile(payload, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
            archive.writestr("[Content_Types].xml", "<Types/>")
            archive.writestr("ppt/presentation.xml", "<p:presentation/>")
            for name, xml in parts.items():
                archive.writestr(name, xml)
        return payload.getvalue()

    return _build
