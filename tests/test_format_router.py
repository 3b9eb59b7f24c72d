import pytesseract
import pytest

from extraction import ExtractionDispatcher, extract_text
from extraction.extractors import BaseExtractor, ImageOcrExtractor
from extraction.types import (
    DocumentFormat,
    ExtractionErrorKind,
    ExtractionRequest,
    ExtractionSuccess,
    infer_format,
)


class RecordingExtractor(BaseExtractor):
    def __init__(self, doc_format):
        self.format = doc_format
        self.calls = []

    def extract(self, path):
        self.calls.append(path)
        return ExtractionSuccess(f"{self.format.value}:{path}")


@pytest.fixture
def recorders():
    return {fmt: RecordingExtractor(fmt) for fmt in DocumentFormat}


@pytest.fixture
def dispatcher(recorders):
    return ExtractionDispatcher(recorders.values())


@pytest.mark.parametrize(
    "name, expected",
    [
        ("photo.jpg", DocumentFormat.IMAGE),
        ("photo.JPEG", DocumentFormat.IMAGE),
        ("scan.Png", DocumentFormat.IMAGE),
        ("report.PDF", DocumentFormat.PDF),
        ("letter.docx", DocumentFormat.DOCX),
        ("notes.txt", None),
        ("archive.pdf.zip", None),
        ("README", None),
    ],
)
def test_infer_format(name, expected):
    assert infer_format(name) is expected


def test_inferred_format_invokes_one_extractor(dispatcher, recorders):
    result = dispatcher.dispatch(ExtractionRequest("statement.pdf"))
    assert result == ExtractionSuccess("pdf:statement.pdf")
    assert recorders[DocumentFormat.PDF].calls == ["statement.pdf"]
    assert recorders[DocumentFormat.IMAGE].calls == []
    assert recorders[DocumentFormat.DOCX].calls == []


def test_declared_format_overrides_suffix(dispatcher, recorders):
    result = dispatcher.dispatch(ExtractionRequest("upload.bin", DocumentFormat.DOCX))
    assert result.ok
    assert recorders[DocumentFormat.DOCX].calls == ["upload.bin"]


def test_unsupported_suffix_does_not_touch_the_file(dispatcher, recorders, tmp_path):
    # The file does not exist, so any attempt to read it would fail differently
    result = dispatcher.dispatch(ExtractionRequest(tmp_path / "notes.txt"))
    assert result.kind is ExtractionErrorKind.UNSUPPORTED_FORMAT
    assert ".txt" in result.message
    assert all(not r.calls for r in recorders.values())


def test_explicit_and_inferred_pdf_agree(two_page_pdf):
    dispatcher = ExtractionDispatcher()
    explicit = dispatcher.extract(two_page_pdf, DocumentFormat.PDF)
    inferred = dispatcher.extract(two_page_pdf)
    assert explicit.ok and inferred.ok
    assert explicit.text == inferred.text


def test_explicit_and_inferred_docx_agree(sample_docx):
    explicit = extract_text(sample_docx, DocumentFormat.DOCX)
    inferred = extract_text(sample_docx)
    assert explicit == inferred == ExtractionSuccess("InvoiceTotal due")


def test_explicit_and_inferred_image_agree(sample_png, tessdata_dir, monkeypatch):
    monkeypatch.setattr(pytesseract, "image_to_string", lambda *a, **k: "Monthly report\n")
    dispatcher = ExtractionDispatcher([ImageOcrExtractor(tessdata_dir=tessdata_dir)])
    explicit = dispatcher.extract(sample_png, DocumentFormat.IMAGE)
    inferred = dispatcher.extract(sample_png)
    assert explicit == inferred == ExtractionSuccess("Monthly report\n")


def test_failures_are_returned_not_raised(tmp_path):
    broken = tmp_path / "broken.docx"
    broken.write_bytes(b"\x00\x01")
    result = extract_text(broken)
    assert result.kind is ExtractionErrorKind.PARSE_FAILURE


def test_unknown_declared_format_is_unsupported(dispatcher, recorders):
    result = dispatcher.dispatch(ExtractionRequest("notes.pdf", "txt"))
    assert result.kind is ExtractionErrorKind.UNSUPPORTED_FORMAT
    assert "txt" in result.message
    assert all(not r.calls for r in recorders.values())
