import zipfile
from pathlib import Path
import sys

import pytest

# Ensure local packages are importable before any external 'config' package
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from config.settings import ClassifierSettings
from classification import ModelStore, TextClassifier


W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
OFFICE_DOCUMENT_REL = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument"

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '<Override PartName="/word/document.xml" '
    'ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    "</Types>"
)


def build_pdf(page_texts):
    """Assemble a minimal PDF with one Helvetica text line per page."""
    n_pages = len(page_texts)
    page_ids = [4 + 2 * i for i in range(n_pages)]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {n_pages} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, text in enumerate(page_texts):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {5 + 2 * i} 0 R >>"
            ).encode()
        )
        stream = f"BT /F1 24 Tf 72 700 Td ({text}) Tj ET".encode()
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_offset)
    return bytes(out)


def build_docx_package(path, document_xml=None, with_main_part=True):
    """Write a bare OPC package; ``document_xml`` becomes word/document.xml."""
    relationship = (
        f'<Relationship Id="rId1" Type="{OFFICE_DOCUMENT_REL}" Target="word/document.xml"/>'
        if with_main_part
        else ""
    )
    rels = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
        f"{relationship}</Relationships>"
    )
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("[Content_Types].xml", CONTENT_TYPES)
        zf.writestr("_rels/.rels", rels)
        if document_xml is not None:
            zf.writestr("word/document.xml", document_xml)
    return path


@pytest.fixture
def two_page_pdf(tmp_path):
    path = tmp_path / "two_pages.pdf"
    path.write_bytes(build_pdf(["FirstPage", "SecondPage"]))
    return path


@pytest.fixture
def sample_docx(tmp_path):
    from docx import Document

    document = Document()
    document.add_paragraph("Invoice")
    paragraph = document.add_paragraph("Total ")
    paragraph.add_run("due")
    path = tmp_path / "sample.docx"
    document.save(path)
    return path


@pytest.fixture
def sample_png(tmp_path):
    from PIL import Image

    path = tmp_path / "scan.png"
    Image.new("RGB", (64, 32), "white").save(path)
    return path


@pytest.fixture
def tessdata_dir(tmp_path):
    path = tmp_path / "tessdata"
    path.mkdir()
    return path


@pytest.fixture
def model_path(tmp_path):
    return tmp_path / "models" / "textModel.joblib"


@pytest.fixture
def classifier_settings():
    return ClassifierSettings(n_features=2 ** 14)


@pytest.fixture
def classifier(model_path, classifier_settings):
    return TextClassifier(store=ModelStore(model_path), classifier_settings=classifier_settings)


@pytest.fixture
def training_samples():
    return [
        ("Invoice amount due for March", "Invoice"),
        ("Paid invoice for electricity", "Invoice"),
        ("Resume: Senior Software Engineer", "Resume"),
        ("Curriculum vitae and contact details", "Resume"),
        ("Monthly report for sales", "Report"),
    ]
