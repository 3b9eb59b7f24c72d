#!/usr/bin/env python3
"""
Example script demonstrating extraction and classification end to end.

This script shows how to:
1. Extract text from an image, a PDF and a DOCX file
2. Train the classifier on a tiny in-code dataset
3. Predict the category of a piece of text
"""

import sys
from pathlib import Path

# Add src and the project root to path
sys.path.append(str(Path(__file__).parent.parent / "src"))
sys.path.append(str(Path(__file__).parent.parent))

from config import configure_logging
from classification import LabeledSample, TextClassifier
from extraction import extract_text

SAMPLE_DIR = Path(__file__).parent / "sample_files"

SAMPLE_FILES = [
    SAMPLE_DIR / "JPGImage.jpg",
    SAMPLE_DIR / "pdfFile.pdf",
    SAMPLE_DIR / "demo.docx",
]

# Tiny training set; replace with a real labelled corpus
TRAINING_SAMPLES = [
    LabeledSample("Invoice amount due for March", "Invoice"),
    LabeledSample("Paid invoice for electricity", "Invoice"),
    LabeledSample("Resume: Senior Software Engineer", "Resume"),
    LabeledSample("Curriculum vitae and contact details", "Resume"),
    LabeledSample("Monthly report for sales", "Report"),
]


def extract_samples():
    """Print the text of every sample file that exists."""
    for path in SAMPLE_FILES:
        if not path.exists():
            print(f"Skipping missing sample: {path}")
            continue

        result = extract_text(path)
        if result.ok:
            print(f"\n{path.name} text:\n{result.text}")
        else:
            print(f"\n{path.name} failed: {result}")


def classify_example(text: str = "This is an invoice for payment of $2000"):
    """Train on the in-code samples and classify ``text``."""
    classifier = TextClassifier()
    classifier.train(TRAINING_SAMPLES)
    print(f"Model saved to: {classifier.store.location}")

    prediction = classifier.predict(text)
    if prediction.ok:
        print(f"Predicted label for '{text}': {prediction.predicted_label}")
    else:
        print(f"Prediction failed: {prediction}")


if __name__ == "__main__":
    configure_logging()
    print("Smart Text Reader Example")
    print("=" * 40)

    extract_samples()
    classify_example()
