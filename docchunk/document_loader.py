"""Load source documents as lists of paragraphs ready for chunking."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from docx import Document as DocxDocument
from pypdf import PdfReader

from docchunk.config import ChunkerSettings, DEFAULT_SETTINGS
from docchunk.models.analysis import AnalyzeResult
from docchunk.text_formatter import extract_text

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".txt", ".md", ".pdf", ".docx", ".json")


def is_supported_file_type(file_name: str) -> bool:
    """Whether the file extension is one the loader can read."""
    return Path(file_name).suffix.lower() in SUPPORTED_EXTENSIONS


def is_file_size_valid(file_size: int, max_size: int = DEFAULT_SETTINGS.max_document_size) -> bool:
    """Whether a file of file_size bytes is non-empty and below max_size."""
    return 0 < file_size < max_size


class DocumentLoader:
    """Reads text, PDF, Word and saved layout-analysis files into paragraphs."""

    def __init__(self, settings: Optional[ChunkerSettings] = None):
        """
        Initialize the loader.

        Args:
            settings: Settings providing max_document_size (default: module defaults)
        """
        self.settings = settings or DEFAULT_SETTINGS

    def load_paragraphs(self, file_path: str) -> List[str]:
        """
        Extract paragraphs from a document file.

        Args:
            file_path: Path to the document file

        Returns:
            Paragraph texts in document order

        Raises:
            ValueError: If the format is unsupported or the file is empty or too large
        """
        path = Path(file_path)
        if not is_supported_file_type(path.name):
            raise ValueError(f"Unsupported file format: {path.suffix.lower() or path.name}")

        size = path.stat().st_size
        if size == 0:
            raise ValueError(f"File is empty: {path.name}")
        if not is_file_size_valid(size, self.settings.max_document_size):
            raise ValueError(
                f"File is too large: {size} bytes (maximum {self.settings.max_document_size} bytes)"
            )

        extension = path.suffix.lower()
        if extension == ".pdf":
            paragraphs = self._load_pdf(path)
        elif extension == ".docx":
            paragraphs = self._load_docx(path)
        elif extension == ".json":
            paragraphs = self._load_analysis_result(path)
        else:
            paragraphs = self._load_txt(path)

        logger.info("Loaded %d paragraphs from %s", len(paragraphs), path.name)
        return paragraphs

    def _load_txt(self, path: Path) -> List[str]:
        with open(path, "r", encoding="utf-8") as f:
            return [f.read()]

    def _load_pdf(self, path: Path) -> List[str]:
        """One paragraph per page; pages without a text layer are skipped."""
        reader = PdfReader(str(path))
        paragraphs = []
        for page_number, page in enumerate(reader.pages, start=1):
            text = page.extract_text() or ""
            if text.strip():
                paragraphs.append(text.strip())
            else:
                logger.warning("No extractable text on page %d of %s", page_number, path.name)
        return paragraphs

    def _load_docx(self, path: Path) -> List[str]:
        doc = DocxDocument(str(path))
        return [p.text for p in doc.paragraphs if p.text.strip()]

    def _load_analysis_result(self, path: Path) -> List[str]:
        """Format a saved layout-analysis JSON response (optionally wrapped in analyzeResult)."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict) and "analyzeResult" in data:
            data = data["analyzeResult"]
        result = AnalyzeResult.model_validate(data)
        return [extract_text(result).content]
