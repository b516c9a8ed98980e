"""Overlapping, boundary-aware text chunking for search indexing."""

from .chunking import (
    chunk_with_overlap,
    chunk_document_intelligence_text,
    split_into_sections,
    count_words,
)
from .config import ChunkerSettings

__all__ = [
    "chunk_with_overlap",
    "chunk_document_intelligence_text",
    "split_into_sections",
    "count_words",
    "ChunkerSettings",
]
