"""Data models for chunks, sections, analysis results and index records."""

from .chunk import TextChunk
from .section import Section, SectionType
from .analysis import (
    AnalyzedParagraph,
    TableCell,
    AnalyzedTable,
    DocumentField,
    KeyValuePair,
    ListItem,
    AnalyzedList,
    AnalyzeResult,
    ExtractedText,
)
from .index_document import IndexDocument

__all__ = [
    "TextChunk",
    "Section",
    "SectionType",
    "AnalyzedParagraph",
    "TableCell",
    "AnalyzedTable",
    "DocumentField",
    "KeyValuePair",
    "ListItem",
    "AnalyzedList",
    "AnalyzeResult",
    "ExtractedText",
    "IndexDocument",
]
