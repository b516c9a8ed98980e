"""Format layout-analysis results into marker-annotated text for section-aware chunking."""

import logging
from typing import Tuple
from docchunk.chunking import count_words
from docchunk.models.analysis import AnalyzeResult, ExtractedText

logger = logging.getLogger(__name__)

TABLE_MARKER = "--- テーブル ---"
KEYVALUE_MARKER = "--- キー・値ペア ---"
LIST_MARKER = "--- リスト ---"
LIST_BULLET = "• "


def format_extracted_text(result: AnalyzeResult) -> Tuple[str, int]:
    """
    Render paragraphs, tables, key/value pairs and lists as plain text.

    Paragraphs come first, separated by blank lines. Tables, key/value pairs and
    lists follow, each block introduced by its marker line so that
    split_into_sections can find them again.

    Args:
        result: Analysis result to render.

    Returns:
        Tuple of (trimmed text, word count of the rendered pieces).
    """
    parts = []
    word_count = 0

    for paragraph in result.paragraphs or []:
        if paragraph.content and paragraph.content.strip():
            parts.append(paragraph.content.strip() + "\n\n")
            word_count += count_words(paragraph.content)

    for table in result.tables:
        if not table.cells:
            continue
        parts.append(f"\n{TABLE_MARKER}\n")
        for row in table.rows():
            row_text = "\t".join(cell.content or "" for cell in row)
            if row_text.strip():
                parts.append(row_text + "\n")
                word_count += count_words(row_text)
        parts.append("\n")

    if result.key_value_pairs:
        parts.append(f"\n{KEYVALUE_MARKER}\n")
        for pair in result.key_value_pairs:
            if pair.key and pair.key.content and pair.value and pair.value.content:
                pair_text = f"{pair.key.content}: {pair.value.content}"
                parts.append(pair_text + "\n")
                word_count += count_words(pair_text)

    if result.lists:
        parts.append(f"\n{LIST_MARKER}\n")
        for analyzed_list in result.lists:
            for item in analyzed_list.items:
                if item.content:
                    parts.append(f"{LIST_BULLET}{item.content}\n")
                    word_count += count_words(item.content)

    return "".join(parts).strip(), word_count


def calculate_average_confidence(result: AnalyzeResult) -> float:
    """Mean of the positive confidences on paragraphs, tables and key/value fields, to 2 decimals."""
    confidences = []
    confidences.extend(p.confidence for p in result.paragraphs or [])
    confidences.extend(t.confidence for t in result.tables)
    for pair in result.key_value_pairs:
        if pair.key:
            confidences.append(pair.key.confidence)
        if pair.value:
            confidences.append(pair.value.confidence)

    positive = [c for c in confidences if c is not None and c > 0]
    if not positive:
        return 0.0
    return round(sum(positive) / len(positive), 2)


def extract_text(result: AnalyzeResult) -> ExtractedText:
    """
    Build ExtractedText (content, pages, confidence, word count) from an analysis result.

    Raises:
        ValueError: If the result has neither content nor paragraphs.
    """
    if not result.content and result.paragraphs is None:
        raise ValueError("No content found in analysis result")

    content, word_count = format_extracted_text(result)
    extracted = ExtractedText(
        content=content,
        pages=len(result.pages) or 1,
        confidence=calculate_average_confidence(result),
        word_count=word_count,
    )
    logger.info(
        "Formatted analysis result: %d pages, %d characters, %d words, confidence %.2f",
        extracted.pages,
        len(extracted.content),
        extracted.word_count,
        extracted.confidence,
    )
    return extracted
