"""Chunk document text into overlapping segments for embedding and search indexing."""

import logging
from typing import List, Optional, Tuple
from docchunk.config import ChunkerSettings, DEFAULT_SETTINGS
from docchunk.models.chunk import TextChunk
from docchunk.models.section import Section, SectionType

logger = logging.getLogger(__name__)

# Marker lines written by the layout-analysis formatter, checked in this order.
SECTION_MARKERS = (
    ("--- テーブル ---", SectionType.TABLE),
    ("--- キー・値ペア ---", SectionType.KEYVALUE),
    ("--- リスト ---", SectionType.LIST),
)


def count_words(text: str) -> int:
    """Number of whitespace-separated tokens in text."""
    return len(text.split())


def _make_chunk(document: str, start: int, end: int, chunk_index: int) -> TextChunk:
    content = document[start:end]
    return TextChunk(
        content=content,
        start_index=start,
        end_index=end,
        chunk_index=chunk_index,
        word_count=count_words(content),
    )


def find_paragraph_boundary(
    document: str,
    target_index: int,
    paragraph_window: int = DEFAULT_SETTINGS.paragraph_search_window,
    word_window: int = DEFAULT_SETTINGS.word_search_window,
) -> int:
    """
    Move a cut point forward to the nearest paragraph or word boundary.

    Looks at most paragraph_window characters ahead for a newline that ends the
    document or is followed by another newline, and returns the position just
    past it. Failing that, looks at most word_window characters ahead for a space
    or tab and returns its position. Otherwise returns target_index unchanged.
    The search never moves backwards.

    Args:
        document: Full text being chunked.
        target_index: Naive cut position.
        paragraph_window: Lookahead for a paragraph break.
        word_window: Lookahead for a word break.

    Returns:
        Adjusted cut position (>= target_index).
    """
    length = len(document)

    for i in range(target_index, min(target_index + paragraph_window, length)):
        if document[i] == "\n" and (i + 1 >= length or document[i + 1] == "\n"):
            return i + 1

    for i in range(target_index, min(target_index + word_window, length)):
        if document[i] in (" ", "\t"):
            return i

    return target_index


def chunk_with_overlap(document: str, settings: Optional[ChunkerSettings] = None) -> List[TextChunk]:
    """
    Split text into overlapping chunks that end on paragraph or word boundaries.

    Args:
        document: Full document text (may be empty).
        settings: Chunk size, overlap and boundary windows; defaults to 1000/200/200/100.

    Returns:
        Non-empty list of TextChunk with chunk_index 0, 1, ... in order.
    """
    settings = settings or DEFAULT_SETTINGS
    length = len(document)

    if length <= settings.chunk_size:
        return [_make_chunk(document, 0, length, 0)]

    chunks: List[TextChunk] = []
    start = 0
    while start < length:
        end = find_paragraph_boundary(
            document,
            start + settings.chunk_size,
            settings.paragraph_search_window,
            settings.word_search_window,
        )
        end = min(end, length)
        chunks.append(_make_chunk(document, start, end, len(chunks)))
        if end >= length:
            break
        # Always move forward, even if the overlap would swallow the whole chunk.
        start = max(end - settings.chunk_overlap, start + 1)

    logger.debug("Split %d characters into %d chunks", length, len(chunks))
    return chunks


def split_into_sections(document: str) -> List[Section]:
    """
    Split analyzed document text into sections at table, key/value and list markers.

    A marker line closes the current section (kept only if it has non-blank text)
    and opens a new one that starts with the marker line itself.

    Args:
        document: Text produced by the layout-analysis formatter.

    Returns:
        Sections in document order, each with trimmed content.
    """
    sections: List[Section] = []
    current_lines: List[str] = []
    current_type = SectionType.TEXT

    def flush() -> None:
        content = "\n".join(current_lines).strip()
        if content:
            sections.append(Section(content=content, type=current_type))

    for line in document.split("\n"):
        marker_type = next((kind for marker, kind in SECTION_MARKERS if marker in line), None)
        if marker_type is None:
            current_lines.append(line)
            continue
        flush()
        current_lines = [line]
        current_type = marker_type

    flush()
    return sections


def _chunk_section(
    section: Section,
    offset: int,
    chunk_index: int,
    settings: ChunkerSettings,
) -> Tuple[List[TextChunk], int, int]:
    """Chunk one section and return its chunks with the advanced (offset, chunk_index)."""
    content = section.content
    if len(content) <= settings.chunk_size:
        pieces = [_make_chunk(content, 0, len(content), 0)]
    else:
        pieces = chunk_with_overlap(content, settings)

    placed = [piece.shifted(offset, chunk_index + i) for i, piece in enumerate(pieces)]
    return placed, offset + len(content), chunk_index + len(placed)


def chunk_document_intelligence_text(
    document: str,
    settings: Optional[ChunkerSettings] = None,
) -> List[TextChunk]:
    """
    Chunk layout-analysis text so tables, key/value blocks and lists stay whole when they fit.

    Sections longer than chunk_size are split with chunk_with_overlap. Offsets
    run over the concatenation of the trimmed sections and chunk_index runs
    across all sections.

    Args:
        document: Text containing optional section marker lines.
        settings: Chunker settings; defaults to the module defaults.

    Returns:
        List of TextChunk across all sections (empty for blank input).
    """
    settings = settings or DEFAULT_SETTINGS
    sections = split_into_sections(document)

    chunks: List[TextChunk] = []
    offset, chunk_index = 0, 0
    for section in sections:
        section_chunks, offset, chunk_index = _chunk_section(section, offset, chunk_index, settings)
        chunks.extend(section_chunks)

    logger.debug(
        "Split %d sections (%s) into %d chunks",
        len(sections),
        ", ".join(section.type.value for section in sections),
        len(chunks),
    )
    return chunks
