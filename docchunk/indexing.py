"""Turn extracted paragraphs into search-index records, one per chunk."""

import logging
from typing import List, Optional
from docchunk.chunking import chunk_with_overlap, chunk_document_intelligence_text
from docchunk.config import ChunkerSettings
from docchunk.models.index_document import IndexDocument

logger = logging.getLogger(__name__)


def prepare_index_documents(
    file_name: str,
    paragraphs: List[str],
    document_id: str,
    department_name: str = "",
    user: str = "",
    chat_type: str = "doc",
    sas_url: str = "",
    use_sections: bool = False,
    settings: Optional[ChunkerSettings] = None,
) -> List[IndexDocument]:
    """
    Chunk a document's paragraphs and build one IndexDocument per non-blank chunk.

    Args:
        file_name: Source file name, stored as record metadata.
        paragraphs: Extracted paragraphs; joined with newlines before chunking.
        document_id: ID of the owning document (stored as chat_thread_id).
        department_name: Department the document belongs to.
        user: Hashed ID of the uploading user.
        chat_type: Index partition for the records.
        sas_url: Download URL for the source file.
        use_sections: Chunk with section markers kept intact (layout-analysis text).
        settings: Chunker settings.

    Returns:
        Records ready for embedding and upload, in chunk order.

    Raises:
        ValueError: If no chunk has any non-whitespace content.
    """
    text = "\n".join(paragraphs)
    if use_sections:
        chunks = chunk_document_intelligence_text(text, settings)
    else:
        chunks = chunk_with_overlap(text, settings)
    logger.info("Chunked %s into %d chunks", file_name, len(chunks))

    documents: List[IndexDocument] = []
    for chunk in chunks:
        if not chunk.content.strip():
            logger.warning("Empty content in chunk %d of %s, skipping", chunk.chunk_index, file_name)
            continue
        documents.append(
            IndexDocument(
                chat_thread_id=document_id,
                user=user,
                page_content=chunk.content,
                metadata=file_name,
                chat_type=chat_type,
                dept_name=department_name,
                sas_url=sas_url,
                chunk_index=chunk.chunk_index,
            )
        )

    if not documents:
        raise ValueError(f"No content to index in {file_name}")
    return documents
