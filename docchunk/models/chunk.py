"""Chunk model for text segments cut from a document."""

from pydantic import BaseModel, ConfigDict, Field


class TextChunk(BaseModel):
    """A contiguous segment of document text, ordered within its document."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Chunk text content")
    start_index: int = Field(ge=0, description="Offset of the first character in the source text")
    end_index: int = Field(ge=0, description="Offset one past the last character in the source text")
    chunk_index: int = Field(ge=0, description="Zero-based order among the document's chunks")
    word_count: int = Field(ge=0, description="Number of whitespace-delimited tokens in content")

    def shifted(self, offset: int, chunk_index: int) -> "TextChunk":
        """Copy of this chunk moved by offset and renumbered."""
        return self.model_copy(
            update={
                "start_index": self.start_index + offset,
                "end_index": self.end_index + offset,
                "chunk_index": chunk_index,
            }
        )
