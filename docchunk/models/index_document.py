"""Search-index record built from one text chunk."""

import uuid
from typing import List
from pydantic import BaseModel, Field


class IndexDocument(BaseModel):
    """One chunk as stored in the search index; the embedding is filled in downstream."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique record identifier")
    chat_thread_id: str = Field(description="Owning document or chat thread ID")
    user: str = Field(default="", description="Hashed ID of the uploading user")
    page_content: str = Field(description="Chunk text")
    metadata: str = Field(description="Source file name")
    chat_type: str = Field(default="doc", description="Index partition, e.g. 'doc' or 'data'")
    dept_name: str = Field(default="", description="Department the document belongs to")
    embedding: List[float] = Field(default_factory=list, description="Vector embedding of page_content")
    sas_url: str = Field(default="", description="Download URL of the source file")
    chunk_index: int = Field(default=0, description="Position of the chunk in its document")

    def for_search_index(self) -> dict:
        """Property dict with the index's camelCase field names, chunk order included."""
        return {
            "id": self.id,
            "chatThreadId": self.chat_thread_id,
            "user": self.user,
            "pageContent": self.page_content,
            "metadata": self.metadata,
            "chatType": self.chat_type,
            "deptName": self.dept_name,
            "embedding": self.embedding,
            "sasUrl": self.sas_url,
            "chunkIndex": self.chunk_index,
        }
