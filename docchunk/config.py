"""Chunker configuration with environment overrides."""

import os
from pydantic import BaseModel, Field, model_validator
from dotenv import find_dotenv, load_dotenv

CHUNK_SIZE = 1000
CHUNK_OVERLAP = 200
PARAGRAPH_SEARCH_WINDOW = 200
WORD_SEARCH_WINDOW = 100
MAX_DOCUMENT_SIZE = 20_000_000

ENV_PREFIX = "DOCCHUNK_"


class ChunkerSettings(BaseModel):
    """Sizes and lookahead windows used when cutting text into chunks."""

    chunk_size: int = Field(default=CHUNK_SIZE, gt=0, description="Target characters per chunk before boundary adjustment")
    chunk_overlap: int = Field(default=CHUNK_OVERLAP, ge=0, description="Characters reused at the start of the next chunk")
    paragraph_search_window: int = Field(default=PARAGRAPH_SEARCH_WINDOW, ge=0, description="Lookahead for a blank line")
    word_search_window: int = Field(default=WORD_SEARCH_WINDOW, ge=0, description="Lookahead for a space or tab")
    max_document_size: int = Field(default=MAX_DOCUMENT_SIZE, gt=0, description="Largest accepted source file in bytes")

    @model_validator(mode="after")
    def _overlap_below_chunk_size(self) -> "ChunkerSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than chunk_size ({self.chunk_size})"
            )
        return self

    @classmethod
    def from_env(cls) -> "ChunkerSettings":
        """
        Build settings from DOCCHUNK_* environment variables (after loading .env from the working directory).

        Unset variables keep their defaults.
        """
        load_dotenv(find_dotenv(usecwd=True))
        env_keys = {
            "chunk_size": "CHUNK_SIZE",
            "chunk_overlap": "CHUNK_OVERLAP",
            "paragraph_search_window": "PARAGRAPH_WINDOW",
            "word_search_window": "WORD_WINDOW",
            "max_document_size": "MAX_DOCUMENT_SIZE",
        }
        values = {}
        for field_name, suffix in env_keys.items():
            raw = os.getenv(ENV_PREFIX + suffix)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        return cls(**values)


DEFAULT_SETTINGS = ChunkerSettings()
