"""Tests for chunker settings."""

import os
import pytest
from pydantic import ValidationError
from docchunk.config import ChunkerSettings


class TestChunkerSettings:

    def test_defaults(self):
        settings = ChunkerSettings()
        assert settings.chunk_size == 1000
        assert settings.chunk_overlap == 200
        assert settings.paragraph_search_window == 200
        assert settings.word_search_window == 100
        assert settings.max_document_size == 20_000_000

    @pytest.mark.parametrize("overlap", [500, 600])
    def test_overlap_must_be_smaller_than_chunk_size(self, overlap):
        with pytest.raises(ValidationError):
            ChunkerSettings(chunk_size=500, chunk_overlap=overlap)

    def test_chunk_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            ChunkerSettings(chunk_size=0, chunk_overlap=0)

    def test_from_env_reads_overrides(self, isolated_env, monkeypatch):
        monkeypatch.setenv("DOCCHUNK_CHUNK_SIZE", "500")
        monkeypatch.setenv("DOCCHUNK_CHUNK_OVERLAP", "50")
        monkeypatch.setenv("DOCCHUNK_WORD_WINDOW", " ")
        settings = ChunkerSettings.from_env()
        assert settings.chunk_size == 500
        assert settings.chunk_overlap == 50
        assert settings.word_search_window == 100

    def test_from_env_rejects_bad_values(self, isolated_env, monkeypatch):
        monkeypatch.setenv("DOCCHUNK_CHUNK_SIZE", "100")
        monkeypatch.setenv("DOCCHUNK_CHUNK_OVERLAP", "150")
        with pytest.raises(ValidationError):
            ChunkerSettings.from_env()

    def test_from_env_without_overrides_uses_defaults(self, isolated_env):
        assert ChunkerSettings.from_env() == ChunkerSettings()

    def test_from_env_reads_dotenv_in_working_directory(self, isolated_env):
        (isolated_env / ".env").write_text("DOCCHUNK_CHUNK_SIZE=700\n", encoding="utf-8")
        settings = ChunkerSettings.from_env()
        os.environ.pop("DOCCHUNK_CHUNK_SIZE", None)
        assert settings.chunk_size == 700
