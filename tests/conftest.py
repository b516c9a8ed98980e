"""Pytest configuration and fixtures for chunking tests."""

import pytest
from docchunk.config import ChunkerSettings


@pytest.fixture(scope="session")
def word_text():
    """2999 characters of space-separated four-letter words, no newlines."""
    return ("abcd " * 600).strip()


@pytest.fixture(scope="session")
def paragraph_text():
    """Several paragraphs of prose separated by blank lines."""
    paragraphs = []
    for i in range(12):
        sentence = f"Paragraph {i} explains one part of the uploaded manual in plain words. "
        paragraphs.append((sentence * 4).strip())
    return "\n\n".join(paragraphs)


@pytest.fixture(scope="function")
def small_settings():
    """Small chunks so boundary behaviour is easy to follow."""
    return ChunkerSettings(
        chunk_size=10,
        chunk_overlap=9,
        paragraph_search_window=0,
        word_search_window=0,
    )


@pytest.fixture(scope="function")
def analysis_payload():
    """Layout-analysis response in the service's camelCase JSON shape."""
    return {
        "content": "Title\nA B\n1 2",
        "pages": [{"pageNumber": 1}, {"pageNumber": 2}],
        "paragraphs": [
            {"content": " Title ", "confidence": 0.9},
            {"content": "   "},
        ],
        "tables": [
            {
                "confidence": 0.8,
                "cells": [
                    {"rowIndex": 0, "columnIndex": 1, "content": "B"},
                    {"rowIndex": 0, "columnIndex": 0, "content": "A"},
                    {"rowIndex": 1, "columnIndex": 0, "content": "1"},
                    {"rowIndex": 1, "columnIndex": 1, "content": "2"},
                ],
            }
        ],
        "keyValuePairs": [
            {
                "key": {"content": "Name", "confidence": 0.7},
                "value": {"content": "Taro", "confidence": 0.6},
            },
            {"key": {"content": "Empty"}},
        ],
        "lists": [
            {"items": [{"content": "first"}, {"content": "second"}]},
        ],
    }


@pytest.fixture(scope="function")
def isolated_env(tmp_path, monkeypatch):
    """Run from an empty directory with no DOCCHUNK_* variables set."""
    for name in ("CHUNK_SIZE", "CHUNK_OVERLAP", "PARAGRAPH_WINDOW", "WORD_WINDOW", "MAX_DOCUMENT_SIZE"):
        monkeypatch.delenv(f"DOCCHUNK_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
