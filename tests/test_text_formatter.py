"""Tests for rendering layout-analysis results as marker-annotated text."""

import pytest
from docchunk.chunking import split_into_sections
from docchunk.models.analysis import AnalyzeResult, AnalyzedTable, TableCell
from docchunk.models.section import SectionType
from docchunk.text_formatter import (
    format_extracted_text,
    calculate_average_confidence,
    extract_text,
)

EXPECTED_TEXT = (
    "Title\n\n"
    "\n--- テーブル ---\nA\tB\n1\t2\n\n"
    "\n--- キー・値ペア ---\nName: Taro\n"
    "\n--- リスト ---\n• first\n• second"
)


class TestFormatExtractedText:

    def test_renders_all_blocks_in_order(self, analysis_payload):
        result = AnalyzeResult.model_validate(analysis_payload)
        content, word_count = format_extracted_text(result)
        assert content == EXPECTED_TEXT
        assert word_count == 9

    def test_rendered_text_splits_back_into_sections(self, analysis_payload):
        content, _ = format_extracted_text(AnalyzeResult.model_validate(analysis_payload))
        sections = split_into_sections(content)
        assert [s.type for s in sections] == [
            SectionType.TEXT,
            SectionType.TABLE,
            SectionType.KEYVALUE,
            SectionType.LIST,
        ]
        assert sections[1].content == "--- テーブル ---\nA\tB\n1\t2"

    def test_blank_table_rows_are_skipped(self):
        table = AnalyzedTable(
            cells=[
                TableCell(row_index=0, column_index=0, content="top"),
                TableCell(row_index=2, column_index=0, content="bottom"),
            ]
        )
        content, word_count = format_extracted_text(AnalyzeResult(tables=[table]))
        assert content == "--- テーブル ---\ntop\nbottom"
        assert word_count == 2

    def test_empty_result_renders_nothing(self):
        assert format_extracted_text(AnalyzeResult()) == ("", 0)


class TestConfidenceAndExtraction:

    def test_average_ignores_missing_confidences(self, analysis_payload):
        result = AnalyzeResult.model_validate(analysis_payload)
        assert calculate_average_confidence(result) == 0.75

    def test_no_confidences_average_to_zero(self):
        assert calculate_average_confidence(AnalyzeResult(content="x")) == 0.0

    def test_extract_text_reports_pages_and_counts(self, analysis_payload):
        extracted = extract_text(AnalyzeResult.model_validate(analysis_payload))
        assert extracted.content == EXPECTED_TEXT
        assert extracted.pages == 2
        assert extracted.word_count == 9
        assert extracted.confidence == 0.75

    def test_extract_text_defaults_to_one_page(self):
        extracted = extract_text(AnalyzeResult(content="raw", paragraphs=[]))
        assert extracted.pages == 1
        assert extracted.content == ""

    def test_extract_text_without_content_raises(self):
        with pytest.raises(ValueError, match="No content"):
            extract_text(AnalyzeResult())
