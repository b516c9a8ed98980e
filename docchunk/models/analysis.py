"""Models for layout-analysis results and the text extracted from them.

The field names follow the analysis service's JSON (camelCase on the wire,
snake_case in Python), so a saved response can be loaded with
``AnalyzeResult.model_validate(json.load(f))``.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _AnalysisModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class AnalyzedParagraph(_AnalysisModel):
    content: Optional[str] = None
    confidence: Optional[float] = None


class TableCell(_AnalysisModel):
    row_index: int = 0
    column_index: int = 0
    content: Optional[str] = None


class AnalyzedTable(_AnalysisModel):
    cells: List[TableCell] = Field(default_factory=list)
    confidence: Optional[float] = None

    def rows(self) -> List[List[TableCell]]:
        """Cells grouped by row index, each row ordered by column."""
        if not self.cells:
            return []
        max_row = max(cell.row_index for cell in self.cells)
        grouped = []
        for row in range(max_row + 1):
            row_cells = [cell for cell in self.cells if cell.row_index == row]
            grouped.append(sorted(row_cells, key=lambda cell: cell.column_index))
        return grouped


class DocumentField(_AnalysisModel):
    content: Optional[str] = None
    confidence: Optional[float] = None


class KeyValuePair(_AnalysisModel):
    key: Optional[DocumentField] = None
    value: Optional[DocumentField] = None


class ListItem(_AnalysisModel):
    content: Optional[str] = None


class AnalyzedList(_AnalysisModel):
    items: List[ListItem] = Field(default_factory=list)


class AnalyzeResult(_AnalysisModel):
    """Subset of a layout-analysis response used for text formatting."""

    content: Optional[str] = None
    pages: List[dict] = Field(default_factory=list)
    paragraphs: Optional[List[AnalyzedParagraph]] = None
    tables: List[AnalyzedTable] = Field(default_factory=list)
    key_value_pairs: List[KeyValuePair] = Field(default_factory=list)
    lists: List[AnalyzedList] = Field(default_factory=list)


class ExtractedText(BaseModel):
    """Formatted text of an analyzed document with summary figures."""

    content: str = Field(description="Marker-annotated document text")
    pages: int = Field(default=1, description="Number of analyzed pages")
    confidence: float = Field(default=0.0, description="Average positive confidence, 2 decimals")
    word_count: int = Field(default=0, description="Tokens counted while formatting")
    extracted_at: datetime = Field(default_factory=datetime.now, description="Time the text was formatted")
