from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, BaseModel, Field


class HistoryEntry(BaseModel):
    label: str
    points: int
    position: int


class Record(BaseModel):
    name: str = Field(validation_alias=AliasChoices("Name", "Title", "name"))
    country: str = Field(default="", validation_alias=AliasChoices("Countries", "country"))
    points: int = Field(validation_alias=AliasChoices("Points", "points"))
    position: int = Field(validation_alias=AliasChoices("Position", "position"))
    history: List[HistoryEntry] = Field(default_factory=list)
    points_delta: Optional[int] = None
    position_delta: Optional[int] = None


class NormalizedCsv(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8")
    content_b64: str


class ReportSummary(BaseModel):
    rows: int = 0
    columns: int = 0
    repaired_names: int = 0
    injected_countries: int = 0
    deterministic: bool = True


class NormalizationReport(BaseModel):
    summary: ReportSummary
    normalizations: Dict[str, Any] = Field(default_factory=dict)


class NormalizeResponse(BaseModel):
    normalized_csv: NormalizedCsv
    report: NormalizationReport


class RecordView(BaseModel):
    name: str
    country: str
    points: int
    position: int
    history: List[HistoryEntry] = Field(default_factory=list)
    points_delta: Optional[int] = None
    position_delta: Optional[int] = None
    points_delta_display: str = "-"
    position_delta_display: str = "-"


class SnapshotResponse(BaseModel):
    records: int
    countries: List[str]
    top_countries: List[str]
    country: Optional[str] = None
    country_records: List[RecordView] = Field(default_factory=list)


class CompareResponse(BaseModel):
    label: str
    matched: int
    records: List[RecordView]


class HealthResponse(BaseModel):
    ok: bool = True
