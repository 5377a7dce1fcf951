from typing import List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from .config import load_settings
from .countries import all_countries, records_for_country, top_countries
from .errors import RankingError
from .history import format_delta, merge_history, snapshot_label
from .logging_utils import configure_logging
from .models import CompareResponse, HealthResponse, NormalizeResponse, Record, RecordView, SnapshotResponse
from .normalize import build_response, normalize_bytes
from .store import parse_snapshot

settings = load_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title="rank-snapshots",
    description="Ranking list normalization and snapshot comparison",
    version="0.1.0",
)


def _require_suffix(file: UploadFile, suffix: str) -> None:
    if not (file.filename or "").lower().endswith(suffix):
        raise HTTPException(status_code=422, detail=f"Only {suffix} files are supported")


async def _read_table(file: UploadFile) -> List[Record]:
    _require_suffix(file, ".csv")
    raw = await file.read()
    try:
        return parse_snapshot(raw.decode("utf-8-sig"))
    except UnicodeDecodeError:
        raise HTTPException(status_code=422, detail=f"{file.filename} is not valid UTF-8")
    except RankingError as exc:
        raise HTTPException(status_code=422, detail=f"{file.filename}: {exc}")


def _view(record: Record) -> RecordView:
    return RecordView(
        **record.model_dump(),
        points_delta_display=format_delta(record.points_delta),
        position_delta_display=format_delta(record.position_delta),
    )


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/normalize", response_model=NormalizeResponse)
async def normalize_ranking(file: UploadFile = File(...), separator_width: Optional[int] = Form(None)):
    _require_suffix(file, ".txt")
    width = separator_width if separator_width is not None else settings.separator_width
    if width < 1:
        raise HTTPException(status_code=422, detail="separator_width must be >= 1")

    raw = await file.read()
    try:
        doc = normalize_bytes(raw, separator_width=width)
    except RankingError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return build_response(doc, separator_width=width)


@app.post("/snapshot", response_model=SnapshotResponse)
async def snapshot_summary(
    file: UploadFile = File(...),
    top: Optional[int] = Form(None),
    country: Optional[str] = Form(None),
):
    records = await _read_table(file)
    selected = records_for_country(records, country) if country is not None else []
    return {
        "records": len(records),
        "countries": all_countries(records),
        "top_countries": top_countries(records, top if top is not None else settings.top_countries),
        "country": country,
        "country_records": [_view(record) for record in selected],
    }


@app.post("/compare", response_model=CompareResponse)
async def compare_snapshots(
    current: UploadFile = File(...),
    prior: UploadFile = File(...),
    label: Optional[str] = Form(None),
):
    current_records = await _read_table(current)
    prior_records = await _read_table(prior)
    label = label or snapshot_label(prior.filename or "prior")

    matched = merge_history(current_records, prior_records, label)
    return {
        "label": label,
        "matched": matched,
        "records": [_view(record) for record in current_records],
    }
