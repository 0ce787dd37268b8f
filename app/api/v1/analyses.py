from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from app.core.history_store import AnalysisRepository, HistoryStoreError, get_history_store
from app.core.rate_limit import rate_limit
from app.core.security import check_api_key
from app.schemas.analysis import AnalysisRecord, AnalysisResponse, AnalysisSummary, AnalyzeRequest, SkillToggleRequest
from app.services.analysis_service import (
    UnknownSkillError,
    analyze,
    build_analysis_response,
    summarize_history,
    toggle_skill_confidence,
)
from app.services.report import render_report

router = APIRouter()


def _auth(x_api_key: str | None = Header(default=None, alias="X-API-Key")):
    check_api_key(x_api_key)


def _raise_store_error(exc: HistoryStoreError) -> None:
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Analysis history is unavailable.",
    ) from exc


def _load_or_404(store: AnalysisRepository, analysis_id: str) -> AnalysisRecord:
    try:
        record = store.get_by_id(analysis_id)
    except HistoryStoreError as exc:
        _raise_store_error(exc)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Analysis not found.")
    return record


@router.post("/analyses", response_model=AnalysisResponse, status_code=status.HTTP_201_CREATED)
@rate_limit()
async def create_analysis(
    request: Request,
    payload: AnalyzeRequest,
    store: AnalysisRepository = Depends(get_history_store),
    _: None = Depends(_auth),
):
    if not payload.jd_text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please paste a job description.")

    record = analyze(payload.company.strip(), payload.role.strip(), payload.jd_text)
    try:
        store.save_or_update(record)
    except HistoryStoreError as exc:
        _raise_store_error(exc)
    return build_analysis_response(record)


@router.get("/analyses", response_model=list[AnalysisSummary])
async def list_analyses(
    store: AnalysisRepository = Depends(get_history_store),
    _: None = Depends(_auth),
):
    try:
        records = store.load_all()
    except HistoryStoreError as exc:
        _raise_store_error(exc)
    return summarize_history(records)


@router.get("/analyses/{analysis_id}", response_model=AnalysisResponse)
async def get_analysis(
    analysis_id: str,
    store: AnalysisRepository = Depends(get_history_store),
    _: None = Depends(_auth),
):
    return build_analysis_response(_load_or_404(store, analysis_id))


@router.post("/analyses/{analysis_id}/skills/toggle", response_model=AnalysisResponse)
@rate_limit()
async def toggle_skill(
    request: Request,
    analysis_id: str,
    payload: SkillToggleRequest,
    store: AnalysisRepository = Depends(get_history_store),
    _: None = Depends(_auth),
):
    record = _load_or_404(store, analysis_id)
    try:
        updated = toggle_skill_confidence(record, payload.skill)
    except UnknownSkillError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    try:
        store.save_or_update(updated)
    except HistoryStoreError as exc:
        _raise_store_error(exc)
    return build_analysis_response(updated)


@router.get("/analyses/{analysis_id}/report", response_class=PlainTextResponse)
async def get_analysis_report(
    analysis_id: str,
    store: AnalysisRepository = Depends(get_history_store),
    _: None = Depends(_auth),
):
    return PlainTextResponse(render_report(_load_or_404(store, analysis_id)))
