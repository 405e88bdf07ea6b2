"""FastAPI application for the ESG dashboard -- evaluation and validation endpoints."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncIterator, Optional

from fastapi import Body, Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from esg_dashboard.config.settings import Settings
from esg_dashboard.engine.audit_view import build_audit_overview
from esg_dashboard.engine.dashboard import EvaluationCache, evaluate_dashboard
from esg_dashboard.errors import DataUnavailableError, NotFoundError, ValidationError
from esg_dashboard.indicators.validation import validate_metric_payload
from esg_dashboard.models.audit import AuditSummary, normalize_audit_summary, normalize_findings
from esg_dashboard.models.snapshot import MetricSnapshot, normalize_history
from esg_dashboard.orchestrator.dashboard_loader import DashboardLoader
from esg_dashboard.providers.base import MetricsProvider
from esg_dashboard.providers.esg_api import EsgApiProvider

settings = Settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="ESG Dashboard API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Shared across requests; loaders invalidate entries when they reload data.
evaluation_cache = EvaluationCache(maxsize=settings.evaluation_cache_size)


async def get_provider() -> AsyncIterator[MetricsProvider]:
    provider = EsgApiProvider(settings=settings)
    try:
        yield provider
    finally:
        await provider.aclose()


class EvaluateRequest(BaseModel):
    company_id: int
    period: str
    environmental: dict[str, Any] = {}
    social: dict[str, Any] = {}
    governance: dict[str, Any] = {}
    findings: list[dict[str, Any]] = []
    history: list[dict[str, Any]] = []


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"error": exc.message, "field": exc.field})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"error": exc.message})


@app.exception_handler(DataUnavailableError)
async def data_unavailable_handler(request: Request, exc: DataUnavailableError):
    logger.warning(f"Upstream data unavailable for {request.url.path}: {exc.message}")
    return JSONResponse(status_code=502, content={"error": exc.message})


@app.post("/api/dashboard/evaluate")
async def evaluate(body: EvaluateRequest):
    """Evaluate a caller-supplied snapshot, findings and history."""
    snapshot = MetricSnapshot.from_api(
        body.model_dump(include={"environmental", "social", "governance"}),
        company_id=body.company_id,
        period=body.period,
    )
    view = evaluate_dashboard(
        snapshot,
        normalize_findings(body.findings),
        normalize_history(body.history),
    )
    return jsonable_encoder(view)


async def _fetch_audit_summary(
    provider: MetricsProvider, company_id: int, period: str
) -> AuditSummary:
    try:
        return normalize_audit_summary(await provider.fetch_audit_summary(company_id, period))
    except DataUnavailableError as e:
        # Without audit data the dashboard falls back to the static rules.
        logger.warning(f"Audit summary unavailable for company {company_id} / {period}: {e.message}")
        return AuditSummary.empty()


@app.get("/api/companies/{company_id}/dashboard")
async def company_dashboard(
    company_id: int,
    period: str,
    provider: MetricsProvider = Depends(get_provider),
):
    """Load metrics, history and audit findings, then evaluate the dashboard."""
    loader = DashboardLoader(provider, cache=evaluation_cache)
    view, summary = await asyncio.gather(
        loader.load(company_id, period),
        _fetch_audit_summary(provider, company_id, period),
    )
    if view is None:
        raise loader.exception or DataUnavailableError(loader.error or "No se pudieron cargar los datos")
    view = loader.set_findings(summary.findings)
    return jsonable_encoder(view)


@app.get("/api/companies/{company_id}/audit")
async def company_audit(
    company_id: int,
    period: str,
    provider: MetricsProvider = Depends(get_provider),
):
    """Audit badges and stats for one company and period."""
    summary = normalize_audit_summary(await provider.fetch_audit_summary(company_id, period))
    return {
        "overview": jsonable_encoder(build_audit_overview(summary)),
        "indicator_severity": jsonable_encoder(dict(summary.indicator_severity)),
        "findings": jsonable_encoder(list(summary.findings)),
    }


@app.post("/api/metrics/{pillar}/validate")
async def validate_metrics(pillar: str, payload: Optional[dict[str, Any]] = Body(None)):
    """Validate and coerce a metric form payload for one pillar."""
    return {"data": validate_metric_payload(pillar, payload)}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("esg_dashboard.main:app", host="0.0.0.0", port=8000, reload=False)
