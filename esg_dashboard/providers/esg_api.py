"""ESG API provider -- reads metrics, history and audits over HTTP."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from esg_dashboard.config.settings import Settings
from esg_dashboard.errors import DataUnavailableError, NotFoundError

from .base import MetricsProvider

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Error inesperado"


def _error_message(response: httpx.Response) -> str:
    """Server-supplied message from ``message`` or ``error``, else the reason phrase."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return str(message)
    return response.reason_phrase or DEFAULT_ERROR_MESSAGE


class EsgApiProvider(MetricsProvider):
    """Async client for the ESG reporting API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings or Settings()
        if client is None:
            headers = {"Accept": "application/json"}
            if self._settings.esg_api_token:
                headers["Authorization"] = f"Bearer {self._settings.esg_api_token}"
            client = httpx.AsyncClient(
                base_url=self._settings.esg_api_base_url,
                timeout=self._settings.request_timeout,
                headers=headers,
            )
        self._client = client

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            resp = await self._client.request(method, path, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            message = _error_message(e.response)
            if status == 404:
                raise NotFoundError(message) from e
            logger.error(f"ESG API {method} {path} failed with {status}: {message}")
            raise DataUnavailableError(message, status_code=status) from e
        except httpx.RequestError as e:
            logger.error(f"ESG API {method} {path} unreachable: {e}")
            raise DataUnavailableError(str(e) or DEFAULT_ERROR_MESSAGE) from e

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"ESG API {method} {path} returned invalid JSON")
            raise DataUnavailableError("Respuesta inválida del servidor") from e

    async def fetch_company_metrics(self, company_id: int, period: str) -> dict[str, Any]:
        data = await self._request("GET", f"/metrics/company/{company_id}/{period}")
        if not isinstance(data, dict):
            raise DataUnavailableError("Respuesta inválida del servidor")
        return data

    async def fetch_history(self, company_id: int) -> list[dict[str, Any]]:
        try:
            data = await self._request("GET", f"/indicadores/historico/{company_id}")
        except NotFoundError:
            logger.info(f"No history yet for company {company_id}")
            return []
        if not isinstance(data, list):
            logger.warning(f"History for company {company_id} is not a list; treating as empty")
            return []
        return data

    async def fetch_audit_summary(self, company_id: int, period: str) -> dict[str, Any]:
        data = await self._request(
            "GET", "/audit/summary", params={"companyId": company_id, "period": period}
        )
        return data if isinstance(data, dict) else {}

    async def run_audit(self, company_id: int, period: Optional[str] = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"companyId": company_id}
        if period:
            payload["period"] = period
        data = await self._request("POST", "/audit/run", json=payload)
        return data if isinstance(data, dict) else {}

    async def health_check(self) -> bool:
        try:
            resp = await self._client.get("/health")
            return resp.status_code == 200
        except httpx.HTTPError as e:
            logger.error(f"ESG API health check failed: {e}")
            return False

    async def aclose(self) -> None:
        await self._client.aclose()
