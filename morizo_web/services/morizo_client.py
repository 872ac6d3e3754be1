from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from morizo_web.config import Settings
from morizo_web.core.models import UsageResponse
from morizo_web.telemetry import LogCategory, get_logger, mask_token
from .exceptions import UpstreamError

logger = get_logger(LogCategory.API)


class MorizoAIClient:
    """
    Async client for the Morizo AI backend. Every call is forwarded with the
    caller's credentials; any transport failure or non-2xx status raises
    UpstreamError.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.morizo_ai_url.rstrip("/")
        self.timeout = settings.upstream_timeout
        self._transport = transport

    async def request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        json: Any = None,
        authorization: Optional[str] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        headers = {"Content-Type": "application/json"}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        elif authorization is not None:
            headers["Authorization"] = authorization

        logger.info("-> Morizo AI %s %s token=%s", method, path, mask_token(token))
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.request(method, url, headers=headers, json=json)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Morizo AI request failed: {e}") from e

        if r.is_error:
            logger.error("Morizo AI error: %d %s %s", r.status_code, method, path)
            raise UpstreamError(f"Morizo AI error: {r.status_code}", status_code=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError(f"Morizo AI returned invalid JSON: {e}", status_code=r.status_code) from e
        if not isinstance(data, dict):
            raise UpstreamError(
                f"Morizo AI returned {type(data).__name__}, expected a JSON object",
                status_code=r.status_code,
            )
        return data

    async def get_usage(self, token: str) -> UsageResponse:
        data = await self.request("GET", "/api/subscription/usage", token=token)
        try:
            return UsageResponse.model_validate(data)
        except ValidationError as e:
            raise UpstreamError(f"Morizo AI returned malformed usage: {e}") from e

    async def delete_menu_history(self, token: str, history_id: str) -> Dict[str, Any]:
        return await self.request("DELETE", f"/api/menu/history/{quote(history_id, safe='')}", token=token)

    async def forward_revenuecat_webhook(self, payload: Any, authorization: Optional[str]) -> Dict[str, Any]:
        # The upstream verifies RevenueCat's shared secret; pass it through untouched.
        return await self.request(
            "POST", "/api/revenuecat/webhook", json=payload, authorization=authorization or ""
        )
