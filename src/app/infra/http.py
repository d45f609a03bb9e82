"""Cliente HTTP assíncrono usado pelos clients REST de calendário.

Falhas transitórias (429, 5xx, timeout, conexão) viram HttpError com
`is_retryable=True`. Retentativa só acontece quando `max_retries > 0`; o
intervalo respeita `Retry-After` (throttling da Microsoft Graph) e cai para
backoff exponencial quando o header não vem.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `max_retries` é 0 por padrão: falhas são reportadas ao chamador, não
    repetidas.
    """

    timeout_seconds: float = 30.0
    max_retries: int = 0
    backoff_base_seconds: float = 2.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable
        self.retry_after = retry_after


class HttpClient:
    """Base para clients REST: GET/POST com retentativa opcional."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def get(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        return await self._request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self._request("POST", url, json=json, headers=headers)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        attempt = 0
        while True:
            try:
                return await self._send_once(method, url, json, merged_headers)
            except HttpError as exc:
                if not exc.is_retryable or attempt >= self._config.max_retries:
                    raise
                await self._wait_before_retry(attempt, exc)
            attempt += 1

    async def _send_once(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None,
        headers: dict[str, str],
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
        except (httpx.TimeoutException, httpx.ConnectError) as exc:
            raise HttpError("http_connection_error", is_retryable=True) from exc

        if response.status_code == 429 or response.status_code >= 500:
            raise HttpError(
                "http_retryable_status",
                status_code=response.status_code,
                is_retryable=True,
                retry_after=parse_retry_after(response.headers.get("Retry-After")),
            )
        return response

    async def _wait_before_retry(self, attempt: int, exc: HttpError) -> None:
        if exc.retry_after is not None:
            delay = min(exc.retry_after, self._config.backoff_max_seconds)
        else:
            delay = min(
                (2**attempt) * self._config.backoff_base_seconds,
                self._config.backoff_max_seconds,
            )
        logger.info(
            "http_retry_scheduled",
            extra={
                "attempt": attempt + 1,
                "status_code": exc.status_code,
                "delay_seconds": delay,
            },
        )
        await asyncio.sleep(delay)


def parse_retry_after(value: str | None) -> float | None:
    """Converte `Retry-After` em segundos (somente a forma numérica)."""
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return seconds if seconds >= 0 else None
