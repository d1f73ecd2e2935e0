"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Records one structured event per request: method, path, query params,
status code, duration and error reason. Events go to the module logger and,
when configured, to Axiom. Sensitive query parameters are masked.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 파라미터 패턴 — Query parameters to mask
_SENSITIVE_KEYS = re.compile(r"(password|secret|token|api_key|apikey)", re.IGNORECASE)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def _mask_params(params: dict[str, Any]) -> dict[str, Any]:
    """민감 파라미터 마스킹 — Mask sensitive query parameters."""
    return {k: "***" if _SENSITIVE_KEYS.search(k) else v for k, v in params.items()}


def _error_detail(body: bytes) -> str:
    """에러 응답 본문에서 사유 추출 — Extract the error reason from a response body."""
    try:
        detail: Any = json.loads(body).get("detail", body.decode("utf-8", errors="replace"))
    except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
        detail = body.decode("utf-8", errors="replace")
    text = detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    return text[:500]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 로깅하는 미들웨어.

    Middleware that logs every API request and ships the event to Axiom
    when AXIOM_API_TOKEN and AXIOM_DATASET are set.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
        }
        if request.query_params:
            # 반복 키는 값 목록으로 — repeated keys keep every value
            params: dict[str, Any] = {}
            for key in request.query_params.keys():
                values = request.query_params.getlist(key)
                params[key] = values if len(values) > 1 else values[0]
            event["query_params"] = _mask_params(params)

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답이면 본문을 읽어 사유를 남기고 다시 감싼다
            # Read error bodies for the reason, then re-wrap the consumed body
            if status_code >= 400:
                body = b""
                async for chunk in response.body_iterator:
                    body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(body)
                response = Response(
                    content=body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["status_code"] = status_code
            event["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            self._emit(event)

        return response

    def _emit(self, event: dict[str, Any]) -> None:
        level = logging.WARNING if event["status_code"] >= 400 else logging.INFO
        logger.log(
            level,
            "%s %s -> %s (%.2fms)",
            event["method"], event["path"], event["status_code"], event["duration_ms"],
            extra={"event": event},
        )
        if self._client is None:
            return
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure
            logger.warning("axiom ingest failed for %s %s", event["method"], event["path"], exc_info=True)
