"""Read caller text from a request body and render a QueryResult for a model site."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from starlette.datastructures import QueryParams
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config.models import ModelSite
from src.core.contracts.model_query import QueryResult, Success

log = logging.getLogger("web")


async def read_text_field(request: Request, field: str) -> str:
    """Return `field` from a JSON or form body. Anything unreadable becomes ""."""
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type == "application/json":
        try:
            data = await request.json()
        except ValueError as e:
            log.info("Unreadable JSON body: %s", e)
            return ""
        value = data.get(field) if isinstance(data, dict) else None
    elif media_type == "multipart/form-data":
        try:
            form = await request.form()
        except (ValueError, StarletteHTTPException) as e:
            log.info("Unreadable form body: %s", e)
            return ""
        value = form.get(field)
    else:
        # Any other body, whatever its declared type, reads as urlencoded pairs
        body = await request.body()
        value = QueryParams(body.decode("utf-8", errors="replace")).get(field)
    return value if isinstance(value, str) else ""


def render_result(result: QueryResult, site: ModelSite) -> dict[str, Any]:
    if isinstance(result, Success):
        return {site.response_field: result.output_text}
    if site.note_in_output:
        return {site.response_field: result.note}
    return {site.response_field: result.output_text, "note": result.note}
