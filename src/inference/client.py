"""Call a hosted inference endpoint and turn every outcome into a QueryResult."""
from __future__ import annotations

import logging
import time
from typing import Any

import httpx

log = logging.getLogger("inference")

from src.core.config.models import ModelSite, ServerConfig
from src.core.contracts.model_query import Fallback, FallbackReason, QueryRequest, QueryResult, Success
from src.core.exceptions import UnexpectedResponseFormat

DEFAULT_MISSING_CREDENTIAL_NOTE = "HF_API_TOKEN not set - cannot query model."
UNEXPECTED_FORMAT_NOTE = "Model response in unexpected format."


def _preview(text: str, max_len: int = 100) -> str:
    text = str(text)
    return (text[:max_len] + "…") if len(text) > max_len else text


def extract_generated_text(data: Any) -> str:
    """Return data[0]["generated_text"]; raise UnexpectedResponseFormat for any other shape."""
    if not isinstance(data, list) or not data:
        raise UnexpectedResponseFormat(f"expected a non-empty list, got {type(data).__name__}")
    first = data[0]
    if not isinstance(first, dict):
        raise UnexpectedResponseFormat(f"expected an object, got {type(first).__name__}")
    text = first.get("generated_text")
    if not isinstance(text, str) or not text:
        raise UnexpectedResponseFormat("missing generated_text")
    return text


async def query(
    input_text: str,
    endpoint: str,
    credential: str | None,
    *,
    missing_credential_note: str = DEFAULT_MISSING_CREDENTIAL_NOTE,
    echo_input: bool = True,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> QueryResult:
    fallback_text = input_text if echo_input else ""
    if not credential:
        log.warning("✗ %s: no credential, skipping call", endpoint)
        return Fallback(
            output_text=fallback_text,
            note=missing_credential_note,
            reason=FallbackReason.MISSING_CREDENTIAL,
        )
    headers = {"Authorization": f"Bearer {credential}", "Content-Type": "application/json"}
    log.info("→ %s: %s", endpoint, _preview(input_text))
    start = time.perf_counter()
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True) as client:
            r = await client.post(endpoint, json={"inputs": input_text}, headers=headers)
        latency_ms = int((time.perf_counter() - start) * 1000)
        if not r.is_success:
            log.warning("← %s: HTTP %s (%s ms)", endpoint, r.status_code, latency_ms)
            return Fallback(
                output_text=fallback_text,
                note=f"Model request failed: {r.status_code}",
                reason=FallbackReason.UPSTREAM_STATUS,
                status_code=r.status_code,
            )
        text = extract_generated_text(r.json())
        log.info("← %s: %s (%s ms)", endpoint, _preview(text), latency_ms)
        return Success(output_text=text)
    except UnexpectedResponseFormat as e:
        log.warning("← %s: unexpected format (%s)", endpoint, e)
        return Fallback(
            output_text=fallback_text,
            note=UNEXPECTED_FORMAT_NOTE,
            reason=FallbackReason.UNEXPECTED_FORMAT,
        )
    except Exception as e:
        latency_ms = int((time.perf_counter() - start) * 1000)
        log.warning("← %s: failed %s (%s ms)", endpoint, e, latency_ms)
        return Fallback(
            output_text=fallback_text,
            note=f"Model request error: {e}",
            reason=FallbackReason.REQUEST_ERROR,
        )


async def query_site(
    site: ModelSite,
    input_text: str,
    config: ServerConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> QueryResult:
    req = QueryRequest(input_text=input_text, endpoint=site.url, credential=config.hf_api_token)
    return await query(
        req.input_text,
        req.endpoint,
        req.credential,
        missing_credential_note=site.missing_credential_note,
        echo_input=site.echo_input,
        timeout=config.request_timeout,
        transport=transport,
    )
