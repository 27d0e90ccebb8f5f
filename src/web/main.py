"""Learning site FastAPI app. Run with: python -m src.web.main [--port 3000]"""
from __future__ import annotations

import argparse
import logging

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(message)s", datefmt="%H:%M:%S")
log = logging.getLogger("web")

from src.core.config.loader import load_server_config
from src.core.config.models import ServerConfig
from src.core.contracts.learning import TutorResponse, WritingResponse
from src.web.deps import ModelRunner, get_config, get_model_runner
from src.web.pages import PLACEHOLDERS, TUTOR_FORM, WRITING_FORM, index_page
from src.web.render import read_text_field, render_result

PLAIN_TEXT = "text/plain; charset=utf-8"


def _placeholder_route(body: str):
    def placeholder():
        return PlainTextResponse(body, media_type=PLAIN_TEXT)

    return placeholder


def create_app(config: ServerConfig, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """Build the app around an explicit config. `transport` replaces the network for outbound model calls."""
    app = FastAPI(title="Chinese Learning")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.config = config
    app.state.transport = transport

    @app.exception_handler(StarletteHTTPException)
    async def not_found(request: Request, exc: StarletteHTTPException):
        # Unknown paths and wrong methods on known paths both read as "not found"
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not found", status_code=404)
        return await http_exception_handler(request, exc)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def index():
        return index_page()

    for path, body in PLACEHOLDERS.items():
        app.add_api_route(path, _placeholder_route(body), methods=["GET"], response_class=PlainTextResponse)

    @app.get("/writing", response_class=HTMLResponse)
    def writing_form():
        return WRITING_FORM

    @app.get("/tutor", response_class=HTMLResponse)
    def tutor_form():
        return TUTOR_FORM

    @app.post("/writing", response_model=WritingResponse, response_model_exclude_none=True)
    async def writing(
        request: Request,
        cfg: ServerConfig = Depends(get_config),
        run_model: ModelRunner = Depends(get_model_runner),
    ):
        site = cfg.get_site("writing")
        text = await read_text_field(request, "text")
        log.info("RECV /writing: %s", (text[:120] + "…") if len(text) > 120 else text)
        result = await run_model(site, text)
        return WritingResponse(**render_result(result, site))

    @app.post("/tutor", response_model=TutorResponse, response_model_exclude_none=True)
    async def tutor(
        request: Request,
        cfg: ServerConfig = Depends(get_config),
        run_model: ModelRunner = Depends(get_model_runner),
    ):
        site = cfg.get_site("tutor")
        question = await read_text_field(request, "question")
        log.info("RECV /tutor: %s", (question[:120] + "…") if len(question) > 120 else question)
        result = await run_model(site, question)
        return TutorResponse(**render_result(result, site))

    return app


if __name__ == "__main__":
    import uvicorn
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args()
    config = load_server_config()
    host = args.host or config.host
    port = args.port or config.port
    if not config.has_credential:
        log.warning("HF_API_TOKEN not set; model routes will return fallback notes")
    log.info("Server running on port %s", port)
    uvicorn.run(create_app(config), host=host, port=port)
