from typing import Awaitable, Callable

from fastapi import Request

from src.core.config.models import ModelSite, ServerConfig
from src.core.contracts.model_query import QueryResult
from src.inference.client import query_site

# Callable that sends caller text to one model site
ModelRunner = Callable[[ModelSite, str], Awaitable[QueryResult]]


def get_config(request: Request) -> ServerConfig:
    return request.app.state.config


def get_model_runner(request: Request) -> ModelRunner:
    config: ServerConfig = request.app.state.config
    transport = request.app.state.transport

    async def run(site: ModelSite, text: str) -> QueryResult:
        return await query_site(site, text, config, transport=transport)

    return run
