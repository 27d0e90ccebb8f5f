from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class FallbackReason(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    UPSTREAM_STATUS = "upstream_status"
    UNEXPECTED_FORMAT = "unexpected_format"
    REQUEST_ERROR = "request_error"


class QueryRequest(BaseModel):
    input_text: str = ""
    endpoint: str
    credential: str | None = None


class Success(BaseModel):
    kind: Literal["success"] = "success"
    output_text: str


class Fallback(BaseModel):
    kind: Literal["fallback"] = "fallback"
    output_text: str = ""  # echo of input or empty
    note: str
    reason: FallbackReason
    status_code: int | None = None  # only for upstream_status


QueryResult = Annotated[Union[Success, Fallback], Field(discriminator="kind")]
