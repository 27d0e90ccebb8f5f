from src.core.contracts.model_query import QueryRequest, QueryResult, Success, Fallback, FallbackReason
from src.core.contracts.learning import WritingResponse, TutorResponse

__all__ = [
    "QueryRequest",
    "QueryResult",
    "Success",
    "Fallback",
    "FallbackReason",
    "WritingResponse",
    "TutorResponse",
]
