from pydantic import BaseModel


class WritingResponse(BaseModel):
    corrected: str
    note: str | None = None


class TutorResponse(BaseModel):
    answer: str
    note: str | None = None
