from __future__ import annotations

from pydantic import BaseModel, Field

HF_INFERENCE_BASE = "https://api-inference.huggingface.co/models"


class ModelSite(BaseModel):
    name: str
    url: str
    response_field: str  # key of the JSON reply: "corrected" | "answer"
    missing_credential_note: str
    echo_input: bool = True  # fallback output repeats the caller's text
    note_in_output: bool = False  # fallback note rendered as the output field itself


def default_writing_site() -> ModelSite:
    return ModelSite(
        name="writing",
        url=f"{HF_INFERENCE_BASE}/uer/gpt2-chinese-cluecorpussmall",
        response_field="corrected",
        missing_credential_note="HF_API_TOKEN not set - returning original text.",
        echo_input=True,
        note_in_output=False,
    )


def default_tutor_site() -> ModelSite:
    return ModelSite(
        name="tutor",
        url=f"{HF_INFERENCE_BASE}/Qwen/Qwen1.5-0.5B-Chat",
        response_field="answer",
        missing_credential_note="HF_API_TOKEN not set - cannot query model.",
        echo_input=False,
        note_in_output=True,
    )


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    hf_api_token: str | None = None
    request_timeout: float = Field(default=30.0, gt=0)
    writing: ModelSite = Field(default_factory=default_writing_site)
    tutor: ModelSite = Field(default_factory=default_tutor_site)

    @property
    def has_credential(self) -> bool:
        return bool(self.hf_api_token)

    def get_site(self, name: str) -> ModelSite:
        for site in (self.writing, self.tutor):
            if site.name == name:
                return site
        raise ValueError(f"Model site {name} not in config")
