"""Unit tests for rendering query results per model site."""

from src.core.config.models import default_tutor_site, default_writing_site
from src.core.contracts.model_query import Fallback, FallbackReason, Success
from src.web.render import render_result


def test_success_uses_site_field():
    assert render_result(Success(output_text="我喜欢中文"), default_writing_site()) == {"corrected": "我喜欢中文"}
    assert render_result(Success(output_text="拼音是..."), default_tutor_site()) == {"answer": "拼音是..."}


def test_writing_fallback_keeps_note_separate():
    result = Fallback(output_text="你好", note="Model request failed: 503", reason=FallbackReason.UPSTREAM_STATUS, status_code=503)

    assert render_result(result, default_writing_site()) == {"corrected": "你好", "note": "Model request failed: 503"}


def test_tutor_fallback_shows_note_as_answer():
    result = Fallback(note="Model response in unexpected format.", reason=FallbackReason.UNEXPECTED_FORMAT)

    assert render_result(result, default_tutor_site()) == {"answer": "Model response in unexpected format."}
