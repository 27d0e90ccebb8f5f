"""Unit tests for the ask CLI script."""

import importlib.util
import json
import sys
from pathlib import Path

import httpx

SCRIPT = Path(__file__).resolve().parent.parent.parent / "scripts" / "ask_cli.py"


def load_module(module_name: str, file_path: Path):
    """Dynamically load a module from file path."""
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


ask_cli = load_module("ask_cli", SCRIPT)


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_writing_posts_text_field(capsys):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"corrected": "你好", "note": "HF_API_TOKEN not set - returning original text."})

    code = ask_cli.main(["writing", "你好", "--url", "http://server.test"], client=_client(handler))

    assert code == 0
    assert str(seen[0].url) == "http://server.test/writing"
    assert json.loads(seen[0].content) == {"text": "你好"}
    out, err = capsys.readouterr()
    assert out.strip() == "你好"
    assert "returning original text" in err


def test_tutor_joins_words_into_question(capsys):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"answer": "四个"})

    code = ask_cli.main(["tutor", "how", "many", "tones?"], client=_client(handler))

    assert code == 0
    assert seen[0].url.path == "/tutor"
    assert json.loads(seen[0].content) == {"question": "how many tones?"}
    assert capsys.readouterr().out.strip() == "四个"


def test_against_app(make_client, no_credential_config, capsys):
    client = make_client(no_credential_config)

    code = ask_cli.main(["tutor", "你好", "--url", "http://testserver"], client=client)

    assert code == 0
    assert capsys.readouterr().out.strip() == "HF_API_TOKEN not set - cannot query model."


def test_unreachable_server(capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused")

    code = ask_cli.main(["writing", "你好"], client=_client(handler))

    assert code == 1
    assert "Cannot reach server" in capsys.readouterr().err


def test_error_status(capsys):
    code = ask_cli.main(["writing", "你好"], client=_client(lambda request: httpx.Response(404, text="Not found")))

    assert code == 1


def test_trace_prints_request_and_response(capsys):
    code = ask_cli.main(
        ["writing", "你好", "--trace"],
        client=_client(lambda request: httpx.Response(200, json={"corrected": "你好"})),
    )

    assert code == 0
    out = capsys.readouterr().out
    assert "[REQUEST] POST" in out
    assert "[RESPONSE] 200" in out


def test_empty_text_prints_usage(capsys):
    assert ask_cli.main(["writing"]) == 1
    assert "Usage" in capsys.readouterr().err
