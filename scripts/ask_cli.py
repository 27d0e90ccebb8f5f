#!/usr/bin/env python3
"""Send a writing sample or tutor question to the learning server and print the reply."""
import argparse
import json
import os
import sys
from typing import Any

import httpx

SERVER_URL = os.environ.get("LEARNING_SERVER_URL", f"http://127.0.0.1:{os.environ.get('PORT', '3000')}")

# mode -> (route, request field, reply field)
MODES = {
    "writing": ("/writing", "text", "corrected"),
    "tutor": ("/tutor", "question", "answer"),
}


def _trace_request(method: str, url: str, body: dict | None, trace: bool) -> None:
    if not trace:
        return
    print(f"[REQUEST] {method} {url}", flush=True)
    if body is not None:
        print("[REQUEST BODY]", flush=True)
        print(json.dumps(body, indent=2, ensure_ascii=False), flush=True)
    print(flush=True)


def _trace_response(status: int, body: Any, trace: bool, max_body_len: int = 2000) -> None:
    if not trace:
        return
    print(f"[RESPONSE] {status}", flush=True)
    if body is not None:
        print("[RESPONSE BODY]", flush=True)
        raw = json.dumps(body, indent=2, ensure_ascii=False) if isinstance(body, dict) else str(body)
        if len(raw) > max_body_len:
            raw = raw[:max_body_len] + "\n… (truncated)"
        print(raw, flush=True)
    print("---", flush=True)


def ask(
    mode: str,
    text: str,
    base_url: str = SERVER_URL,
    trace: bool = False,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """POST `text` to the route for `mode` and return the JSON reply. Raises httpx errors on failure."""
    route, field, _ = MODES[mode]
    url = f"{base_url.rstrip('/')}{route}"
    body = {field: text}
    _trace_request("POST", url, body, trace)
    if client is None:
        r = httpx.post(url, json=body, timeout=120)
    else:
        r = client.post(url, json=body)
    try:
        resp_body = r.json()
    except ValueError:
        resp_body = r.text
    _trace_response(r.status_code, resp_body, trace)
    r.raise_for_status()
    return resp_body if isinstance(resp_body, dict) else {}


def main(argv: list[str] | None = None, client: httpx.Client | None = None) -> int:
    parser = argparse.ArgumentParser(description="Ask the learning server to correct writing or answer a question.")
    parser.add_argument("mode", choices=sorted(MODES), help="writing: correct a text sample; tutor: ask a question")
    parser.add_argument("text", nargs="*", help="Text to send")
    parser.add_argument("--url", default=SERVER_URL, help="Server base URL")
    parser.add_argument("--trace", action="store_true", help="Print the request and response")
    args = parser.parse_args(argv)
    text = " ".join(args.text).strip()
    if not text:
        print("Usage: python scripts/ask_cli.py {writing|tutor} \"你好\"", file=sys.stderr)
        return 1

    reply_field = MODES[args.mode][2]
    try:
        data = ask(args.mode, text, base_url=args.url, trace=args.trace, client=client)
    except httpx.ConnectError:
        print(f"Cannot reach server at {args.url}. Is it running?", file=sys.stderr)
        return 1
    except httpx.HTTPError as e:
        print(e, file=sys.stderr)
        return 1

    print(data.get(reply_field, ""), flush=True)
    if data.get("note"):
        print("Note:", data["note"], file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
