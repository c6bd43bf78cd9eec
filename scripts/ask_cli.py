#!/usr/bin/env python3
"""Send a query to the relay from the command line and print the JSON it returns."""
import argparse
import json
import os
import sys
from typing import Any

import httpx

RELAY_URL = os.environ.get("RELAY_BASE_URL", f"http://127.0.0.1:{os.environ.get('PORT', '5000')}")


def _trace_request(method: str, url: str, body: dict | None, trace: bool) -> None:
    if not trace:
        return
    print(f"[REQUEST] {method} {url}", flush=True)
    if body is not None:
        print("[REQUEST BODY]", flush=True)
        print(json.dumps(body, indent=2), flush=True)
    print(flush=True)


def _trace_response(status: int, headers: dict, trace: bool) -> None:
    if not trace:
        return
    print(f"[RESPONSE] {status}", flush=True)
    for k, v in list(headers.items())[:10]:
        print(f"  {k}: {v}", flush=True)
    print("---", flush=True)


def _print_body(body: Any) -> None:
    if isinstance(body, dict) and set(body) == {"reply"}:
        print("Reply:", body["reply"], flush=True)
        return
    if isinstance(body, dict) and set(body) == {"plan"} and isinstance(body["plan"], list):
        print("Plan:", flush=True)
        for i, step in enumerate(body["plan"], 1):
            print(f"  [{i}] {json.dumps(step)}", flush=True)
        return
    print(json.dumps(body, indent=2), flush=True)


def main():
    parser = argparse.ArgumentParser(description="Send a query to the relay's POST /ask and print the result.")
    parser.add_argument("query", nargs="*", help="Query text (or pass as single argument)")
    parser.add_argument("--url", default=RELAY_URL, help="Relay base URL")
    parser.add_argument("--timeout", type=float, default=120.0, help="Seconds to wait for the relay")
    parser.add_argument("--trace", action="store_true", help="Print the URL, request body and response headers")
    args = parser.parse_args()
    query = " ".join(args.query).strip()
    if not query:
        print("Usage: python scripts/ask_cli.py \"Turn on the flashlight\"", file=sys.stderr)
        sys.exit(1)

    url = f"{args.url.rstrip('/')}/ask"
    body = {"query": query}
    _trace_request("POST", url, body, args.trace)
    try:
        r = httpx.post(url, json=body, timeout=args.timeout)
    except httpx.ConnectError:
        print(f"Cannot reach relay at {args.url}. Is it running?", file=sys.stderr)
        sys.exit(1)
    except httpx.HTTPError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    _trace_response(r.status_code, dict(r.headers), args.trace)
    try:
        resp_body = r.json()
    except ValueError:
        resp_body = r.text
    if r.status_code != 200:
        error = resp_body.get("error") if isinstance(resp_body, dict) else resp_body
        print(f"Error ({r.status_code}): {error}", file=sys.stderr)
        sys.exit(1)
    _print_body(resp_body)


if __name__ == "__main__":
    main()
