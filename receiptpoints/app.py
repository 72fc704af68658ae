"""HTTP API for processing receipts and looking up their points."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from flask import Flask, Response, request

from .models import parse_receipt
from .service import process_receipt
from .store import Store
from .validate import validate_receipt

logger = logging.getLogger(__name__)

_STORE_SIZE = 10000
_PORT = 8080
_WHITESPACE = (
    "\t\n\v\f\r \u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_HTML_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


def _trim_space(text: str) -> str:
    """Strip leading and trailing Unicode white space."""
    return text.strip(_WHITESPACE)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid character {name[0]!r} looking for beginning of value")


def _decode_body(raw: bytes) -> Any:
    """Decode the first JSON value in the body; anything after it is ignored."""
    text = raw.decode("utf-8", errors="replace").lstrip(" \t\r\n")
    if not text:
        raise ValueError("EOF")
    value, _ = json.JSONDecoder(parse_constant=_reject_constant).raw_decode(text)
    return value


def _respond_json(status: int, payload: Any) -> Response:
    body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    body = body.translate(_HTML_ESCAPES) + "\n"
    return Response(body, status=status, content_type="application/json")


def _respond_error(status: int, message: str) -> Response:
    return _respond_json(status, {"error": message})


def create_app(store: Store[int]) -> Flask:
    """Build the application, keeping computed points in ``store``."""
    app = Flask(__name__)

    @app.before_request
    def _log_request() -> None:
        environ = request.environ
        uri = (
            environ.get("REQUEST_URI")
            or environ.get("RAW_URI")
            or request.full_path.rstrip("?")
        )
        address = request.remote_addr or ""
        port = environ.get("REMOTE_PORT")
        if port:
            address = f"{address}:{port}"
        logger.info("%s %s %s", request.method, uri, address)

    @app.post("/receipts/process")
    def _process() -> Response:
        try:
            receipt = parse_receipt(_decode_body(request.get_data()))
        except ValueError as exc:
            return _respond_error(400, f"Invalid JSON: {exc}")

        receipt.sanitize()

        errors = validate_receipt(receipt)
        if errors:
            return _respond_json(400, [error.to_dict() for error in errors])

        try:
            receipt_id, points = process_receipt(receipt)
        except (ValueError, TypeError) as exc:
            logger.error("error processing receipt: %s", exc)
            return _respond_error(500, f"Failed to process receipt: {exc}")

        store.set(receipt_id, points)
        return _respond_json(200, {"id": receipt_id})

    @app.get("/receipts/<receipt_id>/points")
    def _points(receipt_id: str) -> Response:
        points = store.get(_trim_space(receipt_id))
        if points is None:
            return _respond_error(404, "ID not found")
        return _respond_json(200, {"points": points})

    return app


def main(argv: list[str] | None = None) -> int:
    """Serve the receipt API on port 8080."""
    parser = argparse.ArgumentParser(description="Receipt points HTTP server.")
    parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    app = create_app(Store(_STORE_SIZE))
    logger.info("Server starting on :%d...", _PORT)
    try:
        app.run(host="0.0.0.0", port=_PORT)
    except OSError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())