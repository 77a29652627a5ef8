from __future__ import annotations

import json
from typing import Any, Dict

INVALID_INPUT_BODY = json.dumps({"error": "Invalid input."}).encode("utf-8")


class ValidationNormalizeMiddleware:
    """Rewrite FastAPI 422 validation responses into 400 ``{"error": "Invalid input."}``.

    The calculators report their own input problems as 400 with an ``error``
    key; this keeps form validation failures in the same shape.
    """

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        rewriting = False

        async def send_wrapper(message: Dict[str, Any]) -> None:
            nonlocal rewriting
            if message["type"] == "http.response.start" and message.get("status") == 422:
                rewriting = True
                headers = [
                    (key, value)
                    for key, value in message.get("headers", [])
                    if key.lower() not in {b"content-length", b"content-type"}
                ]
                headers.append((b"content-type", b"application/json"))
                headers.append((b"content-length", str(len(INVALID_INPUT_BODY)).encode("latin-1")))
                await send({"type": "http.response.start", "status": 400, "headers": headers})
                return

            if rewriting and message["type"] == "http.response.body":
                if not message.get("more_body"):
                    await send({"type": "http.response.body", "body": INVALID_INPUT_BODY})
                return

            await send(message)

        await self.app(scope, receive, send_wrapper)
