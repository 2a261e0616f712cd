"""Reference dispatch collaborator for generated bindings.

Mix it in ahead of the generated BotMethods:

    class Bot(HttpDispatcher, BotMethods):
        pass

    with Bot("https://api.telegram.org/bot<token>") as bot:
        message, err = bot.sendMessage(chat_id, "hello")

Calls are POSTed as form data to <base_url>/<method>. The API wraps results
as {"ok": true, "result": ...}; request() returns the raw JSON of "result".
No retries, no auth beyond whatever the base URL carries. The only public
attributes are base_url and client, so generated bindings (close, logOut,
...) are never shadowed; the httpx client is released by the with block.
"""

from __future__ import annotations

import json

import httpx


class DispatchError(Exception):
    """The API rejected a call or could not be reached."""


class HttpDispatcher:
    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.Client(timeout=timeout)

    def request(self, method: str, params: dict[str, str], data: bytes | None = None) -> bytes:
        """Send one API call and return the raw result JSON."""
        url = f"{self.base_url}/{method}"
        try:
            if data is None:
                response = self.client.post(url, data=params)
            else:
                response = self.client.post(url, params=params, content=data)
        except httpx.HTTPError as err:
            raise DispatchError(f"{method}: {err}") from err

        try:
            envelope = response.json()
        except ValueError as err:
            raise DispatchError(
                f"{method}: unreadable response (HTTP {response.status_code})"
            ) from err

        if not isinstance(envelope, dict) or not envelope.get("ok"):
            description = envelope.get("description", "") if isinstance(envelope, dict) else ""
            raise DispatchError(
                f"{method}: HTTP {response.status_code} {description}".rstrip()
            )
        return json.dumps(envelope.get("result")).encode()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.client.close()
