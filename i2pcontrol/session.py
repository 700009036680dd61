from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable, Dict, Optional, Set

import requests
from loguru import logger

from i2pcontrol.config import I2PCONTROL_TIMEOUT, I2PCONTROL_URL
from i2pcontrol.errors import AuthenticationError, RpcParseError
from i2pcontrol.protocol import (
    API_VERSION,
    METHOD_AUTHENTICATE,
    PARAM_API,
    PARAM_PASSWORD,
    PARAM_TOKEN,
    build_envelope,
    describe_error,
)
from i2pcontrol.utils.http import post_rpc

Result = Dict[str, Any]
Handler = Callable[[Result, "Session"], Any]

_REDACTED = "***"


def parse_result(body: str) -> Result:
    """Extract the `result` object from a response body."""
    try:
        out = json.loads(body)
    except ValueError as e:
        raise RpcParseError(f"Invalid JSON in I2PControl response: {e}", body) from e
    result = out.get("result") if isinstance(out, dict) else None
    if not isinstance(result, dict):
        raise RpcParseError("No 'result' object in I2PControl response", body)
    return result


def validate_authentication(result: Result) -> str:
    """
    Strict check of an Authenticate result. Returns the token.
    Session.start only runs this when asked to (validate=True).
    """
    if "error" in result:
        raise AuthenticationError(
            f"Authentication rejected: {describe_error(result['error'])}", result
        )
    token = result.get(PARAM_TOKEN)
    if not isinstance(token, str) or not token:
        raise AuthenticationError("Authentication returned no token", result)
    return token


def _redact(params: Dict[str, Any]) -> Dict[str, Any]:
    return {
        k: (_REDACTED if k in (PARAM_PASSWORD, PARAM_TOKEN) else v)
        for k, v in params.items()
    }


class Session:
    """
    One I2PControl endpoint and its authentication token.

    Requests are fire-and-forget: each one runs as a task on the running asyncio
    loop and its handler is called on that loop once a 200 response with a body
    arrives. Overlapping requests are not serialized.
    """

    def __init__(self, password: str, url: str | None = None, timeout: float | None = None):
        self.token = ""
        self.ready = False
        self.error = False
        self._password = password
        self.url = url or I2PCONTROL_URL
        self.timeout = I2PCONTROL_TIMEOUT if timeout is None else timeout
        self._pending: Set[asyncio.Task] = set()

    @property
    def password(self) -> str:
        return self._password

    def request(self, method: str, params: Dict[str, Any], handler: Handler) -> Awaitable[Optional[Result]]:
        """
        Send `method` with `params`. The cached token is written into `params`
        (the caller's dict) before sending.

        Returns an awaitable resolving to the result, or None when the response
        was dropped. Cancelling it does not abort the request.
        """
        if not method:
            raise ValueError("method must be a non-empty string")
        if self.token != "":
            params[PARAM_TOKEN] = self.token

        envelope = build_envelope(method, params)
        logger.debug(f"I2PControl -> {method} {_redact(params)}")

        task = asyncio.get_running_loop().create_task(self._send(envelope, handler))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return asyncio.shield(task)

    async def _send(self, envelope: Dict[str, Any], handler: Handler) -> Optional[Result]:
        method = envelope["method"]
        try:
            status, body = await asyncio.to_thread(post_rpc, self.url, envelope, self.timeout)
        except requests.RequestException as e:
            logger.warning(f"I2PControl {method} failed: {e}")
            return None

        if status != 200 or not body:
            logger.debug(f"I2PControl {method} dropped (HTTP {status}, {len(body or '')} bytes)")
            return None

        result = parse_result(body)
        if "error" in result:
            self.error = True
            logger.warning(f"I2PControl {method} error: {describe_error(result['error'])}")

        handler(result, self)
        return result

    def start(self, on_ready: Callable[[], Any], validate: bool = False) -> Awaitable[Optional[Result]]:
        """
        Authenticate, store the token and call `on_ready()`.

        By default any Authenticate response counts as success, even one carrying
        an error or no token. With validate=True a rejected login raises
        AuthenticationError from the returned awaitable and the session stays
        unauthenticated.
        """

        def handle_authenticate(result: Result, session: Session) -> None:
            if validate:
                validate_authentication(result)
            self.token = result.get(PARAM_TOKEN) or ""
            self.ready = True
            logger.info(f"I2PControl session ready (token={'yes' if self.token else 'no'})")
            on_ready()

        return self.request(
            METHOD_AUTHENTICATE,
            {PARAM_API: API_VERSION, PARAM_PASSWORD: self.password},
            handle_authenticate,
        )

    async def drain(self) -> None:
        """Wait for every request still in flight. Errors stay on their own futures."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


def session_for_password(current: Optional[Session], password: str, url: str | None = None) -> Session:
    """Reuse `current` while the password is unchanged, otherwise start over unauthenticated."""
    if current is not None and current.password == password:
        return current
    return Session(password, url=url)
