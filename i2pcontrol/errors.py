from typing import Any, Dict, Optional


class I2PControlError(RuntimeError):
    pass


class RpcParseError(I2PControlError):
    """Router answered 200 with a body that is not a JSON-RPC result."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class AuthenticationError(I2PControlError):
    def __init__(self, message: str, result: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.result = result or {}
