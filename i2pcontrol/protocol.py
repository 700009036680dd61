from enum import IntEnum
from typing import Any, Dict, List

JSONRPC_VERSION = "2.0"
API_VERSION = 1

# Methods
METHOD_AUTHENTICATE = "Authenticate"
METHOD_ECHO = "Echo"
METHOD_I2PCONTROL = "I2PControl"
METHOD_ROUTER_INFO = "RouterInfo"
METHOD_ROUTER_MANAGER = "RouterManager"
METHOD_NETWORK_SETTING = "NetworkSetting"

# Params
PARAM_API = "API"
PARAM_PASSWORD = "Password"
PARAM_TOKEN = "Token"
PARAM_ECHO = "Echo"
PARAM_RESULT = "Result"

# I2PControl settings
I2PCONTROL_ADDRESS = "i2pcontrol.address"
I2PCONTROL_PASSWORD = "i2pcontrol.password"
I2PCONTROL_PORT = "i2pcontrol.port"

# RouterInfo keys
ROUTER_INFO_UPTIME = "i2p.router.uptime"
ROUTER_INFO_VERSION = "i2p.router.version"
ROUTER_INFO_STATUS = "i2p.router.status"
ROUTER_INFO_NETDB_KNOWNPEERS = "i2p.router.netdb.knownpeers"
ROUTER_INFO_NETDB_ACTIVEPEERS = "i2p.router.netdb.activepeers"
ROUTER_INFO_NET_STATUS = "i2p.router.net.status"
ROUTER_INFO_TUNNELS_PARTICIPATING = "i2p.router.net.tunnels.participating"
ROUTER_INFO_BW_IB_1S = "i2p.router.net.bw.inbound.1s"
ROUTER_INFO_BW_OB_1S = "i2p.router.net.bw.outbound.1s"

ROUTER_INFO_KEYS: List[str] = [
    ROUTER_INFO_UPTIME,
    ROUTER_INFO_VERSION,
    ROUTER_INFO_STATUS,
    ROUTER_INFO_NETDB_KNOWNPEERS,
    ROUTER_INFO_NETDB_ACTIVEPEERS,
    ROUTER_INFO_NET_STATUS,
    ROUTER_INFO_TUNNELS_PARTICIPATING,
    ROUTER_INFO_BW_IB_1S,
    ROUTER_INFO_BW_OB_1S,
]

# RouterManager operations
ROUTER_MANAGER_SHUTDOWN = "Shutdown"
ROUTER_MANAGER_SHUTDOWN_GRACEFUL = "ShutdownGraceful"
ROUTER_MANAGER_RESEED = "Reseed"

ROUTER_MANAGER_OPERATIONS = [
    ROUTER_MANAGER_SHUTDOWN,
    ROUTER_MANAGER_SHUTDOWN_GRACEFUL,
    ROUTER_MANAGER_RESEED,
]


class ErrorCode(IntEnum):
    """Error codes sent by the router, negated on the wire (e.g. -32001)."""

    NONE = 0
    # JSON-RPC 2.0
    METHOD_NOT_FOUND = 32601
    INVALID_PARAMETERS = 32602
    INVALID_REQUEST = 32600
    INTERNAL_ERROR = 32603
    PARSE_ERROR = 32700
    # I2PControl specific
    INVALID_PASSWORD = 32001
    NO_TOKEN = 32002
    NONEXISTENT_TOKEN = 32003
    EXPIRED_TOKEN = 32004
    UNSPECIFIED_VERSION = 32005
    UNSUPPORTED_VERSION = 32006


ERROR_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.NONE: "",
    ErrorCode.METHOD_NOT_FOUND: "Method not found",
    ErrorCode.INVALID_PARAMETERS: "Invalid parameters",
    ErrorCode.INVALID_REQUEST: "Invalid request",
    ErrorCode.INTERNAL_ERROR: "Internal error",
    ErrorCode.PARSE_ERROR: "Json parse error",
    ErrorCode.INVALID_PASSWORD: "Invalid password",
    ErrorCode.NO_TOKEN: "No token",
    ErrorCode.NONEXISTENT_TOKEN: "Nonexistent token",
    ErrorCode.EXPIRED_TOKEN: "Expired token",
    ErrorCode.UNSPECIFIED_VERSION: "Version not specified",
    ErrorCode.UNSUPPORTED_VERSION: "Version not supported",
}


def build_envelope(method: str, params: Dict[str, Any]) -> Dict[str, Any]:
    """JSON-RPC request body. The id is always 0: in-flight calls are not correlated."""
    return {
        "id": 0,
        "method": method,
        "params": params,
        "jsonrpc": JSONRPC_VERSION,
    }


def error_code(value: Any) -> ErrorCode | None:
    try:
        return ErrorCode(abs(int(value)))
    except (TypeError, ValueError, OverflowError):
        return None


def describe_error(error: Any) -> str:
    """
    Best-effort readable text for an opaque `result.error` value.
    The router decides the shape; accepts a dict with code/message, a bare code or a string.
    """
    if error is None:
        return ""
    if isinstance(error, dict):
        message = str(error.get("message") or "").strip()
        code = error_code(error.get("code"))
        if message:
            return f"{message} ({error.get('code')})" if "code" in error else message
        if code is not None and ERROR_MESSAGES[code]:
            return ERROR_MESSAGES[code]
        return str(error)
    if isinstance(error, bool):
        return str(error)
    if isinstance(error, int):
        code = error_code(error)
        if code is None:
            return f"Unknown error {error}"
        return ERROR_MESSAGES[code] or str(error)
    return str(error)
