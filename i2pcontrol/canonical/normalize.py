import math
from typing import Dict, Any, Optional
from .router_model import RouterStatus
from i2pcontrol.protocol import (
    ROUTER_INFO_BW_IB_1S,
    ROUTER_INFO_BW_OB_1S,
    ROUTER_INFO_NET_STATUS,
    ROUTER_INFO_NETDB_ACTIVEPEERS,
    ROUTER_INFO_NETDB_KNOWNPEERS,
    ROUTER_INFO_STATUS,
    ROUTER_INFO_TUNNELS_PARTICIPATING,
    ROUTER_INFO_UPTIME,
    ROUTER_INFO_VERSION,
    describe_error,
)
from i2pcontrol.status import status_to_string

MISSING = "-"

# Display slot ids written by router_status_values
STATUS_FIELDS = [
    "uptime",
    "version",
    "status",
    "net_status",
    "known_peers",
    "active_peers",
    "tunnels_participating",
    "bw_in",
    "bw_out",
]

FIELD_LABELS = {
    "uptime": "Uptime",
    "version": "Version",
    "status": "Status",
    "net_status": "Network",
    "known_peers": "Known peers",
    "active_peers": "Active peers",
    "tunnels_participating": "Transit tunnels",
    "bw_in": "Inbound KB/s",
    "bw_out": "Outbound KB/s",
}

def _to_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None

def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        v = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return v if math.isfinite(v) else None

def _to_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    v = str(value).strip()
    return v or None

def normalize_router_info(result: Dict[str, Any]) -> RouterStatus:
    """
    RouterInfo result -> RouterStatus. Missing or malformed fields become None.
    """
    return RouterStatus(
        uptime_ms=_to_int(result.get(ROUTER_INFO_UPTIME)),
        version=_to_str(result.get(ROUTER_INFO_VERSION)),
        status=_to_str(result.get(ROUTER_INFO_STATUS)),
        net_status=_to_int(result.get(ROUTER_INFO_NET_STATUS)),
        known_peers=_to_int(result.get(ROUTER_INFO_NETDB_KNOWNPEERS)),
        active_peers=_to_int(result.get(ROUTER_INFO_NETDB_ACTIVEPEERS)),
        tunnels_participating=_to_int(result.get(ROUTER_INFO_TUNNELS_PARTICIPATING)),
        bw_inbound_1s=_to_float(result.get(ROUTER_INFO_BW_IB_1S)),
        bw_outbound_1s=_to_float(result.get(ROUTER_INFO_BW_OB_1S)),
        error=result.get("error"),
        raw=result,
    )

def format_uptime(ms: Optional[int]) -> str:
    if ms is None or ms < 0:
        return MISSING
    seconds = ms // 1000
    h, rem = divmod(seconds, 3600)
    m, s = divmod(rem, 60)
    return f"{h}:{m:02d}:{s:02d}"

def format_bandwidth(value: Optional[float]) -> str:
    if value is None:
        return MISSING
    return f"{value:.2f}"

def _or_missing(value: Any) -> str:
    return MISSING if value is None else str(value)

def router_status_values(status: RouterStatus) -> Dict[str, str]:
    """Display values keyed by slot id, ready for update_document."""
    net_status = MISSING if status.net_status is None else status_to_string(status.net_status)
    return {
        "uptime": format_uptime(status.uptime_ms),
        "version": _or_missing(status.version),
        "status": _or_missing(status.status),
        "net_status": net_status,
        "known_peers": _or_missing(status.known_peers),
        "active_peers": _or_missing(status.active_peers),
        "tunnels_participating": _or_missing(status.tunnels_participating),
        "bw_in": format_bandwidth(status.bw_inbound_1s),
        "bw_out": format_bandwidth(status.bw_outbound_1s),
    }

def error_text(status: RouterStatus) -> str:
    return describe_error(status.error)
