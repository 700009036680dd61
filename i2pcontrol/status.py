from typing import Any, Dict

UNKNOWN = "UNKNOWN"

# Router network status codes
STATUS_LABELS: Dict[int, str] = {
    0: "OK",
    1: "TESTING",
    2: "FIREWALLED",
    3: "HIDDEN",
    4: "WARN_FIREWALLED_AND_FAST",
    5: "WARN_FIREWALLED_AND_FLOODFILL",
    6: "WARN_FIREWALLED_WITH_INBOUND_TCP",
    7: "WARN_FIREWALLED_WITH_UDP_DISABLED",
    8: "ERROR_I2CP",
    9: "ERROR_CLOCK_SKEW",
    10: "ERROR_PRIVATE_TCP_ADDRESS",
    11: "ERROR_SYMMETRIC_NAT",
    12: "ERROR_UDP_PORT_IN_USE",
    13: "ERROR_NO_ACTIVE_PEERS_CHECK_CONNECTION_AND_FIREWALL",
    14: "ERROR_UDP_DISABLED_AND_TCP_UNSET",
}


def status_to_string(status: Any) -> str:
    # bool is an int subclass; True must not read as TESTING
    if isinstance(status, bool) or not isinstance(status, int):
        return UNKNOWN
    return STATUS_LABELS.get(status, UNKNOWN)
