from i2pcontrol.canonical.normalize import (
    FIELD_LABELS,
    STATUS_FIELDS,
    format_uptime,
    normalize_router_info,
    router_status_values,
)
from i2pcontrol.document import MemoryDocument, update_document

RESULT = {
    "i2p.router.uptime": 3723000,
    "i2p.router.version": "2.5.0",
    "i2p.router.status": "???",
    "i2p.router.net.status": 2,
    "i2p.router.netdb.knownpeers": 1532,
    "i2p.router.netdb.activepeers": 87,
    "i2p.router.net.tunnels.participating": 12,
    "i2p.router.net.bw.inbound.1s": 15.356,
    "i2p.router.net.bw.outbound.1s": 9.0,
}


def test_normalize_router_info():
    status = normalize_router_info(RESULT)
    assert status.uptime_ms == 3723000
    assert status.version == "2.5.0"
    assert status.net_status == 2
    assert status.known_peers == 1532
    assert status.bw_inbound_1s == 15.356
    assert status.error is None
    assert status.raw is RESULT


def test_router_status_values_render_for_display():
    values = router_status_values(normalize_router_info(RESULT))
    assert list(values) == STATUS_FIELDS
    assert values["uptime"] == "1:02:03"
    assert values["net_status"] == "FIREWALLED"
    assert values["bw_in"] == "15.36"
    assert values["bw_out"] == "9.00"
    assert values["tunnels_participating"] == "12"


def test_missing_and_malformed_fields_render_as_dash():
    status = normalize_router_info({"i2p.router.netdb.knownpeers": "many", "error": {"code": -32602}})
    values = router_status_values(status)
    assert status.known_peers is None
    assert all(v == "-" for v in values.values())
    assert status.error == {"code": -32602}


def test_unknown_net_status_renders_unknown():
    values = router_status_values(normalize_router_info({"i2p.router.net.status": 99}))
    assert values["net_status"] == "UNKNOWN"


def test_values_fill_a_status_document():
    doc = MemoryDocument(STATUS_FIELDS)
    update_document(router_status_values(normalize_router_info(RESULT)), doc)
    assert doc.text("version") == "2.5.0"
    assert doc.text("active_peers") == "87"


def test_format_uptime_edges():
    assert format_uptime(None) == "-"
    assert format_uptime(999) == "0:00:00"
    assert format_uptime(36000000) == "10:00:00"


def test_infinite_numbers_render_as_dash():
    status = normalize_router_info({
        "i2p.router.uptime": float("inf"),
        "i2p.router.net.status": float("-inf"),
        "i2p.router.net.bw.inbound.1s": float("inf"),
        "i2p.router.net.bw.outbound.1s": float("nan"),
    })
    values = router_status_values(status)
    assert status.uptime_ms is None
    assert values["uptime"] == "-"
    assert values["net_status"] == "-"
    assert values["bw_in"] == "-"
    assert values["bw_out"] == "-"


def test_every_status_field_has_a_label():
    assert list(FIELD_LABELS) == STATUS_FIELDS
