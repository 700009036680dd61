from dataclasses import dataclass
from typing import Optional, Dict, Any

@dataclass
class RouterStatus:
    uptime_ms: Optional[int] = None
    version: Optional[str] = None
    status: Optional[str] = None
    net_status: Optional[int] = None
    known_peers: Optional[int] = None
    active_peers: Optional[int] = None
    tunnels_participating: Optional[int] = None
    bw_inbound_1s: Optional[float] = None
    bw_outbound_1s: Optional[float] = None
    error: Optional[Any] = None
    raw: Optional[Dict[str, Any]] = None
