import asyncio
import json

from i2pcontrol.calls import router_info
from i2pcontrol.canonical.normalize import FIELD_LABELS, STATUS_FIELDS, error_text, normalize_router_info, router_status_values
from i2pcontrol.config import I2PCONTROL_URL, require_password
from i2pcontrol.document import MemoryDocument, update_document
from i2pcontrol.session import Session

async def main() -> int:
    session = Session(require_password())
    document = MemoryDocument(STATUS_FIELDS)
    snapshot = {}

    def on_info(result, s):
        status = normalize_router_info(result)
        snapshot["status"] = status
        update_document(router_status_values(status), document)

    await session.start(lambda: print(f"[OK] Authenticated against {I2PCONTROL_URL}"))
    if not session.ready:
        print(f"[ERR] No answer from {I2PCONTROL_URL}")
        return 1

    await router_info(session, on_info)
    if "status" not in snapshot:
        print("[ERR] RouterInfo got no answer")
        return 1

    print("\nI2P Router Status")
    print("=" * 40)
    for field in STATUS_FIELDS:
        print(f"{FIELD_LABELS[field] + ':':<18} {document.text(field)}")

    if session.error:
        print(f"\n[WARN] Router reported an error: {error_text(snapshot['status'])}")
        print(json.dumps(snapshot["status"].raw, indent=2))
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
