import asyncio
import sys

from i2pcontrol.calls import router_manager
from i2pcontrol.config import require_password
from i2pcontrol.errors import AuthenticationError
from i2pcontrol.protocol import ROUTER_MANAGER_OPERATIONS, describe_error
from i2pcontrol.session import Session

async def main(operation: str) -> int:
    session = Session(require_password())
    try:
        await session.start(lambda: None, validate=True)
    except AuthenticationError as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 1
    if not session.ready:
        print("[ERR] No answer from router", file=sys.stderr)
        return 1

    result = await router_manager(session, operation, lambda r, s: None)
    if result is None:
        print(f"[ERR] {operation}: no answer from router")
        return 1
    if "error" in result:
        print(f"[ERR] {operation}: {describe_error(result['error'])}")
        return 1
    print(f"[OK] {operation} requested")
    return 0

if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in ROUTER_MANAGER_OPERATIONS:
        print(f"usage: router_manager.py {{{'|'.join(ROUTER_MANAGER_OPERATIONS)}}}", file=sys.stderr)
        raise SystemExit(2)
    raise SystemExit(asyncio.run(main(sys.argv[1])))
