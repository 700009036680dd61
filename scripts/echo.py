import asyncio

from i2pcontrol.calls import echo
from i2pcontrol.config import I2PCONTROL_URL, require_password
from i2pcontrol.protocol import PARAM_RESULT
from i2pcontrol.session import Session

async def main(value: str = "ping") -> None:
    session = Session(require_password())
    await session.start(lambda: None)
    result = await echo(session, value, lambda r, s: None)
    print("url:", I2PCONTROL_URL)
    print("token:", "yes" if session.token else "no")
    print("echo:", (result or {}).get(PARAM_RESULT))

if __name__ == "__main__":
    asyncio.run(main())
