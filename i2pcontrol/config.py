import os
from dotenv import load_dotenv

load_dotenv()  # reads .env if present

# Router defaults: i2pcontrol.address=127.0.0.1, i2pcontrol.port=7650
I2PCONTROL_URL = os.getenv("I2PCONTROL_URL", "http://127.0.0.1:7650/").strip()
I2PCONTROL_PASSWORD = os.getenv("I2PCONTROL_PASSWORD", "itoopie")
I2PCONTROL_TIMEOUT = float(os.getenv("I2PCONTROL_TIMEOUT", "30"))
I2PCONTROL_REFRESH = int(os.getenv("I2PCONTROL_REFRESH", "5"))

def require_password(password: str | None = None) -> str:
    value = I2PCONTROL_PASSWORD if password is None else password
    if not value:
        raise RuntimeError(
            "I2PControl password missing. Set I2PCONTROL_PASSWORD in the .env file at the project root."
        )
    return value
