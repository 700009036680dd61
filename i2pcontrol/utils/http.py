import json

import requests

def post_rpc(url: str, payload: dict, timeout: float = 30) -> tuple[int, str]:
    r = requests.post(
        url,
        data=json.dumps(payload),
        headers={"Content-Type": "application/json"},
        timeout=timeout,
    )
    return r.status_code, r.text
