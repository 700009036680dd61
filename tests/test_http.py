import json

import i2pcontrol.utils.http as http


class FakeResponse:
    status_code = 200
    text = '{"result": {}}'


def test_post_rpc_sends_json_body(monkeypatch):
    captured = {}

    def fake_post(url, data=None, headers=None, timeout=None):
        captured.update(url=url, data=data, headers=headers, timeout=timeout)
        return FakeResponse()

    monkeypatch.setattr(http.requests, "post", fake_post)
    envelope = {"id": 0, "method": "Echo", "params": {"Echo": "x"}, "jsonrpc": "2.0"}

    status, body = http.post_rpc("http://127.0.0.1:7650/", envelope, timeout=5)

    assert (status, body) == (200, '{"result": {}}')
    assert captured["url"] == "http://127.0.0.1:7650/"
    assert captured["headers"] == {"Content-Type": "application/json"}
    assert captured["timeout"] == 5
    assert json.loads(captured["data"]) == envelope
