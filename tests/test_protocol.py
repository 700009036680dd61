from i2pcontrol.protocol import ErrorCode, build_envelope, describe_error, error_code


def test_build_envelope_shape():
    assert build_envelope("Echo", {"Echo": "x"}) == {
        "id": 0,
        "method": "Echo",
        "params": {"Echo": "x"},
        "jsonrpc": "2.0",
    }


def test_error_code_accepts_negated_wire_values():
    assert error_code(-32001) is ErrorCode.INVALID_PASSWORD
    assert error_code("32004") is ErrorCode.EXPIRED_TOKEN
    assert error_code(-1) is None
    assert error_code(None) is None


def test_describe_error_shapes():
    assert describe_error(None) == ""
    assert describe_error({"code": -1, "message": "x"}) == "x (-1)"
    assert describe_error({"message": "bad"}) == "bad"
    assert describe_error({"code": -32003}) == "Nonexistent token"
    assert describe_error(-32602) == "Invalid parameters"
    assert describe_error(7) == "Unknown error 7"
    assert describe_error("router down") == "router down"


def test_describe_error_never_blank_for_present_error():
    assert describe_error({"code": 0}) == "{'code': 0}"
    assert describe_error(0) == "0"
    assert describe_error({"code": 1e999}) == "{'code': inf}"
    assert error_code(float("inf")) is None
