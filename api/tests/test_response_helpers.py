import json

from api.response_helpers import success_response, error_response, validation_error_response


def _body(response):
    return json.loads(response.content)


def test_success_response_envelope():
    response = success_response("ok", {"code": 1}, 201)
    assert response.status_code == 201
    assert _body(response) == {"success": True, "message": "ok", "data": {"code": 1}}


def test_error_helpers_status_codes():
    assert error_response("x").status_code == 400
    assert validation_error_response("x").status_code == 400
    assert _body(error_response("conflicto", None, 409))["success"] is False
