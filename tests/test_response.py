from articlesfeed.errors import (
    AuthorNotFoundError,
    BadRequestError,
    InvalidSearchPathError,
)
from articlesfeed.response import ErrorInfo, Meta, Response, error_body, success_body


class _HttpProblem(Exception):
    def __init__(self, code, name):
        super().__init__(f"{code} {name}")
        self.code = code
        self.name = name


class _Payload:
    def __init__(self, value):
        self.value = value

    def to_dict(self):
        return {"value": self.value}


def test_meta_omits_zero_values():
    assert Meta().to_dict() == {}
    assert Meta(page=1).to_dict() == {"page": 1}


def test_meta_full():
    assert Meta(page=1, page_size=2, total_items=4).to_dict() == {
        "page": 1,
        "pageSize": 2,
        "totalItems": 4,
    }


def test_error_info_hides_details():
    info = ErrorInfo(code=404, message="author not found", details="trace")
    assert info.to_dict() == {"code": 404, "message": "author not found"}


def test_response_omits_missing_parts():
    assert Response(success=False).to_dict() == {"success": False}


def test_success_body_has_empty_meta_by_default():
    assert success_body({"articles": []}) == {
        "success": True,
        "data": {"articles": []},
        "meta": {},
    }


def test_success_body_serialises_objects_and_meta():
    body = success_body(_Payload("x"), Meta(page=1, page_size=2, total_items=4))
    assert body["data"] == {"value": "x"}
    assert body["meta"] == {"page": 1, "pageSize": 2, "totalItems": 4}
    assert body["success"] is True


def test_error_body_not_found():
    code, body = error_body(AuthorNotFoundError())
    assert code == 404
    assert body == {"success": False, "error": {"code": 404, "message": "author not found"}}


def test_error_body_bad_request_message():
    code, body = error_body(BadRequestError("page is invalid"))
    assert code == 400
    assert body["error"]["message"] == "page is invalid"


def test_error_body_plain_error_is_internal():
    code, body = error_body(ValueError("'title' is required"), debug=True)
    assert code == 500
    assert body["error"] == {"code": 500, "message": "'title' is required"}
    assert "data" not in body


def test_error_body_invalid_search_path():
    code, body = error_body(InvalidSearchPathError())
    assert code == 500
    assert body["error"]["message"] == "invalid search path"


def test_error_body_http_problem_uses_its_code_and_name():
    code, body = error_body(_HttpProblem(405, "Method Not Allowed"))
    assert code == 405
    assert body["error"] == {"code": 405, "message": "Method Not Allowed"}