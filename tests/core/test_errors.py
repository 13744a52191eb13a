"""Error hierarchy: codes, categories and structured output."""

from user_fetcher.core.errors import (
    ErrorCategory, ErrorContext, HttpStatusError, ParseError,
    RequestFailedError, TransportError, UserFetcherError,
)


def test_all_errors_share_base():
    for err in (
        TransportError("down"),
        HttpStatusError(500, "https://reqres.test/api/users"),
        ParseError("bad"),
        RequestFailedError("redirect loop"),
    ):
        assert isinstance(err, UserFetcherError)


def test_codes_and_categories():
    assert TransportError("x").code == "TRANSPORT_ERROR"
    assert TransportError("x").category is ErrorCategory.TRANSPORT
    assert HttpStatusError(500, "u").category is ErrorCategory.HTTP_STATUS
    assert ParseError("x").code == "PARSE_ERROR"
    assert ParseError("x").category is ErrorCategory.PARSE
    assert RequestFailedError("x").code == "REQUEST_ERROR"
    assert RequestFailedError("x").category is ErrorCategory.REQUEST


def test_http_status_error_keeps_status_and_url():
    err = HttpStatusError(404, "https://reqres.test/api/users/23")
    assert err.status_code == 404
    assert err.is_not_found
    assert err.context.url == "https://reqres.test/api/users/23"
    assert "404" in str(err)
    assert not HttpStatusError(500, "u").is_not_found


def test_to_dict_includes_context():
    ctx = ErrorContext(operation="fetch_all_users", page=3)
    data = HttpStatusError(502, "https://reqres.test/api/users", context=ctx).to_dict()
    assert data["error"]["code"] == "HTTP_STATUS_ERROR"
    assert data["error"]["category"] == "http_status"
    assert data["error"]["status_code"] == 502
    assert data["error"]["context"]["operation"] == "fetch_all_users"
    assert data["error"]["context"]["page"] == 3
    assert data["error"]["context"]["url"] == "https://reqres.test/api/users"


def test_default_context_is_created_per_error():
    a, b = ParseError("a"), ParseError("b")
    a.context.user_id = 1
    assert b.context.user_id is None
