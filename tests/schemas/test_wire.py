"""Wire schemas: API payload parsing, defaults and unknown fields."""

import pytest
from pydantic import ValidationError

from user_fetcher.schemas.wire import PagedUsersEnvelope, SingleUserEnvelope

USER = {
    "id": 2,
    "email": "janet.weaver@reqres.in",
    "first_name": "Janet",
    "last_name": "Weaver",
    "avatar": "https://reqres.in/img/faces/2-image.jpg",
}


def test_single_envelope_ignores_support_block():
    env = SingleUserEnvelope.model_validate({"data": USER, "support": {"url": "x"}})
    assert env.data.first_name == "Janet"
    assert env.data.avatar.endswith("2-image.jpg")


def test_single_envelope_data_may_be_absent():
    assert SingleUserEnvelope.model_validate({}).data is None


def test_paged_envelope_reads_snake_case_total_pages():
    env = PagedUsersEnvelope.model_validate_json(
        '{"page": 1, "per_page": 6, "total": 12, "total_pages": 2, "data": []}'
    )
    assert env.page == 1
    assert env.total == 12
    assert env.total_pages == 2
    assert env.data == []


def test_paged_envelope_defaults_missing_counts_to_zero():
    env = PagedUsersEnvelope.model_validate({"data": [USER]})
    assert env.page == 0
    assert env.total == 0
    assert env.total_pages == 0
    assert len(env.data) == 1


def test_user_missing_required_field_is_rejected():
    broken = {k: v for k, v in USER.items() if k != "email"}
    with pytest.raises(ValidationError):
        SingleUserEnvelope.model_validate({"data": broken})
