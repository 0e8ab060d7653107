import pytest

from civiltech.schemas.projects import ProjectCreate
from civiltech.utils.nulls import to_null


@pytest.mark.parametrize("value", ["", "undefined", "null"])
def test_null_tokens_become_none(value):
    assert to_null(value) is None


@pytest.mark.parametrize("value", ["0", "None", "NULL", " ", "Planned", 0, 12.5, False])
def test_other_values_pass_through(value):
    assert to_null(value) == value


def test_optional_fields_normalized_on_body():
    body = ProjectCreate(
        company_id="",
        start_date="undefined",
        end_date="null",
        estimated_cost="",
        approved_budget="1500.50",
    )
    assert body.company_id is None
    assert body.start_date is None
    assert body.end_date is None
    assert body.estimated_cost is None
    assert str(body.approved_budget) == "1500.50"


def test_text_fields_are_not_normalized():
    body = ProjectCreate(description="", block=12)
    assert body.description == ""
    assert body.block == "12"
