import pytest

from leadhub.features.lead_magnets.schemas.lead_magnet_schema import LeadMagnetUpdate
from leadhub.features.leads.schemas.lead_schema import LeadCreate, LeadUpdate
from leadhub.platform.validation import (
    PayloadValidationError,
    field_errors_from,
    validate_create,
    validate_update,
)

VALID_LEAD = {"name": "Mike Chen", "email": "mike.chen@email.com", "source": "Facebook Ad"}


def error_paths(exc_info) -> list:
    return [error.path for error in exc_info.value.errors]


def test_validate_create_accepts_camel_case_and_defaults():
    lead = validate_create(VALID_LEAD, LeadCreate)

    assert lead.name == "Mike Chen"
    assert lead.status == "cold"
    assert lead.score == 0
    assert lead.tags == []


def test_validate_create_missing_field():
    payload = dict(VALID_LEAD)
    del payload["email"]

    with pytest.raises(PayloadValidationError) as exc_info:
        validate_create(payload, LeadCreate)

    assert error_paths(exc_info) == [["email"]]


def test_validate_create_unknown_field():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_create({**VALID_LEAD, "company": "Acme"}, LeadCreate)

    assert error_paths(exc_info) == [["company"]]


@pytest.mark.parametrize("score", ["5", 5.5, True])
def test_validate_create_score_must_be_integer(score):
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_create({**VALID_LEAD, "score": score}, LeadCreate)

    assert error_paths(exc_info) == [["score"]]


def test_validate_create_tag_paths_include_index():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_create({**VALID_LEAD, "tags": ["ok", 3]}, LeadCreate)

    assert error_paths(exc_info) == [["tags", 1]]


def test_validate_create_reports_every_failing_field():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_create({"score": "high"}, LeadCreate)

    assert sorted(path[0] for path in error_paths(exc_info)) == ["email", "name", "score", "source"]


def test_validate_update_empty_payload():
    changes = validate_update({}, LeadUpdate)
    assert changes.model_dump(exclude_unset=True) == {}


def test_validate_update_keeps_only_sent_fields():
    changes = validate_update({"status": "hot"}, LeadUpdate)
    assert changes.model_dump(exclude_unset=True) == {"status": "hot"}


def test_validate_update_rejects_null_for_required_field():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_update({"name": None}, LeadUpdate)

    assert error_paths(exc_info) == [["name"]]


def test_validate_update_allows_null_for_optional_field():
    changes = validate_update({"phone": None}, LeadUpdate)
    assert changes.model_dump(exclude_unset=True) == {"phone": None}

    magnet_changes = validate_update({"description": None}, LeadMagnetUpdate)
    assert magnet_changes.model_dump(exclude_unset=True) == {"description": None}


def test_validate_update_unknown_field():
    with pytest.raises(PayloadValidationError):
        validate_update({"bogus": 1}, LeadUpdate)


def test_validate_update_refuses_create_schema():
    with pytest.raises(TypeError):
        validate_update({}, LeadCreate)


def test_field_errors_drop_body_prefix():
    errors = field_errors_from([{"loc": ("body", "name"), "msg": "Field required"}])
    assert errors[0].path == ["name"]
    assert errors[0].message == "Field required"


def test_payload_error_message_names_fields():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_create({}, LeadCreate)

    assert "name" in str(exc_info.value)


@pytest.mark.parametrize("score", [2**31, -(2**31) - 1])
def test_integer_fields_are_bounded_to_column_range(score):
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_create({**VALID_LEAD, "score": score}, LeadCreate)

    assert error_paths(exc_info) == [["score"]]


def test_update_integer_fields_are_bounded():
    with pytest.raises(PayloadValidationError):
        validate_update({"conversion": 2**31}, LeadMagnetUpdate)


def test_error_carries_caller_message():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_update({"name": None}, LeadUpdate, "Invalid lead data")

    assert exc_info.value.message == "Invalid lead data"


def test_error_message_defaults():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_create({}, LeadCreate)

    assert exc_info.value.message == "Validation failed"
