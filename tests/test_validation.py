"""Validation layer: field rules and error messages."""

import pytest

from app.exceptions import VPCValidationError
from app.schemas.vpc import VPCStatus
from app.services.validation import format_validation_errors, validate_create, validate_update


class TestValidateCreate:
    def test_valid_candidate(self):
        request = validate_create({"name": " prod ", "cidrBlock": "10.0.0.0/16", "region": "us-east-1"})
        assert request.name == "prod"
        assert request.cidr_block == "10.0.0.0/16"
        assert request.status is VPCStatus.PENDING
        assert request.description is None

    def test_snake_case_keys_accepted(self):
        request = validate_create({"name": "prod", "cidr_block": "10.0.0.0/16", "region": "r"})
        assert request.cidr_block == "10.0.0.0/16"

    @pytest.mark.parametrize("cidr", ["0.0.0.0/0", "192.168.1.1/32", "999.999.999.999/99"])
    def test_syntactically_valid_cidrs(self, cidr):
        assert validate_create({"name": "n", "cidrBlock": cidr, "region": "r"}).cidr_block == cidr

    @pytest.mark.parametrize("cidr", ["10.0.0.0/", "/16", "10.0.0.0.0/16", "10.0.0.0/016", "10.0.0.0\n/16", "١٠.٠.٠.٠/١٦", "１０.０.０.０/１６"])
    def test_malformed_cidrs(self, cidr):
        with pytest.raises(VPCValidationError) as exc_info:
            validate_create({"name": "n", "cidrBlock": cidr, "region": "r"})
        assert "cidrBlock: Invalid CIDR block format" in exc_info.value.message

    def test_reports_every_failure(self):
        with pytest.raises(VPCValidationError) as exc_info:
            validate_create({"cidrBlock": "nope"})
        message = exc_info.value.message
        assert message.startswith("VPC validation failed: ")
        assert "name: is required" in message
        assert "region: is required" in message
        assert "cidrBlock: Invalid CIDR block format" in message

    def test_wrong_type(self):
        with pytest.raises(VPCValidationError) as exc_info:
            validate_create({"name": 42, "cidrBlock": "10.0.0.0/16", "region": "r"})
        assert "name" in exc_info.value.message

    def test_non_mapping(self):
        with pytest.raises(VPCValidationError):
            validate_create(["name"])


class TestValidateUpdate:
    def test_only_sent_fields_are_set(self):
        request = validate_update({"status": "deleting"})
        assert request.model_dump(exclude_unset=True) == {"status": VPCStatus.DELETING}

    def test_description_may_be_cleared(self):
        request = validate_update({"description": None})
        assert request.model_dump(exclude_unset=True) == {"description": None}

    @pytest.mark.parametrize("field", ["name", "cidrBlock", "region", "status"])
    def test_required_fields_cannot_be_nulled(self, field):
        with pytest.raises(VPCValidationError) as exc_info:
            validate_update({field: None})
        assert f"{field}: must not be null" in exc_info.value.message

    def test_blank_name(self):
        with pytest.raises(VPCValidationError) as exc_info:
            validate_update({"name": ""})
        assert "name: must not be empty" in exc_info.value.message

    def test_unknown_fields_ignored(self):
        request = validate_update({"id": "x", "updatedAt": "now", "color": "blue"})
        assert request.model_dump(exclude_unset=True) == {}


def test_format_strips_transport_location():
    message = format_validation_errors(
        [{"loc": ("body", "cidrBlock"), "msg": "Value error, Invalid CIDR block format", "type": "value_error"}]
    )
    assert message == "VPC validation failed: cidrBlock: Invalid CIDR block format"


def test_format_missing_body():
    message = format_validation_errors([{"loc": ("body",), "msg": "Field required", "type": "missing"}])
    assert message == "VPC validation failed: request body is required"


def test_format_json_decode_error_drops_offset():
    message = format_validation_errors(
        [{"loc": ("body", 9), "msg": "JSON decode error", "type": "json_invalid"}]
    )
    assert message == "VPC validation failed: JSON decode error"
