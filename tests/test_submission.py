"""Tests for whole-submission validation."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from formkit.logic.validators import ErrorKind, SubmissionInput, validate_submission


class TestEmptyFields:
    @pytest.mark.parametrize("blank", ["fullname", "phone", "email"])
    def test_single_empty_field(self, blank, valid_submission):
        values = dict(valid_submission, **{blank: "   "})
        result = validate_submission(SubmissionInput(**values))
        assert result.valid is False
        assert len(result.errors) == 1
        assert result.errors[0].kind == ErrorKind.EMPTY_FIELD
        assert result.errors[0].field is None
        assert result.errors[0].message == "Empty fields present"

    def test_empty_suppresses_format_errors(self):
        data = SubmissionInput(fullname="", phone="0123", email="user@hotmail.com")
        result = validate_submission(data)
        assert [e.kind for e in result.errors] == [ErrorKind.EMPTY_FIELD]

    def test_all_empty(self):
        result = validate_submission(SubmissionInput())
        assert len(result.errors) == 1

    def test_gender_not_required(self, valid_submission):
        values = dict(valid_submission, gender=None)
        assert validate_submission(SubmissionInput(**values)).valid is True


class TestAggregation:
    def test_valid_submission(self, valid_submission):
        result = validate_submission(SubmissionInput(**valid_submission))
        assert result.valid is True
        assert result.errors == ()

    def test_errors_in_field_order(self):
        data = SubmissionInput(fullname="John123", phone="0123456789", email="user@hotmail.com")
        result = validate_submission(data)
        assert result.valid is False
        assert [e.field for e in result.errors] == ["fullname", "phone", "email"]
        assert [e.kind for e in result.errors] == [
            ErrorKind.FORMAT,
            ErrorKind.FORMAT,
            ErrorKind.DOMAIN_NOT_ALLOWED,
        ]

    def test_only_failing_fields_reported(self, valid_submission):
        values = dict(valid_submission, phone="0123456789")
        result = validate_submission(SubmissionInput(**values))
        assert [e.field for e in result.errors] == ["phone"]

    def test_name_policy(self, valid_submission):
        values = dict(valid_submission, fullname="Al")
        assert validate_submission(SubmissionInput(**values), "lenient").valid is True
        result = validate_submission(SubmissionInput(**values), "strict")
        assert result.valid is False
        assert result.errors[0].field == "fullname"

    def test_unknown_policy(self, valid_submission):
        with pytest.raises(KeyError):
            validate_submission(SubmissionInput(**valid_submission), "loose")

    def test_as_config(self, valid_submission):
        assert SubmissionInput(**valid_submission).as_config() == valid_submission
