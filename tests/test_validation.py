from datetime import date

import pytest

from stayhub.core.validation import (
    PAYMENT_BANK_RULES,
    FieldRule,
    ValidationPatterns,
    is_valid_email,
    is_valid_phone,
    validate_form,
    validate_guest_details,
    validate_stay_dates,
)


@pytest.mark.parametrize("email,expected", [
    ("ada@stayhub.io", True),
    ("ada.lovelace+trips@mail.stayhub.io", True),
    ("ada@stayhub", False),
    ("ada stayhub.io", False),
    ("", False),
    (None, False),
])
def test_email(email, expected):
    assert is_valid_email(email) is expected


@pytest.mark.parametrize("phone,expected", [
    ("+1 (555) 010-2030", True),
    ("5550102030", True),
    ("555-0102", False),
    ("555 010 2030 ext", False),
])
def test_phone(phone, expected):
    assert is_valid_phone(phone) is expected


class TestValidateForm:

    def test_required_and_labels(self):
        errors = validate_form({"firstName": "  "}, {"firstName": FieldRule(required=True)})

        assert errors == {"firstName": "First Name is required"}

    def test_only_first_failure_per_field(self):
        rules = {"code": FieldRule(min_length=4, pattern=ValidationPatterns.ZIP_CODE)}

        assert validate_form({"code": "ab"}, rules) == {"code": "Code must be at least 4 characters"}

    def test_optional_empty_field_skips_checks(self):
        rules = {"zip_code": FieldRule(pattern=ValidationPatterns.ZIP_CODE)}

        assert validate_form({"zip_code": ""}, rules) == {}

    def test_numeric_bounds(self):
        rules = {"guests": FieldRule(min_value=1, max_value=10)}

        assert validate_form({"guests": "0"}, rules) == {"guests": "Guests must be at least 1"}
        assert validate_form({"guests": "many"}, rules) == {"guests": "Guests must be a number"}

    def test_matching_field(self):
        rules = {"confirm_password": FieldRule(required=True, matches_field="password")}

        errors = validate_form({"password": "abc12345", "confirm_password": "abc12346"}, rules)

        assert errors == {"confirm_password": "Confirm password must match Password"}

    def test_custom_validator_message(self):
        rules = {"nickname": FieldRule(validate=lambda v: "Taken" if v == "ada" else None)}

        assert validate_form({"nickname": "ada"}, rules) == {"nickname": "Taken"}

    def test_bank_rules(self):
        errors = validate_form({"account_number": "12ab", "account_holder": "Ada"}, PAYMENT_BANK_RULES)

        assert errors == {
            "account_number": "Account number must be a number",
            "routing_number": "Routing number is required",
        }


def test_guest_details_collects_all_errors():
    errors = validate_guest_details({"first_name": "A", "last_name": "", "email": "nope", "phone": ""})

    assert errors == [
        "First name must be at least 2 characters",
        "Last name must be at least 2 characters",
        "Please provide a valid email address",
        "Please provide a valid phone number",
    ]


class TestStayDates:

    def test_valid_range(self):
        assert validate_stay_dates(date(2030, 5, 1), date(2030, 5, 2), today=date(2030, 5, 1)) is None

    def test_same_day_is_rejected(self):
        assert validate_stay_dates(date(2030, 5, 1), date(2030, 5, 1)) == "Check-out must be after check-in"

    def test_past_check_in(self):
        result = validate_stay_dates(date(2030, 4, 30), date(2030, 5, 2), today=date(2030, 5, 1))

        assert result == "Check-in cannot be in the past"


def test_guest_details_accepts_non_string_values():
    errors = validate_guest_details({
        "first_name": "Ada",
        "last_name": 7,
        "email": "ada@stayhub.io",
        "phone": 15550102030,
    })

    assert errors == ["Last name must be at least 2 characters"]
