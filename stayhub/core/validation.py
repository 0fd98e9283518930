"""
Input Validation Utilities

Synchronous form validation run before a request is submitted: rule based
field validation, guest details for the booking flow and stay date checks.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, Pattern

from email_validator import validate_email as email_validate, EmailNotValidError

from stayhub.config.logging import get_logger

logger = get_logger(__name__)


class ValidationPatterns:
    """Common validation regex patterns"""

    EMAIL = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
    PASSWORD = re.compile(r'^(?=.*[A-Za-z])(?=.*\d)[A-Za-z\d@$!%*#?&]{8,}$')
    PHONE = re.compile(r'^\+?[\d\s-]{10,}$')
    PHONE_CHARS = re.compile(r'^[\d\s\-+()]+$')
    ZIP_CODE = re.compile(r'^\d{5}(-\d{4})?$')
    CREDIT_CARD = re.compile(
        r'^(?:4[0-9]{12}(?:[0-9]{3})?|5[1-5][0-9]{14}|3[47][0-9]{13}'
        r'|3(?:0[0-5]|[68][0-9])[0-9]{11}|6(?:011|5[0-9]{2})[0-9]{12})$'
    )
    CARD_EXPIRY = re.compile(r'^(0[1-9]|1[0-2])/\d{2}$')
    CVV = re.compile(r'^\d{3,4}$')
    DATE_YYYY_MM_DD = re.compile(r'^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])$')


@dataclass
class FieldRule:
    """Validation rule for a single form field"""

    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[Pattern[str]] = None
    message: Optional[str] = None
    validate: Optional[Callable[[Any], Optional[str]]] = None
    is_email: bool = False
    is_numeric: bool = False
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    matches_field: Optional[str] = None


def _field_label(field: str) -> str:
    words = re.sub(r'([A-Z])', r' \1', field).replace('_', ' ').strip()
    return words[:1].upper() + words[1:]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == '')


def is_valid_email(email: Optional[str]) -> bool:
    """Validate email syntax (no deliverability check)"""
    if not email or not ValidationPatterns.EMAIL.match(email):
        return False
    try:
        email_validate(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone(phone: Optional[str]) -> bool:
    """Phone numbers may contain digits, spaces, dashes, + and parentheses; 10+ digits"""
    if not phone or not ValidationPatterns.PHONE_CHARS.match(phone):
        return False
    return len(re.sub(r'\D', '', phone)) >= 10


def validate_form(data: Mapping[str, Any], rules: Mapping[str, FieldRule]) -> Dict[str, str]:
    """
    Validate form data against per-field rules.

    Only the first failing rule of each field is reported. Empty optional
    fields skip every check but ``required``.

    Args:
        data: Submitted form values
        rules: Rules keyed by field name

    Returns:
        Mapping of field name to error message (empty when valid)
    """
    errors: Dict[str, str] = {}

    for field, rule in rules.items():
        value = data.get(field)
        label = _field_label(field)

        if rule.required and _is_blank(value):
            errors[field] = rule.message or f"{label} is required"
            continue

        if _is_blank(value):
            continue

        if rule.validate is not None:
            custom_error = rule.validate(value)
            if custom_error:
                errors[field] = custom_error
                continue

        text = str(value)

        if rule.is_email and not is_valid_email(text):
            errors[field] = rule.message or "Please enter a valid email address"
            continue

        if rule.is_numeric or rule.min_value is not None or rule.max_value is not None:
            try:
                number = float(text)
            except ValueError:
                errors[field] = rule.message or f"{label} must be a number"
                continue
            if rule.min_value is not None and number < rule.min_value:
                errors[field] = rule.message or f"{label} must be at least {rule.min_value:g}"
                continue
            if rule.max_value is not None and number > rule.max_value:
                errors[field] = rule.message or f"{label} must be at most {rule.max_value:g}"
                continue

        if rule.min_length is not None and len(text) < rule.min_length:
            errors[field] = rule.message or f"{label} must be at least {rule.min_length} characters"
            continue

        if rule.max_length is not None and len(text) > rule.max_length:
            errors[field] = rule.message or f"{label} must be at most {rule.max_length} characters"
            continue

        if rule.pattern is not None and not rule.pattern.match(text):
            errors[field] = rule.message or f"{label} is invalid"
            continue

        if rule.matches_field is not None and value != data.get(rule.matches_field):
            errors[field] = rule.message or f"{label} must match {_field_label(rule.matches_field)}"

    return errors


def validate_guest_details(guest: Any) -> List[str]:
    """
    Validate guest details collected by the booking flow.

    Accepts a mapping or any object exposing ``first_name``, ``last_name``,
    ``email`` and ``phone`` attributes.
    """
    def read(name: str) -> str:
        if isinstance(guest, Mapping):
            value = guest.get(name)
        else:
            value = getattr(guest, name, None)
        return '' if value is None else str(value)

    errors: List[str] = []

    if len(read('first_name').strip()) < 2:
        errors.append('First name must be at least 2 characters')

    if len(read('last_name').strip()) < 2:
        errors.append('Last name must be at least 2 characters')

    if not is_valid_email(read('email')):
        errors.append('Please provide a valid email address')

    if not is_valid_phone(read('phone')):
        errors.append('Please provide a valid phone number')

    return errors


def validate_stay_dates(
    check_in: date,
    check_out: date,
    today: Optional[date] = None,
) -> Optional[str]:
    """
    Validate a stay date range.

    Returns:
        An error message, or None when the range is acceptable
    """
    if check_in >= check_out:
        return 'Check-out must be after check-in'

    if check_in < (today or date.today()):
        return 'Check-in cannot be in the past'

    return None


PAYMENT_CARD_RULES: Dict[str, FieldRule] = {
    'card_number': FieldRule(
        required=True,
        validate=lambda v: None if ValidationPatterns.CREDIT_CARD.match(re.sub(r'[\s-]', '', str(v)))
        else 'Please enter a valid card number',
    ),
    'card_holder': FieldRule(required=True, min_length=2, max_length=100),
    'expiry_date': FieldRule(required=True, pattern=ValidationPatterns.CARD_EXPIRY,
                             message='Expiry date must be in MM/YY format'),
    'cvv': FieldRule(required=True, pattern=ValidationPatterns.CVV, message='CVV must be 3 or 4 digits'),
}

PAYMENT_BANK_RULES: Dict[str, FieldRule] = {
    'account_number': FieldRule(required=True, is_numeric=True, min_length=6, max_length=17),
    'account_holder': FieldRule(required=True, min_length=2, max_length=100),
    'routing_number': FieldRule(required=True, is_numeric=True, min_length=9, max_length=9),
}


__all__ = [
    "ValidationPatterns",
    "FieldRule",
    "is_valid_email",
    "is_valid_phone",
    "validate_form",
    "validate_guest_details",
    "validate_stay_dates",
    "PAYMENT_CARD_RULES",
    "PAYMENT_BANK_RULES",
]
