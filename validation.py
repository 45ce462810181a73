# validation.py
"""
Input validation for a single loan application.

Every field is checked on every call and all problems are reported together, so the
form can show them at once. Nothing here keeps state between calls.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from formatting import format_rupees
from loan_rules import (
    AGE_LOWER_BOUND,
    AGE_UPPER_BOUND,
    FIELD_LABELS,
    MIN_LOAN_AMOUNT,
    MIN_MONTHLY_SALARY,
    MIN_NAME_LENGTH,
)

logger = logging.getLogger(__name__)

# 1,50,000 (lakh grouping) or 150,000 (thousands grouping)
GROUPED_NUMBER = re.compile(r'^[+-]?(\d{1,2}(,\d{2})*,\d{3}|\d{1,3}(,\d{3})+)(\.\d*)?$')


# ---------------------------
# Dataclasses
# ---------------------------
@dataclass(frozen=True)
class RawApplication:
    """Form values exactly as typed by the user."""
    name: str = ''
    age: str = ''
    monthly_salary: str = ''
    existing_emi: str = ''
    loan_amount: str = ''


@dataclass(frozen=True)
class ValidatedApplication:
    name: str
    age: int
    monthly_salary: float
    existing_emi: float
    loan_amount: float


@dataclass(frozen=True)
class ValidationResult:
    application: Optional[ValidatedApplication] = None
    errors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def ok(self) -> bool:
        return self.application is not None


# ---------------------------
# Field checks
# ---------------------------
def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _parse_number(value: str) -> Optional[float]:
    text = str(value).strip()
    if '_' in text:
        return None
    if ',' in text:
        if not GROUPED_NUMBER.match(text):
            return None
        text = text.replace(',', '')
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _check_name(value: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    if _is_blank(value):
        return None, 'Name is required'
    name = value.strip()
    if len(name) < MIN_NAME_LENGTH:
        return None, f'Name must be at least {MIN_NAME_LENGTH} characters long'
    return name, None


def _check_amount(key: str, value: Optional[str], minimum: Optional[float] = None,
                  minimum_message: str = '') -> Tuple[Optional[float], Optional[str]]:
    label = FIELD_LABELS[key]
    if _is_blank(value):
        return None, f'{label} is required'
    number = _parse_number(value)
    if number is None:
        return None, f'{label} must be a valid number'
    if number < 0:
        return None, f'{label} cannot be negative'
    if minimum is not None and number < minimum:
        return None, minimum_message
    return number, None


def _check_age(value: Optional[str]) -> Tuple[Optional[int], Optional[str]]:
    if _is_blank(value):
        return None, 'Age is required'
    number = _parse_number(value)
    if number is None:
        return None, 'Age must be a valid number'
    if number < AGE_LOWER_BOUND or number > AGE_UPPER_BOUND:
        return None, f'Age must be between {AGE_LOWER_BOUND} and {AGE_UPPER_BOUND}'
    return int(number), None


# ---------------------------
# Validation
# ---------------------------
def validate(raw: RawApplication) -> ValidationResult:
    """Check all five fields; return either a complete application or every field error."""
    checks = {
        'name': _check_name(raw.name),
        'age': _check_age(raw.age),
        'monthly_salary': _check_amount(
            'monthly_salary', raw.monthly_salary, MIN_MONTHLY_SALARY,
            f'Minimum monthly salary should be {format_rupees(MIN_MONTHLY_SALARY)}'),
        'existing_emi': _check_amount('existing_emi', raw.existing_emi),
        'loan_amount': _check_amount(
            'loan_amount', raw.loan_amount, MIN_LOAN_AMOUNT,
            f'Minimum loan amount is {format_rupees(MIN_LOAN_AMOUNT)}'),
    }
    errors = {key: message for key, (_, message) in checks.items() if message}
    if errors:
        logger.debug("Validation failed for fields: %s", ', '.join(errors))
        return ValidationResult(errors=MappingProxyType(errors))

    values = {key: value for key, (value, _) in checks.items()}
    return ValidationResult(application=ValidatedApplication(
        name=values['name'],
        age=values['age'],
        monthly_salary=float(values['monthly_salary']),
        existing_emi=float(values['existing_emi']),
        loan_amount=float(values['loan_amount']),
    ))
