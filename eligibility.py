# eligibility.py
"""
Loan eligibility decision for a validated application.

EMI is computed on the fixed 10.5% p.a. / 60 month terms, then four independent rules
are applied. All rules always run and every failure is reported, in rule order.
The figures (DTI, EMI, totals) are filled in whether or not the applicant qualifies.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from formatting import format_rupees
from loan_rules import (
    ANNUAL_INTEREST_RATE_PERCENT,
    HIGH_VALUE_LOAN_THRESHOLD,
    HIGH_VALUE_MIN_SALARY,
    LOAN_TO_INCOME_MULTIPLE,
    MAX_AGE,
    MAX_DTI_PERCENT,
    MIN_AGE,
    TENURE_MONTHS,
)
from validation import RawApplication, ValidatedApplication, ValidationResult, validate

logger = logging.getLogger(__name__)


# ---------------------------
# Helper financial functions
# ---------------------------
def emi_amount(principal: float, annual_rate_percent: float, months: int) -> float:
    if principal <= 0 or months <= 0:
        return 0.0
    r = annual_rate_percent / 100.0 / 12.0
    if r == 0:
        return principal / months
    emi = principal * r * (1 + r) ** months / ((1 + r) ** months - 1)
    return emi


# ---------------------------
# Dataclasses
# ---------------------------
@dataclass(frozen=True)
class EligibilityDecision:
    is_eligible: bool
    reasons: Tuple[str, ...]
    dti: float
    proposed_emi: float
    total_payable: float
    interest_payable: float


# ---------------------------
# Eligibility rules
# ---------------------------
def _age_rule(app: ValidatedApplication) -> Optional[str]:
    if app.age < MIN_AGE or app.age > MAX_AGE:
        return f"Age must be between {MIN_AGE} and {MAX_AGE} years"
    return None


def _loan_to_income_rule(app: ValidatedApplication) -> Optional[str]:
    max_loan_amount = LOAN_TO_INCOME_MULTIPLE * app.monthly_salary
    if app.loan_amount > max_loan_amount:
        return (f"Loan amount cannot exceed {LOAN_TO_INCOME_MULTIPLE} times your monthly salary "
                f"(Maximum: {format_rupees(max_loan_amount)})")
    return None


def _dti_rule(dti: float) -> Optional[str]:
    if dti > MAX_DTI_PERCENT:
        return f"Debt-to-Income Ratio ({dti:.2f}%) exceeds {MAX_DTI_PERCENT}% limit"
    return None


def _high_value_rule(app: ValidatedApplication) -> Optional[str]:
    if app.monthly_salary < HIGH_VALUE_MIN_SALARY and app.loan_amount > HIGH_VALUE_LOAN_THRESHOLD:
        return (f"For loans above {format_rupees(HIGH_VALUE_LOAN_THRESHOLD)}, minimum salary "
                f"should be {format_rupees(HIGH_VALUE_MIN_SALARY)} per month")
    return None


def evaluate(app: ValidatedApplication) -> EligibilityDecision:
    """Apply the eligibility rules to an already validated application."""
    proposed_emi = emi_amount(app.loan_amount, ANNUAL_INTEREST_RATE_PERCENT, TENURE_MONTHS)
    dti = (app.existing_emi + proposed_emi) / app.monthly_salary * 100

    failures = [
        _age_rule(app),
        _loan_to_income_rule(app),
        _dti_rule(dti),
        _high_value_rule(app),
    ]
    reasons = tuple(reason for reason in failures if reason)

    total_payable = proposed_emi * TENURE_MONTHS
    decision = EligibilityDecision(
        is_eligible=not reasons,
        reasons=reasons,
        dti=round(dti, 2),
        proposed_emi=round(proposed_emi, 2),
        total_payable=round(total_payable, 2),
        interest_payable=round(total_payable - app.loan_amount, 2),
    )
    logger.debug("Evaluated %s: eligible=%s dti=%.2f emi=%.2f",
                 app.name, decision.is_eligible, decision.dti, decision.proposed_emi)
    return decision


def check_application(raw: RawApplication) -> Tuple[ValidationResult, Optional[EligibilityDecision]]:
    """Validate then evaluate. The decision is None when validation failed."""
    result = validate(raw)
    if not result.ok:
        return result, None
    return result, evaluate(result.application)
