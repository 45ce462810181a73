from dataclasses import replace

import pytest

from validation import RawApplication, validate


def test_valid_application_is_coerced(raw_application):
    result = validate(raw_application)
    assert result.ok
    assert dict(result.errors) == {}
    app = result.application
    assert app.name == "Asha Rao"
    assert app.age == 30
    assert app.monthly_salary == 50000.0
    assert app.existing_emi == 2000.0
    assert app.loan_amount == 300000.0


def test_all_fields_missing_reports_every_error():
    result = validate(RawApplication())
    assert not result.ok
    assert result.application is None
    assert dict(result.errors) == {
        'name': 'Name is required',
        'age': 'Age is required',
        'monthly_salary': 'Monthly salary is required',
        'existing_emi': 'Existing EMI is required',
        'loan_amount': 'Loan amount is required',
    }


def test_errors_accumulate_without_short_circuit(raw_application):
    raw = replace(raw_application, name="A", age="121", loan_amount="-5")
    result = validate(raw)
    assert set(result.errors) == {'name', 'age', 'loan_amount'}
    assert result.application is None


@pytest.mark.parametrize("name, error", [
    ("", "Name is required"),
    ("   ", "Name is required"),
    ("A", "Name must be at least 2 characters long"),
    ("  B  ", "Name must be at least 2 characters long"),
    ("Al", None),
])
def test_name_rules(raw_application, name, error):
    result = validate(replace(raw_application, name=name))
    assert result.errors.get('name') == error


def test_name_is_trimmed(raw_application):
    result = validate(replace(raw_application, name="  Asha Rao  "))
    assert result.application.name == "Asha Rao"


@pytest.mark.parametrize("age, error", [
    ("0", "Age must be between 1 and 120"),
    ("1", None),
    ("120", None),
    ("121", "Age must be between 1 and 120"),
    ("-3", "Age must be between 1 and 120"),
    ("abc", "Age must be a valid number"),
    ("", "Age is required"),
])
def test_age_bounds(raw_application, age, error):
    result = validate(replace(raw_application, age=age))
    assert result.errors.get('age') == error


def test_age_is_truncated(raw_application):
    result = validate(replace(raw_application, age="30.9"))
    assert result.application.age == 30


@pytest.mark.parametrize("salary, error", [
    ("15000", None),
    ("14999", "Minimum monthly salary should be ₹15,000"),
    ("0", "Minimum monthly salary should be ₹15,000"),
    ("-1", "Monthly salary cannot be negative"),
    ("", "Monthly salary is required"),
    ("nan", "Monthly salary must be a valid number"),
])
def test_monthly_salary_rules(raw_application, salary, error):
    result = validate(replace(raw_application, monthly_salary=salary))
    assert result.errors.get('monthly_salary') == error


@pytest.mark.parametrize("emi, error", [
    ("0", None),
    ("1500.50", None),
    ("-1", "Existing EMI cannot be negative"),
    ("", "Existing EMI is required"),
    ("  ", "Existing EMI is required"),
])
def test_existing_emi_rules(raw_application, emi, error):
    result = validate(replace(raw_application, existing_emi=emi))
    assert result.errors.get('existing_emi') == error


@pytest.mark.parametrize("amount, error", [
    ("50000", None),
    ("49999", "Minimum loan amount is ₹50,000"),
    ("-10", "Loan amount cannot be negative"),
    ("", "Loan amount is required"),
    ("inf", "Loan amount must be a valid number"),
])
def test_loan_amount_rules(raw_application, amount, error):
    result = validate(replace(raw_application, loan_amount=amount))
    assert result.errors.get('loan_amount') == error


def test_grouped_amount_is_accepted(raw_application):
    result = validate(replace(raw_application, loan_amount="1,50,000"))
    assert result.application.loan_amount == 150000.0


def test_errors_mapping_is_read_only():
    result = validate(RawApplication())
    with pytest.raises(TypeError):
        result.errors['name'] = 'changed'


def test_corrected_field_clears_only_its_error(raw_application):
    first = validate(replace(raw_application, age="", loan_amount="100"))
    assert set(first.errors) == {'age', 'loan_amount'}
    second = validate(replace(raw_application, loan_amount="100"))
    assert set(second.errors) == {'loan_amount'}


@pytest.mark.parametrize("amount, valid", [
    ("1,50,000", True),
    ("150,000", True),
    ("12,34,567.50", True),
    ("3_00_000", False),
    ("300_000", False),
    ("5,0000", False),
    ("1,5,0000", False),
    (",150000", False),
])
def test_only_well_grouped_amounts_are_accepted(raw_application, amount, valid):
    result = validate(replace(raw_application, loan_amount=amount))
    if valid:
        assert 'loan_amount' not in result.errors
    else:
        assert result.errors['loan_amount'] == "Loan amount must be a valid number"


def test_underscored_salary_is_rejected(raw_application):
    result = validate(replace(raw_application, monthly_salary="5_0000"))
    assert result.errors['monthly_salary'] == "Monthly salary must be a valid number"
