import pytest

from validation import RawApplication, ValidatedApplication


@pytest.fixture
def raw_application():
    return RawApplication(
        name="Asha Rao",
        age="30",
        monthly_salary="50000",
        existing_emi="2000",
        loan_amount="300000",
    )


@pytest.fixture
def make_app():
    def _make(name="Asha Rao", age=30, monthly_salary=50000.0, existing_emi=2000.0, loan_amount=300000.0):
        return ValidatedApplication(name, age, float(monthly_salary), float(existing_emi), float(loan_amount))
    return _make
