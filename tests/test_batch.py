import io

import pandas as pd
import pytest

from batch import RESULT_COLUMNS, read_applications, sample_applications, screen_applications


def test_sample_applications_screening():
    results = screen_applications(sample_applications().astype(str))
    assert list(results.columns) == RESULT_COLUMNS
    assert list(results['status']) == ['ELIGIBLE', 'NOT_ELIGIBLE', 'NOT_ELIGIBLE']
    assert results.loc[0, 'reasons'] == ''
    assert results.loc[1, 'reasons'] == "Age must be between 21 and 65 years"


def test_invalid_rows_are_reported_not_dropped():
    csv = io.StringIO(
        "name,age,monthly_salary,existing_emi,loan_amount\n"
        "Asha Rao,30,50000,2000,300000\n"
        "X,,14999,0,300000\n"
    )
    results = screen_applications(read_applications(csv))
    assert len(results) == 2
    bad = results.iloc[1]
    assert bad['status'] == 'INVALID'
    assert "Name must be at least 2 characters long" in bad['errors']
    assert "Age is required" in bad['errors']
    assert "Minimum monthly salary should be ₹15,000" in bad['errors']
    assert pd.isna(bad['dti'])


def test_read_applications_keeps_text():
    df = read_applications(io.StringIO("name,age,monthly_salary,existing_emi,loan_amount\nAsha,30,,0,50000\n"))
    assert df.loc[0, 'monthly_salary'] == ''
    assert df.loc[0, 'age'] == '30'


def test_missing_columns_raise():
    with pytest.raises(ValueError, match="existing_emi, loan_amount"):
        screen_applications(pd.DataFrame([{'name': 'Asha', 'age': '30', 'monthly_salary': '50000'}]))
