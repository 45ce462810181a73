# batch.py
"""
Bulk screening of single-applicant rows from a CSV upload.

Each row is an independent application; a row that fails validation is reported
as INVALID with its field errors instead of stopping the run.
"""

import logging

import pandas as pd

from eligibility import check_application
from loan_rules import FIELDS
from validation import RawApplication

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['name', 'status', 'eligible', 'reasons', 'errors',
                  'dti', 'proposed_emi', 'total_payable', 'interest_payable']


def read_applications(source) -> pd.DataFrame:
    """Read a CSV keeping every cell as text, the way the form receives it."""
    return pd.read_csv(source, dtype=str, keep_default_na=False)


def sample_applications() -> pd.DataFrame:
    return pd.DataFrame([
        {'name': 'Asha Rao', 'age': 30, 'monthly_salary': 50000, 'existing_emi': 2000, 'loan_amount': 300000},
        {'name': 'Rahul Sharma', 'age': 18, 'monthly_salary': 50000, 'existing_emi': 0, 'loan_amount': 100000},
        {'name': 'Meera Iyer', 'age': 40, 'monthly_salary': 24000, 'existing_emi': 1000, 'loan_amount': 600000},
    ], columns=list(FIELDS))


def screen_applications(df: pd.DataFrame) -> pd.DataFrame:
    missing = [col for col in FIELDS if col not in df.columns]
    if missing:
        raise ValueError(f"CSV is missing required column(s): {', '.join(missing)}")

    results = []
    for idx, row in df.iterrows():
        raw = RawApplication(**{col: '' if pd.isna(row[col]) else str(row[col]) for col in FIELDS})
        validation, decision = check_application(raw)
        r = dict.fromkeys(RESULT_COLUMNS)
        r['name'] = raw.name.strip()
        if decision is None:
            logger.warning("Row %s failed validation: %s", idx, dict(validation.errors))
            r['status'] = 'INVALID'
            r['errors'] = '; '.join(validation.errors.values())
        else:
            r['status'] = 'ELIGIBLE' if decision.is_eligible else 'NOT_ELIGIBLE'
            r['eligible'] = decision.is_eligible
            r['reasons'] = '; '.join(decision.reasons)
            r['dti'] = decision.dti
            r['proposed_emi'] = decision.proposed_emi
            r['total_payable'] = decision.total_payable
            r['interest_payable'] = decision.interest_payable
        results.append(r)
    return pd.DataFrame(results, columns=RESULT_COLUMNS)
