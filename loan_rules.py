# loan_rules.py
"""
Personal loan policy constants.

Rate and tenure are fixed for every applicant; the UI displays them but never lets
a user change them. Adjust here if the lending policy changes.
"""

# ---------------------------
# Loan terms
# ---------------------------
ANNUAL_INTEREST_RATE_PERCENT = 10.5   # typical personal loan
TENURE_MONTHS = 60                    # 5 years

# ---------------------------
# Eligibility rules
# ---------------------------
MIN_AGE = 21
MAX_AGE = 65
LOAN_TO_INCOME_MULTIPLE = 15
MAX_DTI_PERCENT = 50
HIGH_VALUE_LOAN_THRESHOLD = 5_00_000
HIGH_VALUE_MIN_SALARY = 25_000

# ---------------------------
# Input validation
# ---------------------------
MIN_NAME_LENGTH = 2
AGE_LOWER_BOUND = 1
AGE_UPPER_BOUND = 120
MIN_MONTHLY_SALARY = 15_000
MIN_LOAN_AMOUNT = 50_000

# field name -> label used in messages and form widgets
FIELD_LABELS = {
    'name': 'Name',
    'age': 'Age',
    'monthly_salary': 'Monthly salary',
    'existing_emi': 'Existing EMI',
    'loan_amount': 'Loan amount',
}
FIELDS = tuple(FIELD_LABELS)
