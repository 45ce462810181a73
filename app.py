# app.py
"""
Streamlit Loan Eligibility Checker
Checks a personal loan request against fixed lending rules (10.5% p.a., 60 months).
Run:
    pip install -e .
    streamlit run app.py

Single applicant entry with inline validation, or CSV bulk screening.
"""

import logging

import pandas as pd
import streamlit as st

from batch import read_applications, sample_applications, screen_applications
from eligibility import check_application
from formatting import format_rupees
from loan_rules import (
    ANNUAL_INTEREST_RATE_PERCENT,
    FIELDS,
    MIN_LOAN_AMOUNT,
    MIN_MONTHLY_SALARY,
    TENURE_MONTHS,
)
from reports import decision_letter_pdf, summary_json
from validation import RawApplication

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="Loan Eligibility Checker", layout="centered")

# ---------------------------
# Form widgets
# ---------------------------
FORM_WIDGETS = {
    'name': ("Full Name", "Enter your full name", None),
    'age': ("Age", "Enter your age", None),
    'monthly_salary': ("Monthly Salary (₹)", "Enter monthly salary",
                       f"Minimum: {format_rupees(MIN_MONTHLY_SALARY)} per month"),
    'existing_emi': ("Existing EMI/Debts (₹)", "Enter existing EMI", None),
    'loan_amount': ("Loan Amount Requested (₹)", "Enter loan amount",
                    f"Minimum: {format_rupees(MIN_LOAN_AMOUNT)}"),
}


# ---------------------------
# Session state
# ---------------------------
def reset_form() -> None:
    for key in FIELDS:
        st.session_state[key] = ""
    st.session_state.errors = {}
    st.session_state.application = None
    st.session_state.decision = None


def clear_field_error(key: str) -> None:
    st.session_state.errors.pop(key, None)


def run_check() -> None:
    raw = RawApplication(**{key: st.session_state[key] for key in FIELDS})
    result, decision = check_application(raw)
    st.session_state.errors = dict(result.errors)
    if decision is not None:
        st.session_state.application = result.application
        st.session_state.decision = decision


if "errors" not in st.session_state:
    reset_form()

# ---------------------------
# Single applicant form
# ---------------------------
def field_input(key: str) -> None:
    label, placeholder, hint = FORM_WIDGETS[key]
    st.text_input(label, key=key, placeholder=placeholder, on_change=clear_field_error, args=(key,))
    error = st.session_state.errors.get(key)
    if error:
        st.error(error)
    elif hint:
        st.caption(hint)


def single_app_form():
    col1, col2 = st.columns(2)
    with col1:
        field_input('name')
    with col2:
        field_input('age')
    col3, col4 = st.columns(2)
    with col3:
        field_input('monthly_salary')
    with col4:
        field_input('existing_emi')
    field_input('loan_amount')

    b1, b2 = st.columns([1, 3])
    with b1:
        st.button("Reset", on_click=reset_form)
    with b2:
        st.button("Check Loan Eligibility", type="primary", on_click=run_check)

    if st.session_state.decision is not None:
        show_decision_ui(st.session_state.application, st.session_state.decision)


# ---------------------------
# Decision UI rendering
# ---------------------------
def loan_details_table(decision) -> pd.DataFrame:
    return pd.DataFrame([
        ("Debt-to-Income Ratio", f"{decision.dti:.2f}%"),
        ("Proposed Monthly EMI", format_rupees(decision.proposed_emi)),
        ("Loan Tenure", f"{TENURE_MONTHS} months ({TENURE_MONTHS // 12} years)"),
        ("Interest Rate", f"{ANNUAL_INTEREST_RATE_PERCENT:.1f}% per annum"),
        ("Total Interest Payable", format_rupees(decision.interest_payable)),
        ("Total Amount Payable", format_rupees(decision.total_payable)),
    ], columns=["Item", "Value"]).set_index("Item")


def show_decision_ui(applicant, decision):
    st.markdown("---")
    if decision.is_eligible:
        st.success("### ✓ Eligible for Loan")
        st.write("Congratulations! You are eligible for the loan.")
        st.markdown("**Loan Details:**")
    else:
        st.error("### ✗ Not Eligible for Loan")
        st.markdown("**Reasons:**")
        for reason in decision.reasons:
            st.markdown(f"- {reason}")
        st.markdown("**Calculated figures (for reference):**")
    st.table(loan_details_table(decision))

    file_stem = applicant.name.replace(' ', '_')
    d1, d2 = st.columns(2)
    with d1:
        st.download_button("Download summary (JSON)", summary_json(applicant, decision),
                           file_name=f"eligibility_{file_stem}.json", mime="application/json")
    with d2:
        st.download_button("Download decision letter (PDF)", decision_letter_pdf(applicant, decision),
                           file_name=f"eligibility_{file_stem}.pdf", mime="application/pdf")


# ---------------------------
# Bulk CSV processing
# ---------------------------
def bulk_csv_processor():
    st.subheader("Bulk Upload (CSV)")
    st.markdown("CSV must contain these columns (case-sensitive): `" + ",".join(FIELDS) + "`")
    uploaded = st.file_uploader("Upload CSV", type=["csv"])
    if st.checkbox("Show example template / download sample CSV"):
        sample = sample_applications()
        st.dataframe(sample)
        st.download_button("Download sample CSV", sample.to_csv(index=False),
                           file_name="sample_applicants.csv", mime="text/csv")
    if uploaded is not None:
        df = read_applications(uploaded)
        st.write(f"Uploaded {len(df)} rows")
        try:
            results_df = screen_applications(df)
        except ValueError as e:
            st.error(str(e))
            return
        invalid = int((results_df['status'] == 'INVALID').sum())
        if invalid:
            st.warning(f"{invalid} row(s) failed validation; see the `errors` column.")
        st.dataframe(results_df)
        st.download_button("Download results CSV", results_df.to_csv(index=False),
                           file_name="loan_eligibility_results.csv", mime="text/csv")
        st.download_button("Download results JSON", results_df.to_json(orient='records'),
                           file_name="loan_eligibility_results.json", mime="application/json")


# ---------------------------
# UI / App layout
# ---------------------------
st.title("Loan Eligibility Checker")
st.caption(f"Personal loan at {ANNUAL_INTEREST_RATE_PERCENT:.1f}% p.a. over {TENURE_MONTHS} months.")

mode = st.radio("Mode", ["Single Applicant", "Bulk CSV"], horizontal=True)

if mode == "Single Applicant":
    single_app_form()
else:
    bulk_csv_processor()

st.markdown("---")
st.caption("Rules: age 21-65, loan up to 15x monthly salary, debt-to-income up to 50%, "
           "₹25,000 minimum salary for loans above ₹5,00,000.")
