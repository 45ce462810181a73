# reports.py
"""Downloadable decision summaries: JSON and a one-page PDF letter."""

from datetime import date
from io import BytesIO
from typing import Dict

import pandas as pd
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from eligibility import EligibilityDecision
from formatting import format_inr
from loan_rules import ANNUAL_INTEREST_RATE_PERCENT, TENURE_MONTHS
from validation import ValidatedApplication


def decision_summary(app: ValidatedApplication, decision: EligibilityDecision) -> Dict:
    return {
        'name': app.name,
        'age': app.age,
        'monthly_salary': app.monthly_salary,
        'existing_emi': app.existing_emi,
        'loan_amount': app.loan_amount,
        'eligible': decision.is_eligible,
        'reasons': list(decision.reasons),
        'dti_percent': decision.dti,
        'proposed_emi': decision.proposed_emi,
        'tenure_months': TENURE_MONTHS,
        'annual_rate_percent': ANNUAL_INTEREST_RATE_PERCENT,
        'total_payable': decision.total_payable,
        'interest_payable': decision.interest_payable,
    }


def summary_json(app: ValidatedApplication, decision: EligibilityDecision) -> str:
    return pd.Series(decision_summary(app, decision)).to_json(force_ascii=False)


def _rs(amount: float) -> str:
    # built-in PDF fonts have no rupee glyph
    return f"Rs. {format_inr(amount)}"


def decision_letter_pdf(app: ValidatedApplication, decision: EligibilityDecision) -> bytes:
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4
    c.setFont("Helvetica-Bold", 14)
    c.drawCentredString(width / 2, height - 60, "Loan Eligibility Decision")
    c.line(50, height - 75, width - 50, height - 75)
    y = height - 110
    c.setFont("Helvetica", 10)
    c.drawString(50, y, f"Date: {date.today().strftime('%d %B %Y')}")
    y -= 20
    c.drawString(50, y, f"Applicant: {app.name} (Age {app.age})")
    y -= 30

    c.setFont("Helvetica-Bold", 12)
    headline = "Eligible for Loan" if decision.is_eligible else "Not Eligible for Loan"
    c.drawString(50, y, headline)
    y -= 25

    c.setFont("Helvetica", 10)
    details = [
        ("Monthly Salary", _rs(app.monthly_salary)),
        ("Existing EMI/Debts", _rs(app.existing_emi)),
        ("Loan Amount Requested", _rs(app.loan_amount)),
        ("Debt-to-Income Ratio", f"{decision.dti:.2f}%"),
        ("Proposed Monthly EMI", _rs(decision.proposed_emi)),
        ("Loan Tenure", f"{TENURE_MONTHS} months ({TENURE_MONTHS // 12} years)"),
        ("Interest Rate", f"{ANNUAL_INTEREST_RATE_PERCENT:.1f}% p.a."),
        ("Total Interest Payable", _rs(decision.interest_payable)),
        ("Total Amount Payable", _rs(decision.total_payable)),
    ]
    for k, v in details:
        c.drawString(70, y, f"{k}:")
        c.drawString(250, y, v)
        y -= 15

    if decision.reasons:
        y -= 15
        c.setFont("Helvetica-Bold", 10)
        c.drawString(60, y, "Reasons:")
        y -= 15
        c.setFont("Helvetica", 10)
        for reason in decision.reasons:
            c.drawString(70, y, "- " + reason.replace("₹", "Rs. "))
            y -= 13

    y -= 30
    c.setFont("Helvetica-Oblique", 8)
    c.drawString(50, y, "This is a system-generated eligibility assessment, not a sanction of credit.")
    c.showPage()
    c.save()
    return buffer.getvalue()
