from __future__ import annotations

import io

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table

from .amortization import AmortizationSummary
from .utils import currency


def schedule_report_pdf(summary: AmortizationSummary, loan: float, annual_rate_pct: float, years: int) -> bytes:
    """PDF summary of a loan: key figures followed by the yearly schedule."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4)
    styles = getSampleStyleSheet()
    story = []
    story.append(Paragraph("Amortization Schedule", styles["Title"]))
    story.append(Spacer(1, 12))
    story.append(Paragraph(f"Loan Amount: {currency(loan)}", styles["Normal"]))
    story.append(Paragraph(f"Interest Rate: {annual_rate_pct:.2f}%", styles["Normal"]))
    story.append(Paragraph(f"Loan Term: {years} years", styles["Normal"]))
    story.append(Paragraph(f"Monthly Payment: {currency(summary.payment_monthly)}", styles["Normal"]))
    story.append(Paragraph(f"Total Paid: {currency(summary.total_paid)}", styles["Normal"]))
    story.append(Paragraph(f"Total Interest: {currency(summary.total_interest)}", styles["Normal"]))

    yearly = summary.schedule_yearly
    if not yearly.empty:
        story.append(Spacer(1, 12))
        data = [["Year", "Payment", "Principal", "Interest", "End Balance"]]
        for row in yearly.itertuples(index=False):
            data.append(
                [
                    str(int(row.year)),
                    f"{row.payment:,.2f}",
                    f"{row.principal:,.2f}",
                    f"{row.interest:,.2f}",
                    f"{row.end_balance:,.2f}",
                ]
            )
        story.append(Table(data, repeatRows=1))

    doc.build(story)
    return buffer.getvalue()
