"""
Filing Report Generator
Assembles the filing summary and the filing calendar from figures the tax
calculators have already produced. CSV export is built from the same lines.

Report sections:
  - Company Income Tax: sales, allowable expenses, assessable profit,
    CIT payable, 4% development levy
  - VAT: output VAT collected, input VAT paid, net VAT to remit
  - Payroll: total PAYE remitted
"""

import csv
import io
from dataclasses import dataclass, field
from datetime import date, datetime

from app.core.currency import format_naira
from app.core.tax_rules.cit import CITCalculator, CompanyStatus
from app.core.tax_rules.vat import VATCalculator, Receipt

CSV_FILENAME = "taxpadi_filing_report.csv"

VAT_FILING_DAY = 21
CIT_FILING_MONTH, CIT_FILING_DAY = 6, 30


@dataclass
class ReportLine:
    section: str
    label: str
    amount: float
    display: str


@dataclass
class FilingReport:
    company_status: CompanyStatus
    year: int
    generated_at: str
    total_sales: float
    total_expenses: float
    assessable_profit: float
    cit_payable: float
    development_levy: float
    output_vat: float
    input_vat: float
    net_vat: float
    total_paye_remitted: float
    lines: list[ReportLine] = field(default_factory=list)
    disclaimer: str = (
        "DISCLAIMER: This report is generated for informational purposes only. "
        "It does not constitute professional tax advice. Please verify all figures "
        "with a qualified tax professional before filing."
    )


@dataclass
class FilingDeadline:
    title: str
    tax_type: str
    due_date: str
    status: str
    description: str


class ReportGenerator:
    def __init__(self, cit_calc: CITCalculator | None = None, vat_calc: VATCalculator | None = None):
        self.cit_calc = cit_calc or CITCalculator()
        self.vat_calc = vat_calc or VATCalculator()

    def generate_filing_report(
        self,
        company_status: CompanyStatus,
        year: int,
        total_sales: float,
        total_expenses: float,
        output_vat: float,
        receipts: list[Receipt],
        total_paye_remitted: float = 0.0,
    ) -> FilingReport:
        assessable_profit = max(total_sales - total_expenses, 0.0)
        cit = self.cit_calc.calculate(assessable_profit, company_status)
        vat = self.vat_calc.summarize(output_vat, receipts)

        small_note = " (Small Company)" if company_status == CompanyStatus.SMALL else ""

        lines = [
            ReportLine("CIT", "Total Sales (Turnover)", total_sales, format_naira(total_sales)),
            ReportLine("CIT", "Total Allowable Expenses", total_expenses, format_naira(total_expenses)),
            ReportLine("CIT", "Assessable Profit", assessable_profit, format_naira(assessable_profit)),
            ReportLine(
                "CIT", "CIT Payable", cit.cit_liability,
                format_naira(cit.cit_liability) + (small_note if cit.cit_liability == 0 else ""),
            ),
            ReportLine(
                "CIT", "4% Development Levy", cit.development_levy,
                format_naira(cit.development_levy) + (small_note if cit.development_levy == 0 else ""),
            ),
            ReportLine("VAT", "Total VAT Collected (Output)", vat.output_vat, format_naira(vat.output_vat)),
            ReportLine("VAT", "Total VAT Paid (Input)", vat.input_vat, format_naira(vat.input_vat)),
            ReportLine("VAT", "Net VAT to Remit", vat.net_vat_payable, format_naira(vat.net_vat_payable)),
            ReportLine("PAYE", "Total PAYE Remitted", total_paye_remitted, format_naira(total_paye_remitted)),
        ]

        return FilingReport(
            company_status=company_status,
            year=year,
            generated_at=datetime.now().isoformat(),
            total_sales=total_sales,
            total_expenses=total_expenses,
            assessable_profit=assessable_profit,
            cit_payable=cit.cit_liability,
            development_levy=cit.development_levy,
            output_vat=vat.output_vat,
            input_vat=vat.input_vat,
            net_vat=vat.net_vat_payable,
            total_paye_remitted=total_paye_remitted,
            lines=lines,
        )

    def to_csv(self, report: FilingReport) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(["Metric", "Value"])
        for line in report.lines:
            writer.writerow([line.label, line.display])
        return buffer.getvalue()

    def generate_filing_calendar(
        self,
        company_status: CompanyStatus,
        year: int,
        current_date: date | None = None,
    ) -> list[FilingDeadline]:
        if current_date is None:
            current_date = date.today()

        if current_date.month == 12:
            vat_due = date(current_date.year + 1, 1, VAT_FILING_DAY)
        else:
            vat_due = date(current_date.year, current_date.month + 1, VAT_FILING_DAY)

        deadlines = [
            FilingDeadline(
                title="Monthly VAT Return",
                tax_type="VAT",
                due_date=vat_due.isoformat(),
                status="pending",
                description=(
                    f"File and remit {current_date.strftime('%B %Y')} VAT by the "
                    f"{VAT_FILING_DAY}st of the following month."
                ),
            ),
        ]

        cit_due = date(year + 1, CIT_FILING_MONTH, CIT_FILING_DAY)
        cit_status = "overdue" if current_date > cit_due else "pending"

        if company_status == CompanyStatus.MEDIUM_LARGE:
            deadlines.append(FilingDeadline(
                title="Annual Company Income Tax Return",
                tax_type="CIT",
                due_date=cit_due.isoformat(),
                status=cit_status,
                description=f"File your {year} CIT return and pay CIT at 30%.",
            ))
            deadlines.append(FilingDeadline(
                title="Development Levy",
                tax_type="Development Levy",
                due_date=cit_due.isoformat(),
                status=cit_status,
                description="Pay the 4% development levy on assessable profit alongside the CIT return.",
            ))
        else:
            deadlines.append(FilingDeadline(
                title="Annual Company Income Tax Return",
                tax_type="CIT",
                due_date=cit_due.isoformat(),
                status=cit_status,
                description=f"File your {year} CIT return to confirm your small company exemption.",
            ))

        return deadlines
