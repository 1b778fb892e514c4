"""
PAYE / Personal Income Tax (PIT) Calculator
Simplified progressive schedule used for both payroll (PAYE) and freelancer
(PIT) estimates.

Exemption: gross annual income of ₦800,000 or less pays nothing and has no
statutory deductions.

Statutory deductions (above the exemption threshold):
  - Pension: 8% of gross
  - National Housing Fund (NHF): 2.5% of gross
  - Consolidated Relief Allowance: ₦200,000 + 20% of gross

Tax Brackets (applied to taxable income):
  (a) First ₦300,000 at 7%
  (b) Next ₦300,000 at 11%
  (c) Next ₦500,000 at 15%
  (d) Next ₦500,000 at 19%
  (e) Next ₦1,600,000 at 21%
  (f) Above ₦3,200,000 at 24%
"""

from dataclasses import dataclass, field


TAX_BRACKETS: list[tuple[float, float]] = [
    (300_000.0, 0.07),
    (300_000.0, 0.11),
    (500_000.0, 0.15),
    (500_000.0, 0.19),
    (1_600_000.0, 0.21),
    (float("inf"), 0.24),
]

EXEMPTION_THRESHOLD = 800_000.0
PENSION_RATE = 0.08
NHF_RATE = 0.025
RELIEF_FIXED = 200_000.0
RELIEF_RATE = 0.20

FREELANCE_EXEMPTION_NOTICE = (
    "Your income is below the ₦800,000 threshold, so you are exempt from "
    "Personal Income Tax."
)


@dataclass
class BracketBreakdown:
    bracket_floor: float
    bracket_ceiling: float | None
    rate: float
    taxable_in_bracket: float
    tax_in_bracket: float


@dataclass
class PAYEResult:
    gross_income: float
    tax: float
    pension_contribution: float
    housing_fund_contribution: float
    net_pay: float
    consolidated_relief: float = 0.0
    taxable_income: float = 0.0
    is_exempt: bool = False
    bracket_breakdown: list[BracketBreakdown] = field(default_factory=list)


@dataclass
class MonthlyPAYE:
    monthly_gross: float
    annual_gross: float
    monthly_paye: float
    monthly_pension: float
    monthly_nhf: float
    monthly_net_pay: float
    annual_tax: float


@dataclass
class FreelanceEstimate:
    annual_income: float
    annual_tax: float
    is_exempt: bool
    notice: str | None = None


class PITCalculator:
    """
    Deterministic PAYE/PIT calculator.
    Results are left unrounded so tax + pension + NHF + net pay always adds
    back up to the gross income.
    """

    def calculate(self, gross_income: float) -> PAYEResult:
        gross_income = max(gross_income, 0.0)

        if gross_income <= EXEMPTION_THRESHOLD:
            return PAYEResult(
                gross_income=gross_income,
                tax=0.0,
                pension_contribution=0.0,
                housing_fund_contribution=0.0,
                net_pay=gross_income,
                is_exempt=True,
            )

        pension = gross_income * PENSION_RATE
        nhf = gross_income * NHF_RATE
        consolidated_relief = RELIEF_FIXED + RELIEF_RATE * gross_income
        taxable_income = gross_income - pension - nhf - consolidated_relief

        if taxable_income <= 0:
            return PAYEResult(
                gross_income=gross_income,
                tax=0.0,
                pension_contribution=pension,
                housing_fund_contribution=nhf,
                net_pay=gross_income - pension - nhf,
                consolidated_relief=consolidated_relief,
                taxable_income=0.0,
            )

        bracket_breakdown = self._calculate_brackets(taxable_income)
        tax = sum(b.tax_in_bracket for b in bracket_breakdown)

        return PAYEResult(
            gross_income=gross_income,
            tax=tax,
            pension_contribution=pension,
            housing_fund_contribution=nhf,
            net_pay=gross_income - tax - pension - nhf,
            consolidated_relief=consolidated_relief,
            taxable_income=taxable_income,
            bracket_breakdown=bracket_breakdown,
        )

    def _calculate_brackets(self, taxable_income: float) -> list[BracketBreakdown]:
        # Every band is visited; exhausted bands contribute a zero row.
        breakdown = []
        remaining = taxable_income
        cumulative_floor = 0.0

        for bracket_size, rate in TAX_BRACKETS:
            taxable_in_bracket = min(remaining, bracket_size)

            breakdown.append(
                BracketBreakdown(
                    bracket_floor=cumulative_floor,
                    bracket_ceiling=cumulative_floor + bracket_size if bracket_size != float("inf") else None,
                    rate=rate,
                    taxable_in_bracket=taxable_in_bracket,
                    tax_in_bracket=taxable_in_bracket * rate,
                )
            )

            remaining -= taxable_in_bracket
            cumulative_floor += bracket_size

        return breakdown

    def estimate_monthly_paye(self, monthly_gross: float) -> MonthlyPAYE:
        monthly_gross = max(monthly_gross, 0.0)
        annual_gross = monthly_gross * 12
        result = self.calculate(annual_gross)

        return MonthlyPAYE(
            monthly_gross=monthly_gross,
            annual_gross=annual_gross,
            monthly_paye=result.tax / 12,
            monthly_pension=result.pension_contribution / 12,
            monthly_nhf=result.housing_fund_contribution / 12,
            monthly_net_pay=result.net_pay / 12,
            annual_tax=result.tax,
        )

    def estimate_freelance_pit(self, annual_income: float) -> FreelanceEstimate:
        annual_income = max(annual_income, 0.0)
        result = self.calculate(annual_income)
        is_exempt = annual_income <= EXEMPTION_THRESHOLD

        return FreelanceEstimate(
            annual_income=annual_income,
            annual_tax=result.tax,
            is_exempt=is_exempt,
            notice=FREELANCE_EXEMPTION_NOTICE if is_exempt else None,
        )
