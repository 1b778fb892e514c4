"""
Company classification, Company Income Tax (CIT) and Development Levy
Simplified NTA small-company regime.

Small company test (both conditions, strict less-than):
  - Annual turnover below ₦100,000,000
  - Fixed assets below ₦250,000,000
  Reaching either threshold makes the company Medium/Large.

Obligations by status:
  - Small: 0% CIT, exempt from the Development Levy and from deducting WHT
  - Medium/Large: 30% CIT, 4% Development Levy on assessable profit,
    flat 2% WHT deducted on payments for goods and services
  - Unknown (not yet classified): treated like Small, nothing is levied
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class CompanyStatus(str, Enum):
    UNKNOWN = "UNKNOWN"
    SMALL = "SMALL"
    MEDIUM_LARGE = "MEDIUM_LARGE"


SMALL_COMPANY_TURNOVER_THRESHOLD = 100_000_000.0
SMALL_COMPANY_FIXED_ASSETS_THRESHOLD = 250_000_000.0

CIT_RATE_SMALL = 0.00
CIT_RATE_STANDARD = 0.30
DEVELOPMENT_LEVY_RATE = 0.04
WHT_FLAT_RATE = 0.02

VERDICT_MESSAGES = {
    CompanyStatus.SMALL: (
        "You are a Small Company. You are EXEMPT from Company Income Tax (CIT), "
        "Capital Gains Tax (CGT), and the 4% Development Levy. Your primary obligation "
        "is to file returns to prove your status."
    ),
    CompanyStatus.MEDIUM_LARGE: (
        "You are a Medium/Large Company. Your Company Income Tax (CIT) rate is 30% "
        "and you are required to pay the 4% Development Levy."
    ),
    CompanyStatus.UNKNOWN: "Complete the classifier to determine your company's tax status.",
}


@dataclass
class ClassificationResult:
    status: CompanyStatus
    turnover: float
    fixed_assets: float
    message: str


@dataclass
class CITResult:
    company_status: CompanyStatus
    assessable_profit: float
    cit_rate: float
    cit_liability: float
    development_levy: float
    total_tax_liability: float
    breakdown: dict = field(default_factory=dict)


@dataclass
class WHTObligation:
    company_status: CompanyStatus
    must_deduct: bool
    rate: float
    note: str


class CITCalculator:
    """
    Deterministic company classifier and CIT/levy calculator.
    Every method is total over non-negative amounts; negatives count as 0.
    """

    def classify_company(self, turnover: float, fixed_assets: float) -> CompanyStatus:
        turnover = max(turnover, 0.0)
        fixed_assets = max(fixed_assets, 0.0)

        if (
            turnover < SMALL_COMPANY_TURNOVER_THRESHOLD
            and fixed_assets < SMALL_COMPANY_FIXED_ASSETS_THRESHOLD
        ):
            return CompanyStatus.SMALL
        return CompanyStatus.MEDIUM_LARGE

    def classify(self, turnover: float, fixed_assets: float) -> ClassificationResult:
        status = self.classify_company(turnover, fixed_assets)
        logger.info(
            "Company classified as %s (turnover=%s, fixed_assets=%s)",
            status.value, turnover, fixed_assets,
        )
        return ClassificationResult(
            status=status,
            turnover=max(turnover, 0.0),
            fixed_assets=max(fixed_assets, 0.0),
            message=VERDICT_MESSAGES[status],
        )

    def calculate_levy(self, assessable_profit: float, status: CompanyStatus) -> float:
        if status != CompanyStatus.MEDIUM_LARGE:
            return 0.0
        return max(assessable_profit, 0.0) * DEVELOPMENT_LEVY_RATE

    def calculate(self, assessable_profit: float, status: CompanyStatus) -> CITResult:
        assessable_profit = max(assessable_profit, 0.0)

        if status == CompanyStatus.MEDIUM_LARGE:
            cit_rate = CIT_RATE_STANDARD
        else:
            cit_rate = CIT_RATE_SMALL

        cit_liability = assessable_profit * cit_rate
        development_levy = self.calculate_levy(assessable_profit, status)
        total_tax_liability = cit_liability + development_levy

        breakdown = {
            "cit_rate_applied": cit_rate * 100,
            "cit_amount": round(cit_liability, 2),
            "development_levy_rate": DEVELOPMENT_LEVY_RATE * 100 if status == CompanyStatus.MEDIUM_LARGE else 0,
            "development_levy_amount": round(development_levy, 2),
        }

        return CITResult(
            company_status=status,
            assessable_profit=assessable_profit,
            cit_rate=cit_rate,
            cit_liability=cit_liability,
            development_levy=development_levy,
            total_tax_liability=total_tax_liability,
            breakdown=breakdown,
        )

    def wht_obligation(self, status: CompanyStatus) -> WHTObligation:
        if status == CompanyStatus.MEDIUM_LARGE:
            return WHTObligation(
                company_status=status,
                must_deduct=True,
                rate=WHT_FLAT_RATE,
                note=(
                    "A flat 2% WHT applies to goods and services. Deduct it from "
                    "payments to your vendors."
                ),
            )
        return WHTObligation(
            company_status=status,
            must_deduct=False,
            rate=0.0,
            note="Small companies are exempt from deducting Withholding Tax (WHT).",
        )
