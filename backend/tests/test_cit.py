"""
Tests for company classification, CIT and the Development Levy.

Small company: turnover < ₦100M AND fixed assets < ₦250M (strict).
  - CIT 0%, no Development Levy, no WHT deduction
Medium/Large: everything else.
  - CIT 30%, Development Levy 4% of assessable profit, flat 2% WHT
"""

import pytest
from app.core.tax_rules.cit import CITCalculator, CompanyStatus


@pytest.fixture
def calc():
    return CITCalculator()


class TestCompanyClassification:
    def test_small_company(self, calc):
        assert calc.classify_company(50_000_000, 10_000_000) == CompanyStatus.SMALL

    def test_turnover_at_threshold_is_medium_large(self, calc):
        assert calc.classify_company(100_000_000, 10_000_000) == CompanyStatus.MEDIUM_LARGE

    def test_turnover_just_below_threshold(self, calc):
        assert calc.classify_company(99_999_999, 10_000_000) == CompanyStatus.SMALL

    def test_assets_at_threshold_is_medium_large(self, calc):
        assert calc.classify_company(10_000_000, 250_000_000) == CompanyStatus.MEDIUM_LARGE

    def test_assets_just_below_threshold(self, calc):
        assert calc.classify_company(10_000_000, 249_999_999) == CompanyStatus.SMALL

    def test_both_over(self, calc):
        assert calc.classify_company(500_000_000, 900_000_000) == CompanyStatus.MEDIUM_LARGE

    def test_zero_inputs(self, calc):
        assert calc.classify_company(0, 0) == CompanyStatus.SMALL

    def test_negative_inputs_count_as_zero(self, calc):
        assert calc.classify_company(-5, -5) == CompanyStatus.SMALL

    @pytest.mark.parametrize(
        "turnover,assets",
        [(0, 0), (99_999_999, 249_999_999), (100_000_000, 0), (0, 250_000_000), (1e12, 1e12)],
    )
    def test_small_iff_both_below(self, calc, turnover, assets):
        expected_small = turnover < 100_000_000 and assets < 250_000_000
        assert (calc.classify_company(turnover, assets) == CompanyStatus.SMALL) is expected_small

    def test_classify_carries_verdict_message(self, calc):
        result = calc.classify(50_000_000, 10_000_000)
        assert result.status == CompanyStatus.SMALL
        assert "EXEMPT" in result.message

        result = calc.classify(150_000_000, 10_000_000)
        assert result.status == CompanyStatus.MEDIUM_LARGE
        assert "30%" in result.message


class TestDevelopmentLevy:
    def test_medium_large_levy(self, calc):
        assert calc.calculate_levy(7_250_000, CompanyStatus.MEDIUM_LARGE) == pytest.approx(290_000)

    def test_small_company_pays_nothing(self, calc):
        assert calc.calculate_levy(7_250_000, CompanyStatus.SMALL) == 0

    def test_unknown_status_pays_nothing(self, calc):
        assert calc.calculate_levy(7_250_000, CompanyStatus.UNKNOWN) == 0

    def test_zero_profit(self, calc):
        assert calc.calculate_levy(0, CompanyStatus.MEDIUM_LARGE) == 0

    @pytest.mark.parametrize("profit", [1, 1_000, 25_000_000, 3_333_333_333])
    def test_levy_is_four_percent(self, calc, profit):
        assert calc.calculate_levy(profit, CompanyStatus.MEDIUM_LARGE) == pytest.approx(0.04 * profit)


class TestCITCalculation:
    def test_small_company_zero_tax(self, calc):
        result = calc.calculate(5_000_000, CompanyStatus.SMALL)
        assert result.cit_liability == 0
        assert result.development_levy == 0
        assert result.total_tax_liability == 0

    def test_standard_company_30_percent(self, calc):
        result = calc.calculate(10_000_000, CompanyStatus.MEDIUM_LARGE)
        assert result.cit_rate == 0.30
        assert result.cit_liability == pytest.approx(3_000_000)
        assert result.development_levy == pytest.approx(400_000)
        assert result.total_tax_liability == pytest.approx(3_400_000)

    def test_breakdown_rates(self, calc):
        result = calc.calculate(10_000_000, CompanyStatus.MEDIUM_LARGE)
        assert result.breakdown["cit_rate_applied"] == 30
        assert result.breakdown["development_levy_rate"] == 4


class TestWHTObligation:
    def test_medium_large_deducts_two_percent(self, calc):
        obligation = calc.wht_obligation(CompanyStatus.MEDIUM_LARGE)
        assert obligation.must_deduct is True
        assert obligation.rate == 0.02

    def test_small_company_exempt(self, calc):
        obligation = calc.wht_obligation(CompanyStatus.SMALL)
        assert obligation.must_deduct is False
        assert obligation.rate == 0
