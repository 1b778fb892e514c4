"""
Tests for the PAYE / PIT Calculator.

Exempt at or below ₦800,000 gross. Above it:
  pension 8%, NHF 2.5%, relief ₦200,000 + 20% of gross, then
  7% / 11% / 15% / 19% / 21% on bands of 300K / 300K / 500K / 500K / 1.6M
  and 24% on the remainder.
"""

import pytest
from app.core.tax_rules.pit import PITCalculator, TAX_BRACKETS


@pytest.fixture
def calc():
    return PITCalculator()


def _conserves(result):
    total = result.tax + result.pension_contribution + result.housing_fund_contribution + result.net_pay
    return total == pytest.approx(result.gross_income, rel=1e-6)


class TestPAYEExemption:
    def test_zero_income(self, calc):
        result = calc.calculate(0)
        assert result.tax == 0
        assert result.net_pay == 0
        assert result.is_exempt is True

    @pytest.mark.parametrize("gross", [1, 500_000, 799_999, 800_000])
    def test_at_or_below_threshold_is_untouched(self, calc, gross):
        result = calc.calculate(gross)
        assert result.tax == 0
        assert result.pension_contribution == 0
        assert result.housing_fund_contribution == 0
        assert result.net_pay == gross
        assert result.bracket_breakdown == []

    def test_just_above_threshold_is_taxed(self, calc):
        result = calc.calculate(800_001)
        assert result.is_exempt is False
        assert result.pension_contribution > 0
        assert result.tax > 0


class TestPAYEBrackets:
    def test_worked_example(self, calc):
        # 250,000/month * 12
        result = calc.calculate(3_000_000)
        assert result.pension_contribution == pytest.approx(240_000)
        assert result.housing_fund_contribution == pytest.approx(75_000)
        assert result.consolidated_relief == pytest.approx(800_000)
        assert result.taxable_income == pytest.approx(1_885_000)
        # 21,000 + 33,000 + 75,000 + 95,000 + 285,000 * 21%
        assert result.tax == pytest.approx(283_850)
        assert result.net_pay == pytest.approx(2_401_150)

    def test_within_second_band(self, calc):
        # taxable 425,500 = 300,000 @ 7% + 125,500 @ 11%
        result = calc.calculate(900_000)
        assert result.taxable_income == pytest.approx(425_500)
        assert result.tax == pytest.approx(34_805)
        assert result.net_pay == pytest.approx(770_695)

    def test_into_top_band(self, calc):
        # taxable 6,750,000: first 3.2M of bands = 560,000, 3.55M @ 24% = 852,000
        result = calc.calculate(10_000_000)
        assert result.taxable_income == pytest.approx(6_750_000)
        assert result.tax == pytest.approx(1_412_000)

    def test_every_band_is_visited(self, calc):
        result = calc.calculate(900_000)
        assert len(result.bracket_breakdown) == len(TAX_BRACKETS)
        assert [b.rate for b in result.bracket_breakdown] == [r for _, r in TAX_BRACKETS]
        assert all(b.tax_in_bracket == 0 for b in result.bracket_breakdown[2:])

    def test_top_band_is_unbounded(self, calc):
        result = calc.calculate(50_000_000)
        top = result.bracket_breakdown[-1]
        assert top.bracket_floor == 3_200_000
        assert top.bracket_ceiling is None
        assert top.rate == 0.24

    def test_bands_are_capped_at_width(self, calc):
        result = calc.calculate(50_000_000)
        widths = [300_000, 300_000, 500_000, 500_000, 1_600_000]
        for band, width in zip(result.bracket_breakdown, widths):
            assert band.taxable_in_bracket == width


class TestPAYEInvariants:
    @pytest.mark.parametrize("gross", [800_001, 900_000, 1_234_567, 3_000_000, 10_000_000, 250_000_000])
    def test_conservation_of_money(self, calc, gross):
        assert _conserves(calc.calculate(gross))

    def test_tax_is_monotonic(self, calc):
        grosses = [800_001, 900_000, 1_500_000, 3_000_000, 4_604_317, 7_500_000, 20_000_000, 1e9]
        taxes = [calc.calculate(g).tax for g in grosses]
        assert taxes == sorted(taxes)

    def test_negative_income_counts_as_zero(self, calc):
        result = calc.calculate(-1)
        assert result.tax == 0
        assert result.net_pay == 0


class TestMonthlyPAYE:
    def test_monthly_figures(self, calc):
        result = calc.estimate_monthly_paye(250_000)
        assert result.annual_gross == 3_000_000
        assert result.annual_tax == pytest.approx(283_850)
        assert result.monthly_paye == pytest.approx(283_850 / 12)
        assert result.monthly_pension == pytest.approx(20_000)
        assert result.monthly_nhf == pytest.approx(6_250)
        assert result.monthly_net_pay == pytest.approx(2_401_150 / 12)

    def test_low_salary_exempt(self, calc):
        result = calc.estimate_monthly_paye(60_000)
        assert result.monthly_paye == 0
        assert result.monthly_net_pay == 60_000


class TestFreelancePIT:
    def test_exempt_income_has_notice(self, calc):
        result = calc.estimate_freelance_pit(800_000)
        assert result.annual_tax == 0
        assert result.is_exempt is True
        assert "₦800,000" in result.notice

    def test_uses_same_schedule_as_payroll(self, calc):
        result = calc.estimate_freelance_pit(5_000_000)
        assert result.is_exempt is False
        assert result.notice is None
        assert result.annual_tax == calc.calculate(5_000_000).tax
