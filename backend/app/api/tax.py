"""
Tax calculation API routes.
Exposes the classifier, levy, CIT and PAYE/PIT calculators.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from app.api.deps import get_company_state, require_feature
from app.core.permissions import Feature
from app.core.tax_rules.cit import CITCalculator, VERDICT_MESSAGES
from app.core.tax_rules.pit import PITCalculator
from app.repositories import CompanyStateStore
from app.schemas.schemas import ClassifyRequest, LevyRequest, PAYERequest, PITRequest

router = APIRouter()

pit_calc = PITCalculator()
cit_calc = CITCalculator()


@router.post("/classify")
async def classify_company(
    data: ClassifyRequest,
    state: CompanyStateStore = Depends(get_company_state),
    _user=Depends(require_feature(Feature.CLASSIFIER)),
):
    """Classify the company as Small or Medium/Large and remember the verdict."""
    result = cit_calc.classify(data.turnover, data.fixed_assets)
    state.set_status(result.status)
    return asdict(result)


@router.get("/status")
async def get_company_status(
    state: CompanyStateStore = Depends(get_company_state),
    _user=Depends(require_feature(Feature.CLASSIFIER)),
):
    status = state.status
    return {"status": status, "message": VERDICT_MESSAGES[status]}


@router.post("/levy")
async def calculate_levy(
    data: LevyRequest,
    state: CompanyStateStore = Depends(get_company_state),
    _user=Depends(require_feature(Feature.LEVY)),
):
    """4% Development Levy; zero unless the company is Medium/Large."""
    status = data.company_status or state.status
    return {
        "company_status": status,
        "assessable_profit": data.assessable_profit,
        "development_levy": cit_calc.calculate_levy(data.assessable_profit, status),
        "wht": asdict(cit_calc.wht_obligation(status)),
    }


@router.post("/cit")
async def calculate_cit(
    data: LevyRequest,
    state: CompanyStateStore = Depends(get_company_state),
    _user=Depends(require_feature(Feature.LEVY)),
):
    status = data.company_status or state.status
    return asdict(cit_calc.calculate(data.assessable_profit, status))


@router.post("/paye")
async def estimate_paye(
    data: PAYERequest,
    _user=Depends(require_feature(Feature.PAYE)),
):
    """Monthly PAYE, pension, NHF and net pay from a gross monthly salary."""
    return asdict(pit_calc.estimate_monthly_paye(data.monthly_gross))


@router.post("/pit")
async def estimate_pit(
    data: PITRequest,
    _user=Depends(require_feature(Feature.PAYE)),
):
    """Annual Personal Income Tax estimate for freelancers."""
    return asdict(pit_calc.estimate_freelance_pit(data.annual_income))


@router.post("/pit/breakdown")
async def pit_breakdown(
    data: PITRequest,
    _user=Depends(require_feature(Feature.PAYE)),
):
    """Full bracket breakdown for an annual gross income."""
    return asdict(pit_calc.calculate(data.annual_income))
