"""
Reports API routes.
Generates the filing summary, its CSV export and the filing calendar.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.api.deps import get_company_state, get_receipt_repository, require_feature
from app.core.permissions import Feature
from app.core.reports import CSV_FILENAME, FilingReport, ReportGenerator
from app.repositories import CompanyStateStore, ReceiptRepository
from app.schemas.schemas import FilingReportRequest

router = APIRouter()
report_gen = ReportGenerator()


def _build_report(
    data: FilingReportRequest,
    state: CompanyStateStore,
    receipts: ReceiptRepository,
) -> FilingReport:
    output_vat = data.output_vat if data.output_vat is not None else state.output_vat
    return report_gen.generate_filing_report(
        company_status=state.status,
        year=data.year,
        total_sales=data.total_sales,
        total_expenses=data.total_expenses,
        output_vat=output_vat,
        receipts=receipts.list(),
        total_paye_remitted=data.total_paye_remitted,
    )


@router.post("/generate")
async def generate_report(
    data: FilingReportRequest,
    state: CompanyStateStore = Depends(get_company_state),
    receipts: ReceiptRepository = Depends(get_receipt_repository),
    _user=Depends(require_feature(Feature.REPORTS)),
):
    """Filing summary built from the current classification and VAT ledger."""
    return asdict(_build_report(data, state, receipts))


@router.post("/export")
async def export_report_csv(
    data: FilingReportRequest,
    state: CompanyStateStore = Depends(get_company_state),
    receipts: ReceiptRepository = Depends(get_receipt_repository),
    _user=Depends(require_feature(Feature.REPORTS)),
):
    report = _build_report(data, state, receipts)
    return Response(
        content=report_gen.to_csv(report),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )


@router.get("/deadlines")
async def filing_deadlines(
    year: int,
    state: CompanyStateStore = Depends(get_company_state),
    _user=Depends(require_feature(Feature.REPORTS)),
):
    deadlines = report_gen.generate_filing_calendar(state.status, year)
    return {"deadlines": [asdict(d) for d in deadlines], "total": len(deadlines)}
