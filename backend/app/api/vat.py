"""
VAT tracker API routes.
Receipts are uploaded as images, their VAT is read by the extractor and
recorded in the ledger; the net remittance is recomputed on every read.
"""

import logging
import uuid
from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, HTTPException, Depends, File, UploadFile

from app.ai.receipt_extractor import ACCEPTED_MIME_TYPES, ReceiptExtractionError, ReceiptVATExtractor
from app.api.deps import get_company_state, get_receipt_extractor, get_receipt_repository, require_feature
from app.core.permissions import Feature
from app.core.tax_rules.vat import Receipt, VATCalculator
from app.repositories import CompanyStateStore, ReceiptRepository
from app.schemas.schemas import OutputVATUpdate, ReceiptResponse

logger = logging.getLogger(__name__)

router = APIRouter()
vat_calc = VATCalculator()


def _receipt_response(receipt: Receipt) -> ReceiptResponse:
    return ReceiptResponse(
        id=receipt.id,
        file_name=receipt.file_name,
        vat_amount=receipt.vat_amount,
        date=receipt.date,
    )


@router.post("/receipts", response_model=ReceiptResponse, status_code=201)
async def upload_receipt(
    file: UploadFile = File(...),
    receipts: ReceiptRepository = Depends(get_receipt_repository),
    extractor: ReceiptVATExtractor = Depends(get_receipt_extractor),
    _user=Depends(require_feature(Feature.VAT)),
):
    """Extract the VAT from a receipt image and add it to the ledger."""
    if file.content_type not in ACCEPTED_MIME_TYPES:
        raise HTTPException(
            status_code=415,
            detail=f"Unsupported file type {file.content_type}. Upload a PNG, JPEG or WEBP image.",
        )

    image_bytes = await file.read()

    try:
        vat_amount = await extractor.extract_vat(image_bytes, file.content_type)
    except ReceiptExtractionError as e:
        raise HTTPException(status_code=502, detail=e.message)

    receipt = receipts.add(Receipt(
        id=uuid.uuid4().hex,
        file_name=file.filename or "receipt",
        vat_amount=vat_amount,
        date=date.today(),
    ))
    logger.info("Recorded receipt %s with input VAT %s", receipt.file_name, receipt.vat_amount)
    return _receipt_response(receipt)


@router.get("/receipts", response_model=list[ReceiptResponse])
async def list_receipts(
    receipts: ReceiptRepository = Depends(get_receipt_repository),
    _user=Depends(require_feature(Feature.VAT)),
):
    return [_receipt_response(r) for r in receipts.list()]


@router.put("/output")
async def set_output_vat(
    data: OutputVATUpdate,
    state: CompanyStateStore = Depends(get_company_state),
    receipts: ReceiptRepository = Depends(get_receipt_repository),
    _user=Depends(require_feature(Feature.VAT)),
):
    """Record the output VAT collected from customers."""
    state.set_output_vat(data.output_vat)
    return asdict(vat_calc.summarize(state.output_vat, receipts.list()))


@router.get("/summary")
async def vat_summary(
    state: CompanyStateStore = Depends(get_company_state),
    receipts: ReceiptRepository = Depends(get_receipt_repository),
    _user=Depends(require_feature(Feature.VAT)),
):
    return asdict(vat_calc.summarize(state.output_vat, receipts.list()))
