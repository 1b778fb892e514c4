"""
VAT Remittance Calculator
Nets input VAT (paid on purchases, evidenced by receipts) against output VAT
(collected from customers).

  net VAT = output VAT collected - sum(input VAT on receipts)

A negative net figure is a refund position and is reported as-is.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable


@dataclass(frozen=True)
class Receipt:
    id: str
    file_name: str
    vat_amount: float
    date: date


@dataclass
class VATSummary:
    output_vat: float
    input_vat: float
    net_vat_payable: float
    is_refund: bool
    receipt_count: int


class VATCalculator:
    """
    Pure reduction over the receipt ledger; recomputed whenever a receipt is
    added or the output VAT figure changes.
    """

    def total_input_vat(self, receipts: Iterable[Receipt]) -> float:
        return sum((r.vat_amount for r in receipts), 0.0)

    def net_vat(self, output_vat_collected: float, receipts: Iterable[Receipt]) -> float:
        return output_vat_collected - self.total_input_vat(receipts)

    def summarize(self, output_vat_collected: float, receipts: Iterable[Receipt]) -> VATSummary:
        receipts = list(receipts)
        input_vat = self.total_input_vat(receipts)
        net = output_vat_collected - input_vat

        return VATSummary(
            output_vat=output_vat_collected,
            input_vat=input_vat,
            net_vat_payable=net,
            is_refund=net < 0,
            receipt_count=len(receipts),
        )
