"""
Prompts for the receipt VAT extractor.
"""

RECEIPT_VAT_PROMPT = (
    "Analyze this receipt. Extract the VAT (Value Added Tax) amount. "
    "Return a JSON object with a single key 'vatAmount' and its numeric value. "
    "If no VAT is found, the value should be 0."
)

RECEIPT_SYSTEM_PROMPT = (
    "You read Nigerian purchase receipts and invoices. Amounts are in Naira (₦). "
    "Respond with JSON only, no prose."
)
