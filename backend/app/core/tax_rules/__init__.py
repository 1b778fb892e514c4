from app.core.tax_rules.pit import PITCalculator
from app.core.tax_rules.cit import CITCalculator, CompanyStatus
from app.core.tax_rules.vat import VATCalculator, Receipt

__all__ = ["PITCalculator", "CITCalculator", "CompanyStatus", "VATCalculator", "Receipt"]
