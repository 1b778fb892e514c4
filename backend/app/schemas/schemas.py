"""
Pydantic schemas for API request/response validation.
"""

import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field, field_validator

from app.core.currency import parse_amount
from app.core.permissions import Feature, Role
from app.core.tax_rules.cit import CompanyStatus


# Amounts arrive either as numbers or as the text a user typed ("₦50,000,000").
Amount = Annotated[float, BeforeValidator(parse_amount)]


# ── Auth Schemas ──

class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3)


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: Role


class UserWithFeaturesResponse(UserResponse):
    features: list[Feature]


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse
    default_feature: Feature


# ── Admin Schemas ──

class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    role: Role = Role.EMPLOYEE

    @field_validator("name", "email")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class UserRoleUpdate(BaseModel):
    role: Role


# ── Tax Schemas ──

class ClassifyRequest(BaseModel):
    turnover: Amount = 0.0
    fixed_assets: Amount = 0.0


class LevyRequest(BaseModel):
    assessable_profit: Amount = 0.0
    company_status: CompanyStatus | None = Field(
        default=None, description="Defaults to the most recent classification verdict"
    )


class PAYERequest(BaseModel):
    monthly_gross: Amount


class PITRequest(BaseModel):
    annual_income: Amount


# ── VAT Schemas ──

class OutputVATUpdate(BaseModel):
    output_vat: Amount


class ReceiptResponse(BaseModel):
    id: str
    file_name: str
    vat_amount: float
    date: datetime.date


# ── Report Schemas ──

class FilingReportRequest(BaseModel):
    year: int = Field(default_factory=lambda: datetime.date.today().year, ge=2020, le=2100)
    total_sales: Amount = 0.0
    total_expenses: Amount = 0.0
    total_paye_remitted: Amount = 0.0
    output_vat: Amount | None = Field(
        default=None, description="Defaults to the output VAT recorded on the VAT tracker"
    )
