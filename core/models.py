from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils import nz


class EntitlementInput(BaseModel):
    county_limit: float = Field(0.0, description="County conforming loan limit.")
    existing_loan_amount: float = Field(0.0, description="Outstanding balance of existing VA loans.")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce(cls, v: Any) -> float:
        return nz(v)


class EntitlementResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_entitlement: float = 0.0
    used_entitlement: float = 0.0
    remaining_entitlement: float = 0.0
    max_new_loan: float = 0.0


class InvestmentInput(BaseModel):
    purchase_price: float = Field(0.0, description="Property purchase price.")
    down_payment_percent: float = Field(0.0, description="Down payment as % of price.")
    interest_rate: float = Field(0.0, description="Annual interest rate %.")
    loan_term_years: float = Field(0.0, description="Amortization period in years.")
    annual_rental_income: float = Field(0.0, description="Gross rent collected per year.")
    monthly_taxes: float = Field(0.0, description="Monthly property taxes.")
    monthly_insurance: float = Field(0.0, description="Monthly insurance premium.")
    monthly_maintenance: float = Field(0.0, description="Monthly maintenance reserve.")
    holding_period_years: float = Field(0.0, description="Years the property is held.")
    appreciation_rate: float = Field(0.0, description="Expected annual appreciation %.")
    discount_rate: float = Field(0.0, description="Required annual return % for NPV.")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce(cls, v: Any) -> float:
        return nz(v)

    @property
    def down_payment(self) -> float:
        return self.purchase_price * self.down_payment_percent / 100

    @property
    def loan_amount(self) -> float:
        return self.purchase_price - self.down_payment


class InvestmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_payment: float = 0.0
    total_investment: float = 0.0
    annual_cash_flow: float = 0.0
    coc_return: float = 0.0
    irr: float = 0.0
    npv: float = 0.0

