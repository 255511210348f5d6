from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from .base import CamelModel, IdList, IdText, LenientCount, LenientMoney


class RuleIn(CamelModel):
    id: Optional[IdText] = None
    name: Optional[str] = None
    # Records without an id or with a missing or unknown type are dropped.
    type: Optional[str] = None  # tax|fee|service_charge
    calculation: Optional[str] = None  # percentage|fixed; anything else prices as fixed
    value: LenientMoney = Decimal("0")
    is_active: Optional[bool] = None
    description: Optional[str] = None


class PriceableItemIn(CamelModel):
    base_price: LenientMoney = Decimal("0")
    enabled_tax_ids: IdList = Field(default_factory=list)
    enabled_fee_ids: IdList = Field(default_factory=list)


class PriceBreakdownRequest(CamelModel):
    item: PriceableItemIn
    rules: List[RuleIn] = Field(default_factory=list)


class LineItemOut(CamelModel):
    rule_id: str
    name: str
    amount: Decimal


class PriceBreakdownOut(CamelModel):
    base_price: Decimal
    fees: List[LineItemOut]
    taxes: List[LineItemOut]
    subtotal_after_fees: Decimal
    total: Decimal
    currency: Optional[str] = None


class ProposalLineIn(CamelModel):
    id: Optional[IdText] = None
    name: str = ""
    price: LenientMoney = Decimal("0")
    pricing_model: str = "fixed"  # fixed|per_person
    enabled_tax_ids: IdList = Field(default_factory=list)
    enabled_fee_ids: IdList = Field(default_factory=list)


class DepositIn(CamelModel):
    type: str = "percentage"  # percentage|fixed
    value: LenientMoney = Decimal("0")


class ProposalQuoteRequest(CamelModel):
    lines: List[ProposalLineIn] = Field(default_factory=list)
    guest_count: LenientCount = 0
    rules: List[RuleIn] = Field(default_factory=list)
    deposit: Optional[DepositIn] = None


class ProposalLineOut(CamelModel):
    id: Optional[str] = None
    name: str
    pricing_model: str
    breakdown: PriceBreakdownOut


class ProposalQuoteOut(CamelModel):
    guest_count: int
    lines: List[ProposalLineOut]
    subtotal: Decimal
    total: Decimal
    deposit_amount: Optional[Decimal] = None
    currency: Optional[str] = None
