from __future__ import annotations

import enum
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, List, Optional

from ..models.rule import RuleCatalog, read_field
from ..utils.money import ZERO, money_context, to_cents, to_count, to_non_negative
from .price_quote import PriceBreakdown, compute


class PricingModel(str, enum.Enum):
    FIXED = "fixed"
    PER_PERSON = "per_person"


class DepositType(str, enum.Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class ProposalLine:
    """A package or service selected for an event, with its own tax/fee picks."""

    item_id: Optional[str]
    name: str
    price: Decimal
    pricing_model: PricingModel = PricingModel.FIXED
    enabled_fee_ids: frozenset = frozenset()
    enabled_tax_ids: frozenset = frozenset()

    @classmethod
    def from_record(cls, record: Any) -> "ProposalLine":
        raw_model = read_field(record, "pricing_model", "pricingModel")
        raw_model = getattr(raw_model, "value", raw_model)
        model = PricingModel.PER_PERSON if raw_model == PricingModel.PER_PERSON.value else PricingModel.FIXED
        item_id = read_field(record, "id", "item_id")
        return cls(
            item_id=str(item_id) if item_id is not None else None,
            name=str(read_field(record, "name") or ""),
            price=to_non_negative(read_field(record, "price", "base_price", "basePrice")),
            pricing_model=model,
            enabled_fee_ids=frozenset(str(i) for i in read_field(record, "enabled_fee_ids", "enabledFeeIds") or ()),
            enabled_tax_ids=frozenset(str(i) for i in read_field(record, "enabled_tax_ids", "enabledTaxIds") or ()),
        )

    def base_price(self, guest_count: int) -> Decimal:
        if self.pricing_model is PricingModel.PER_PERSON:
            with money_context():
                return self.price * guest_count
        return self.price


@dataclass(frozen=True)
class PricedLine:
    line: ProposalLine
    breakdown: PriceBreakdown


@dataclass(frozen=True)
class ProposalQuote:
    guest_count: int
    lines: List[PricedLine] = field(default_factory=list)
    subtotal: Decimal = ZERO
    total: Decimal = ZERO
    deposit_amount: Optional[Decimal] = None


def deposit_amount(total: Decimal, deposit_type: Any, deposit_value: Any) -> Decimal:
    """Percentage of ``total``, or a fixed amount capped at ``total``."""
    value = to_non_negative(deposit_value)
    kind = getattr(deposit_type, "value", deposit_type)
    with money_context():
        if kind == DepositType.PERCENTAGE.value:
            return to_cents(total * value / Decimal(100))
        return to_cents(min(value, total))


def price_proposal(
    lines: Iterable[Any],
    guest_count: Any,
    catalog: RuleCatalog,
    deposit_type: Any = None,
    deposit_value: Any = None,
) -> ProposalQuote:
    """Price every selected package/service line and total the proposal.

    Per-person lines are multiplied by the guest count before any fee or tax
    is applied. No deposit is computed unless ``deposit_type`` is given.
    """
    guests = to_count(guest_count)
    priced: List[PricedLine] = []
    for record in lines or ():
        line = record if isinstance(record, ProposalLine) else ProposalLine.from_record(record)
        breakdown = compute(line.base_price(guests), line.enabled_fee_ids, line.enabled_tax_ids, catalog)
        priced.append(PricedLine(line=line, breakdown=breakdown))

    with money_context():
        subtotal = sum((p.breakdown.base_price for p in priced), ZERO)
        total = sum((p.breakdown.total for p in priced), ZERO)
    deposit = deposit_amount(total, deposit_type, deposit_value) if deposit_type is not None else None
    return ProposalQuote(
        guest_count=guests,
        lines=priced,
        subtotal=subtotal,
        total=total,
        deposit_amount=deposit,
    )
