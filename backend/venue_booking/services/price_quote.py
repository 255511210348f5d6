"""Itemized price breakdowns for packages and services.

Fees are always computed on the item's base price, never on a running total,
and every tax is computed on the same post-fee subtotal. Changing either rule
changes what customers are charged, so both are kept exactly as the venue
screens have always shown them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, List, Optional

from ..models.rule import Rule, RuleCatalog, RuleKind
from ..utils.money import ZERO, money_context, to_cents, to_non_negative

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineItem:
    rule_id: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class PriceBreakdown:
    base_price: Decimal
    fees: List[LineItem] = field(default_factory=list)
    taxes: List[LineItem] = field(default_factory=list)
    subtotal_after_fees: Decimal = ZERO
    total: Decimal = ZERO


def _resolve(rule_ids: Optional[Iterable[Any]], kind: RuleKind, catalog: RuleCatalog) -> List[Rule]:
    """Return the catalog rules of ``kind`` selected by ``rule_ids`` in catalog order."""
    selected: dict[str, Rule] = {}
    for rule_id in rule_ids or ():
        rule = catalog.get(rule_id)
        if rule is None:
            logger.debug("Ignoring %s id %r missing from catalog", kind.value, rule_id)
            continue
        if rule.kind is not kind:
            logger.debug("Ignoring rule %s selected as %s but defined as %s", rule.id, kind.value, rule.kind.value)
            continue
        selected[rule.id] = rule
    return sorted(selected.values(), key=catalog.position)


def compute(
    base_price: Any,
    fee_rule_ids: Optional[Iterable[Any]],
    tax_rule_ids: Optional[Iterable[Any]],
    catalog: RuleCatalog,
) -> PriceBreakdown:
    """Apply the selected fees, then the selected taxes, to ``base_price``.

    Unknown rule ids, and ids whose catalog kind does not match the set they
    were selected in, are skipped. A malformed or negative base price counts
    as 0. Each line amount is rounded to cents and the subtotal and total are
    the sums of the rounded lines.
    """
    with money_context():
        base = to_cents(to_non_negative(base_price))

        fees = [
            LineItem(rule_id=rule.id, name=rule.name, amount=to_cents(rule.amount_on(base)))
            for rule in _resolve(fee_rule_ids, RuleKind.FEE, catalog)
        ]
        subtotal = base + sum((item.amount for item in fees), ZERO)

        # Fixed taxes are a flat add; percentage taxes all use the same subtotal.
        taxes = [
            LineItem(rule_id=rule.id, name=rule.name, amount=to_cents(rule.amount_on(subtotal)))
            for rule in _resolve(tax_rule_ids, RuleKind.TAX, catalog)
        ]
        total = subtotal + sum((item.amount for item in taxes), ZERO)

    return PriceBreakdown(
        base_price=base,
        fees=fees,
        taxes=taxes,
        subtotal_after_fees=subtotal,
        total=total,
    )
