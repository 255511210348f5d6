from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Iterator, Mapping, Optional

from ..utils.money import to_non_negative

logger = logging.getLogger(__name__)


class RuleKind(str, enum.Enum):
    TAX = "tax"
    FEE = "fee"


class CalculationMethod(str, enum.Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


# Record types stored alongside taxes and fees that price like a fee.
_KIND_ALIASES = {
    "tax": RuleKind.TAX,
    "fee": RuleKind.FEE,
    "service_charge": RuleKind.FEE,
}


def read_field(source: Any, *keys: str) -> Any:
    """Return the first non-None value among ``keys`` on a mapping or object."""
    if source is None:
        return None
    for key in keys:
        if isinstance(source, Mapping):
            value = source.get(key)
        else:
            value = getattr(source, key, None)
        if value is not None:
            return value
    return None


def _enum_text(raw: Any) -> str:
    if isinstance(raw, enum.Enum):
        raw = raw.value
    return str(raw or "").strip().lower()


@dataclass(frozen=True)
class Rule:
    """A tax or fee definition from the venue's catalog."""

    id: str
    name: str
    kind: RuleKind
    calculation: CalculationMethod
    value: Decimal
    is_active: bool = True
    description: Optional[str] = None

    def amount_on(self, basis: Decimal) -> Decimal:
        """Unrounded amount this rule adds when applied to ``basis``."""
        if self.calculation is CalculationMethod.PERCENTAGE:
            return basis * self.value / Decimal(100)
        return self.value

    @classmethod
    def from_record(cls, record: Any) -> Optional["Rule"]:
        """Normalize a stored tax/fee record, or return None if it is unusable.

        Missing or malformed ``value`` becomes 0. Records without an id or with
        an unknown type cannot be priced and are dropped.
        """
        rule_id = read_field(record, "id")
        if rule_id is None or str(rule_id).strip() == "":
            logger.debug("Dropping rule record without id: %r", record)
            return None
        raw_kind = read_field(record, "type", "kind")
        kind = _KIND_ALIASES.get(_enum_text(raw_kind))
        if kind is None:
            logger.debug("Dropping rule %s with unknown type %r", rule_id, raw_kind)
            return None
        calculation = (
            CalculationMethod.PERCENTAGE
            if _enum_text(read_field(record, "calculation")) == CalculationMethod.PERCENTAGE.value
            else CalculationMethod.FIXED
        )
        active = read_field(record, "is_active", "isActive")
        return cls(
            id=str(rule_id),
            name=str(read_field(record, "name") or ""),
            kind=kind,
            calculation=calculation,
            value=to_non_negative(read_field(record, "value")),
            is_active=True if active is None else bool(active),
            description=read_field(record, "description"),
        )


class RuleCatalog:
    """Read-only id -> Rule lookup that remembers catalog order."""

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: dict[str, Rule] = {}
        for rule in rules:
            # First definition wins; later duplicates are stale copies.
            self._rules.setdefault(rule.id, rule)
        self._order = {rule_id: index for index, rule_id in enumerate(self._rules)}

    @classmethod
    def from_records(cls, records: Iterable[Any], *, active_only: bool = False) -> "RuleCatalog":
        rules = []
        for record in records or ():
            rule = record if isinstance(record, Rule) else Rule.from_record(record)
            if rule is None:
                continue
            if active_only and not rule.is_active:
                continue
            rules.append(rule)
        return cls(rules)

    def get(self, rule_id: Any) -> Optional[Rule]:
        if rule_id is None:
            return None
        return self._rules.get(str(rule_id))

    def position(self, rule: Rule) -> int:
        return self._order[rule.id]

    def __contains__(self, rule_id: object) -> bool:
        return rule_id is not None and str(rule_id) in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)
