from decimal import Decimal

from venue_booking.models import Rule, RuleCatalog
from venue_booking.models.rule import CalculationMethod, RuleKind


def test_rule_record_is_normalized():
    rule = Rule.from_record(
        {"id": 12, "name": "Sales tax", "type": "TAX", "calculation": "percentage", "value": "8.25", "isActive": False}
    )
    assert rule.id == "12"
    assert rule.kind is RuleKind.TAX
    assert rule.calculation is CalculationMethod.PERCENTAGE
    assert rule.value == Decimal("8.25")
    assert rule.is_active is False


def test_malformed_value_becomes_zero():
    for bad in ("", "ten", None, "-5"):
        rule = Rule.from_record({"id": "f", "type": "fee", "calculation": "fixed", "value": bad})
        assert rule.value == Decimal("0")


def test_service_charge_prices_as_fee():
    rule = Rule.from_record({"id": "sc", "type": "service_charge", "calculation": "fixed", "value": 20})
    assert rule.kind is RuleKind.FEE


def test_unknown_calculation_is_fixed():
    rule = Rule.from_record({"id": "f", "type": "fee", "calculation": "flat", "value": 20})
    assert rule.calculation is CalculationMethod.FIXED


def test_unusable_records_are_dropped_from_catalog():
    catalog = RuleCatalog.from_records(
        [
            {"id": "a", "type": "fee", "calculation": "fixed", "value": 1},
            {"id": "b", "type": "discount", "calculation": "fixed", "value": 1},
            {"type": "tax", "calculation": "percentage", "value": 1},
        ]
    )
    assert len(catalog) == 1
    assert "a" in catalog
    assert "b" not in catalog


def test_active_only_catalog_skips_inactive_rules():
    records = [
        {"id": "on", "type": "tax", "calculation": "percentage", "value": 5},
        {"id": "off", "type": "tax", "calculation": "percentage", "value": 5, "is_active": False},
    ]
    assert [r.id for r in RuleCatalog.from_records(records, active_only=True)] == ["on"]
    assert len(RuleCatalog.from_records(records)) == 2


def test_first_duplicate_id_wins(make_rule):
    catalog = RuleCatalog(
        [make_rule("x", "fee", "fixed", Decimal("1")), make_rule("x", "tax", "fixed", Decimal("2"))]
    )
    assert catalog.get("x").kind is RuleKind.FEE
