from decimal import Decimal
from pathlib import Path
from dotenv import load_dotenv
import pytest

from venue_booking.models import Rule, RuleCatalog
from venue_booking.models.rule import CalculationMethod, RuleKind

# Load environment variables for tests
load_dotenv(Path(__file__).resolve().parents[1] / '.env.test')


def _make_rule(rule_id, kind, calculation, value, name=None):
    return Rule(
        id=rule_id,
        name=name or rule_id,
        kind=RuleKind(kind),
        calculation=CalculationMethod(calculation),
        value=value,
    )


@pytest.fixture
def make_rule():
    """Factory for catalog rules, e.g. ``make_rule("vat", "tax", "percentage", Decimal("15"))``."""
    return _make_rule


@pytest.fixture
def catalog():
    """A small venue catalog mixing fee and tax rules of both calculation types."""
    return RuleCatalog(
        [
            _make_rule("svc", "fee", "percentage", Decimal("5"), "Service charge"),
            _make_rule("setup", "fee", "fixed", Decimal("10"), "Setup fee"),
            _make_rule("gratuity", "fee", "percentage", Decimal("10"), "Gratuity"),
            _make_rule("vat", "tax", "percentage", Decimal("10"), "VAT"),
            _make_rule("city", "tax", "percentage", Decimal("2.5"), "City tax"),
            _make_rule("levy", "tax", "fixed", Decimal("3"), "Tourism levy"),
        ]
    )
