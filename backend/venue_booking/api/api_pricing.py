from fastapi import APIRouter
import logging

from .. import schemas
from ..core.config import settings
from ..models.rule import RuleCatalog
from ..services.price_quote import PriceBreakdown, compute
from ..services.proposal_pricing import price_proposal

router = APIRouter(tags=["pricing"])
logger = logging.getLogger(__name__)


def _breakdown_out(breakdown: PriceBreakdown, currency: str | None = None) -> schemas.PriceBreakdownOut:
    out = schemas.PriceBreakdownOut.model_validate(breakdown)
    out.currency = currency
    return out


@router.post(
    "/pricing/breakdown",
    response_model=schemas.PriceBreakdownOut,
    response_model_exclude_none=True,
)
def price_breakdown(body: schemas.PriceBreakdownRequest):
    """Stateless tax/fee breakdown for a package or service price.

    The caller sends the venue's rule catalog with the request; nothing is
    looked up or stored here.
    """
    catalog = RuleCatalog.from_records(body.rules)
    breakdown = compute(
        body.item.base_price,
        body.item.enabled_fee_ids,
        body.item.enabled_tax_ids,
        catalog,
    )
    return _breakdown_out(breakdown, settings.DEFAULT_CURRENCY)


@router.post(
    "/pricing/proposal",
    response_model=schemas.ProposalQuoteOut,
    response_model_exclude_none=True,
)
def proposal_quote(body: schemas.ProposalQuoteRequest):
    """Price a proposal's package and services, with an optional deposit."""
    catalog = RuleCatalog.from_records(body.rules)
    quote = price_proposal(
        body.lines,
        body.guest_count,
        catalog,
        deposit_type=body.deposit.type if body.deposit else None,
        deposit_value=body.deposit.value if body.deposit else None,
    )
    logger.debug("Priced proposal with %d line(s), total=%s", len(quote.lines), quote.total)
    return schemas.ProposalQuoteOut(
        guest_count=quote.guest_count,
        lines=[
            schemas.ProposalLineOut(
                id=priced.line.item_id,
                name=priced.line.name,
                pricing_model=priced.line.pricing_model.value,
                breakdown=_breakdown_out(priced.breakdown),
            )
            for priced in quote.lines
        ],
        subtotal=quote.subtotal,
        total=quote.total,
        deposit_amount=quote.deposit_amount,
        currency=settings.DEFAULT_CURRENCY,
    )
