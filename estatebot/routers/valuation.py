from fastapi import APIRouter, Depends, HTTPException, Request
from ..schemas import PropertyDetailsIn, ValuationResponse
from ..core.config import settings
from ..core.errors import InvalidInput
from ..core.metrics import VALUATION_COUNT
from ..core.security import rate_limit
from ..core.utils import format_inr
from ..models.rule_model import RuleBasedModel

router = APIRouter()

def model_dep(request: Request) -> RuleBasedModel:
    return request.app.state.valuation_model

@router.post("/valuation", response_model=ValuationResponse)
def post_valuation(
    body: PropertyDetailsIn,
    _lim = Depends(rate_limit),
    model: RuleBasedModel = Depends(model_dep),
):
    details = body.to_details()
    try:
        value = model.estimate(details)
    except InvalidInput as exc:
        VALUATION_COUNT.labels(outcome="invalid").inc()
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    VALUATION_COUNT.labels(outcome="ok").inc()

    return ValuationResponse(
        valuation=value,
        formatted=format_inr(value),
        currency=settings.DEFAULT_CURRENCY,
        price_per_sqft=model.resolver.resolve(details.location),
        city=model.resolver.city_for(details.location),
    )
