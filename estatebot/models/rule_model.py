import math
from datetime import date
from typing import Callable
from .base import ValuationModel
from ..core.errors import InvalidInput
from ..data.base import PropertyDetails
from ..data.price_table import LocationPriceResolver

BEDROOM_VALUE = 500_000      # 5 lakh per bedroom
BATHROOM_VALUE = 300_000     # 3 lakh per bathroom

NEW_BUILD_MAX_AGE = 2
NEW_BUILD_FACTOR = 1.2
OLD_BUILD_MIN_AGE = 20
OLD_BUILD_FACTOR = 0.8

# (keywords, amount): each entry applies at most once, entries stack
FEATURE_PREMIUMS = (
    (("parking",), 200_000),
    (("garden", "terrace"), 500_000),
    (("gym", "swimming"), 1_000_000),
    (("furnished",), 1_500_000),
)

class RuleBasedModel(ValuationModel):
    """
    Deterministic valuation:
      location price x area, + rooms, x age factor, + feature premiums.
    `clock` supplies today's date so age adjustments are testable.
    """
    def __init__(self, resolver: LocationPriceResolver | None = None,
                 clock: Callable[[], date] = date.today):
        self.resolver = resolver or LocationPriceResolver()
        self.clock = clock

    def estimate(self, details: PropertyDetails) -> int:
        sqft = details.square_footage
        if sqft is None or sqft <= 0:
            raise InvalidInput("squareFootage must be a positive number")

        value = self.resolver.resolve(details.location) * sqft

        if details.bedrooms is not None:
            value += details.bedrooms * BEDROOM_VALUE
        if details.bathrooms is not None:
            value += details.bathrooms * BATHROOM_VALUE

        if details.year_built is not None:
            age = self.clock().year - details.year_built
            if age <= NEW_BUILD_MAX_AGE:
                value *= NEW_BUILD_FACTOR
            elif age > OLD_BUILD_MIN_AGE:
                value *= OLD_BUILD_FACTOR

        if details.additional_features:
            features = details.additional_features.lower()
            for keywords, amount in FEATURE_PREMIUMS:
                if any(k in features for k in keywords):
                    value += amount

        # Half-up, not banker's rounding
        return int(math.floor(value + 0.5))
