from types import MappingProxyType
from typing import Mapping
from .base import CityPrice

# Price per sq ft when no known city appears in the location text
DEFAULT_PRICE_PER_SQFT = 8000

def _city(base_price, premium, multiplier, areas) -> CityPrice:
    return CityPrice(
        base_price=base_price,
        premium_areas=frozenset(premium),
        premium_multiplier=multiplier,
        areas=MappingProxyType(dict(areas)),
    )

# Indian cities, INR per sq ft. Dict order is the match order.
CITY_PRICES: Mapping[str, CityPrice] = MappingProxyType({
    # Tier 1
    "mumbai": _city(25000, ["bandra", "juhu", "worli", "colaba"], 2.5, {
        "bandra": 45000,
        "juhu": 50000,
        "worli": 48000,
        "colaba": 47000,
        "andheri": 25000,
        "thane": 15000,
        "navi mumbai": 12000,
    }),
    "delhi": _city(15000, ["south delhi", "delhi ncr", "dwarka"], 2.0, {
        "south delhi": 30000,
        "delhi ncr": 25000,
        "dwarka": 12000,
        "rohini": 10000,
        "mayur vihar": 11000,
    }),
    "bangalore": _city(12000, ["indiranagar", "koramangala", "whitefield"], 1.8, {
        "indiranagar": 18000,
        "koramangala": 20000,
        "whitefield": 15000,
        "electronic city": 8000,
        "marathahalli": 10000,
    }),
    # Tier 2
    "pune": _city(8000, ["koregaon park", "kalyani nagar"], 1.6, {
        "koregaon park": 15000,
        "kalyani nagar": 14000,
        "hinjewadi": 7500,
        "wakad": 7000,
    }),
    "hyderabad": _city(7000, ["banjara hills", "jubilee hills"], 1.7, {
        "banjara hills": 12000,
        "jubilee hills": 13000,
        "gachibowli": 8000,
        "madhapur": 7500,
    }),
    "chennai": _city(9000, ["boat club", "adyar"], 1.8, {
        "boat club": 18000,
        "adyar": 15000,
        "velachery": 8000,
        "omr": 7000,
    }),
    # Tier 3
    "ahmedabad": _city(5500, ["bodakdev", "satellite"], 1.5, {
        "bodakdev": 8000,
        "satellite": 7500,
        "bopal": 5000,
        "sg highway": 6000,
    }),
    "kolkata": _city(6000, ["ballygunge", "alipore"], 1.6, {
        "ballygunge": 12000,
        "alipore": 11000,
        "rajarhat": 5500,
        "salt lake": 6500,
    }),
})

class LocationPriceResolver:
    """
    Maps free-text locations ("Worli 2BHK in Mumbai") to a price per sq ft.

    The first city (in table order) whose name appears in the text wins;
    within it the first matching area override wins, else the city base
    price. Unknown locations get DEFAULT_PRICE_PER_SQFT.
    """
    def __init__(self, table: Mapping[str, CityPrice] = CITY_PRICES, default: int = DEFAULT_PRICE_PER_SQFT):
        self.table = table
        self.default = default

    def resolve(self, location: str) -> int:
        text = (location or "").lower()
        for city, data in self.table.items():
            if city not in text:
                continue
            for area, price in data.areas.items():
                if area in text:
                    return price
            return data.base_price
        return self.default

    def city_for(self, location: str) -> str | None:
        """City key that resolve() would use, if any."""
        text = (location or "").lower()
        return next((city for city in self.table if city in text), None)

_default_resolver = LocationPriceResolver()

def resolve(location: str) -> int:
    return _default_resolver.resolve(location)
