from typing import Protocol, List, Optional, Mapping, FrozenSet
from dataclasses import dataclass, field
from datetime import datetime

# ----- Data shapes (thin & explicit) -----

@dataclass(frozen=True)
class CityPrice:
    base_price: int                          # INR per sq ft when no area matches
    premium_areas: FrozenSet[str]            # e.g. {"bandra", "juhu"}
    premium_multiplier: float
    areas: Mapping[str, int] = field(default_factory=dict)  # area -> INR per sq ft, match order

    def __post_init__(self):
        if self.base_price <= 0:
            raise ValueError("base_price must be positive")
        for area, price in self.areas.items():
            if area != area.lower() or price <= 0:
                raise ValueError(f"invalid area override {area!r}: {price}")

@dataclass(frozen=True)
class PropertyDetails:
    location: str
    square_footage: Optional[float]
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    year_built: Optional[int] = None
    additional_features: Optional[str] = None

@dataclass(frozen=True)
class ChatTurn:
    text: str
    sender: str               # "user" | "bot"
    timestamp: datetime

@dataclass
class UserRecord:
    id: str
    name: str
    email: str
    password: str             # salted hash, never the raw password
    role: str = "user"        # "user" | "admin"
    created_at: Optional[datetime] = None

# ----- Protocols (interfaces) -----

class ChatStore(Protocol):
    def load_user_chat(self, user_id: str) -> List[ChatTurn]: ...
    def append_user_chat(self, user_id: str, turns: List[ChatTurn]) -> bool: ...

class UserStore(Protocol):
    def find_by_email(self, email: str) -> Optional[UserRecord]: ...
    def find_by_id(self, user_id: str) -> Optional[UserRecord]: ...
    def add(self, user: UserRecord) -> bool: ...
