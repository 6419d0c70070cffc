import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple
from ..core.utils import normalize_text

class IntentKind(str, Enum):
    GREETING = "greeting"
    OFF_TOPIC = "off_topic"
    MENU_SELECTION = "menu_selection"
    CITY_INVESTMENT = "city_investment"
    PROPERTY_VALUATION = "property_valuation"
    MARKET_TRENDS = "market_trends"
    PROPERTY_FEATURES = "property_features"
    INVESTMENT_ADVICE = "investment_advice"
    PROPERTY_TYPE = "property_type"
    FINANCING = "financing"
    LEGAL = "legal"
    LOCATIONS = "locations"
    UNCLASSIFIED = "unclassified"

@dataclass(frozen=True)
class Intent:
    kind: IntentKind
    option: Optional[int] = None   # menu option 1-8
    city: Optional[str] = None     # lowercase city key

    @classmethod
    def menu(cls, option: int) -> "Intent":
        return cls(IntentKind.MENU_SELECTION, option=option)

    @classmethod
    def city_investment(cls, city: str) -> "Intent":
        return cls(IntentKind.CITY_INVESTMENT, city=city.lower())

GREETINGS = frozenset({"hi", "hello", "hey", "hola", "namaste", "greetings"})

MAJOR_CITIES = ("mumbai", "delhi", "bangalore", "hyderabad", "kolkata", "chennai", "pune")

HEADINGS = {
    "property valuation": 1,
    "property search": 2,
    "financial guidance": 3,
    "legal information": 4,
}

REAL_ESTATE_KEYWORDS = (
    "property", "house", "apartment", "flat", "villa", "real estate", "home",
    "buy", "rent", "sell", "price", "valuation", "loan", "mortgage", "emi",
    "location", "area", "city", "market", "investment", "commercial",
    "residential", "land", "plot", "construction", "builder", "broker",
    "agent", "bedroom", "bathroom", "square foot", "sqft", "amenities",
    "feature", "floor", "society", "registration", "legal", "document",
    "stamp duty", "property tax", "reit", "capital gain", "rate", "return",
    "mumbai", "delhi", "bangalore", "hyderabad", "chennai", "kolkata",
    "pune", "ahmedabad", "jaipur", "lucknow", "kochi", "chandigarh",
    "gurgaon", "noida", "goa", "indore", "bhubaneswar", "coimbatore",
)

# Short messages ("help", "2bhk rates?") are never treated as off-topic
MIN_OFF_TOPIC_TOKENS = 4
# Bare city mentions only count for short messages
CITY_MENTION_MAX_LENGTH = 20

MENU_RE = re.compile(r"[1-8]")
CITY_INVESTMENT_RE = re.compile(
    r"(?:invest|investment|property|properties|buy|opportunities).*(?:in|at)\s+(\w+)",
    re.IGNORECASE,
)
CITY_MENTION_RE = re.compile(r"\b(" + "|".join(MAJOR_CITIES) + r")\b", re.IGNORECASE)

# Tested in this order; patterns overlap on purpose
TOPIC_PATTERNS: Tuple[Tuple[IntentKind, re.Pattern], ...] = (
    (IntentKind.PROPERTY_VALUATION, re.compile(
        r"value|valuation|price|worth|estimate|cost|what is the price of|how much is"
        r"|how much would|what would it cost", re.IGNORECASE)),
    (IntentKind.MARKET_TRENDS, re.compile(
        r"trend|growth|appreciation|increase|decrease|market|statistics|data|reports?"
        r"|analytics|research|study|projection", re.IGNORECASE)),
    (IntentKind.PROPERTY_FEATURES, re.compile(
        r"features?|amenities|facility|service|specification|include|furnish|appliance"
        r"|what does it have|what is included|what comes with", re.IGNORECASE)),
    (IntentKind.INVESTMENT_ADVICE, re.compile(
        r"invest|roi|return|yield|profit|appreciation|growth|potential|opportunity"
        r"|portfolio|diversify|strategy|plan", re.IGNORECASE)),
    (IntentKind.PROPERTY_TYPE, re.compile(
        r"type|category|kind|style|apartment|flat|house|villa|plot|land|commercial"
        r"|residential|office|retail|warehouse|industrial", re.IGNORECASE)),
    (IntentKind.FINANCING, re.compile(
        r"loan|mortgage|finance|payment|emi|interest|down payment|installment|credit"
        r"|bank|lend|borrow", re.IGNORECASE)),
    (IntentKind.LEGAL, re.compile(
        r"legal|document|registration|stamp duty|agreement|contract|tax|compliance"
        r"|regulation|law|permit|approval|license|NOC|certificate", re.IGNORECASE)),
    (IntentKind.LOCATIONS, re.compile(
        r"location|area|place|neighborhood|locality|region|zone|sector|where"
        r"|which place|which area", re.IGNORECASE)),
)

def is_off_topic(message: str) -> bool:
    """True when a message of 4+ words contains no real-estate keyword."""
    if len(message.split()) < MIN_OFF_TOPIC_TOKENS:
        return False
    lowered = message.lower()
    return not any(keyword in lowered for keyword in REAL_ESTATE_KEYWORDS)

def mentioned_city(message: str) -> Optional[str]:
    """The single major city named in a short message, if exactly one is."""
    if len(message) >= CITY_MENTION_MAX_LENGTH:
        return None
    cities = {m.lower() for m in CITY_MENTION_RE.findall(message)}
    if len(cities) != 1:
        return None
    return cities.pop()

# ----- Rules -----

Rule = Callable[[str], Optional[Intent]]

def greeting_rule(message: str) -> Optional[Intent]:
    if normalize_text(message) in GREETINGS:
        return Intent(IntentKind.GREETING)
    return None

def off_topic_rule(message: str) -> Optional[Intent]:
    if is_off_topic(message):
        return Intent(IntentKind.OFF_TOPIC)
    return None

def menu_number_rule(message: str) -> Optional[Intent]:
    if MENU_RE.fullmatch(message):
        return Intent.menu(int(message))
    return None

def heading_rule(message: str) -> Optional[Intent]:
    lowered = message.lower().strip()
    for heading, option in HEADINGS.items():
        if heading in lowered:
            return Intent.menu(option)
    return None

def city_investment_rule(message: str) -> Optional[Intent]:
    match = CITY_INVESTMENT_RE.search(message)
    if match and match.group(1).lower() in MAJOR_CITIES:
        return Intent.city_investment(match.group(1))
    return None

def city_mention_rule(message: str) -> Optional[Intent]:
    city = mentioned_city(message)
    return Intent.city_investment(city) if city else None

def topic_rule(message: str) -> Optional[Intent]:
    for kind, pattern in TOPIC_PATTERNS:
        if pattern.search(message):
            return Intent(kind)
    return None

# First rule returning an intent wins; "invest in Mumbai property" must hit the city rule before the topics
DEFAULT_RULES: Tuple[Tuple[str, Rule], ...] = (
    ("greeting", greeting_rule),
    ("off_topic", off_topic_rule),
    ("menu_number", menu_number_rule),
    ("heading", heading_rule),
    ("city_investment", city_investment_rule),
    ("city_mention", city_mention_rule),
    ("topic", topic_rule),
)

class IntentClassifier:
    """Runs an ordered rule cascade; unmatched input is UNCLASSIFIED."""

    def __init__(self, rules: Sequence[Tuple[str, Rule]] = DEFAULT_RULES):
        self.rules = tuple(rules)

    @property
    def rule_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.rules)

    def classify(self, message: str) -> Intent:
        for _, rule in self.rules:
            intent = rule(message or "")
            if intent is not None:
                return intent
        return Intent(IntentKind.UNCLASSIFIED)

_default_classifier = IntentClassifier()

def classify(message: str) -> Intent:
    return _default_classifier.classify(message)
