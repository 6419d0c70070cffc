from dataclasses import dataclass
from typing import Callable, Dict, Tuple
from .intents import Intent, IntentKind

RULE = "━━━━━━━━━━━━━━━━━━━━━━━━"
NUMBERS = ("1️⃣", "2️⃣", "3️⃣", "4️⃣")

CONTACT_PHONE = "+91 8859985607"
CONTACT_EMAIL = "vasurastogi213@gmail.com"

NO_MESSAGE = "I didn't receive a message. How can I help you with real estate in India today?"
GREETING = "👋 Hello! How can I help you with your real estate queries today?"
UNCLASSIFIED = (
    "I'm not sure what you're asking about. Could you please provide more details "
    "about your real estate query?"
)
OFF_TOPIC = (
    "I apologize, but I'm specialized in Indian real estate topics only. I can help you with:\n\n"
    "• Property valuations and price estimates\n"
    "• Investment opportunities in Indian cities\n"
    "• Market trends and analysis\n"
    "• Financing and loan options\n"
    "• Legal aspects of real estate\n\n"
    "Please feel free to ask about any of these topics!"
)

# ----- Template shapes -----

@dataclass(frozen=True)
class Section:
    title: str
    items: Tuple[str, ...]

@dataclass(frozen=True)
class TopicTemplate:
    title: str
    subtitle: str
    sections: Tuple[Section, ...]
    closing: str
    tips_title: str | None = None
    tips: Tuple[str, ...] = ()

@dataclass(frozen=True)
class CityProfile:
    areas: Tuple[str, ...]
    returns: str
    growth: str
    properties: str

@dataclass(frozen=True)
class MenuTemplate:
    title: str
    intro: str
    points: Tuple[str, ...] = ()
    closing: str = ""
    extra: Tuple[str, ...] = ()

# ----- Template data -----

TOPICS: Dict[IntentKind, TopicTemplate] = {
    IntentKind.PROPERTY_VALUATION: TopicTemplate(
        title="💰 *Property Valuation*",
        subtitle="*Factors Affecting Value:*",
        sections=(
            Section("Location", ("City tier", "Neighborhood", "Proximity to amenities", "Connectivity")),
            Section("Property Specifications", ("Built-up area", "Bedrooms/bathrooms", "Floor number", "Age of construction")),
            Section("Additional Features", ("Parking availability", "Security systems", "Amenities (gym, pool, etc.)", "Furnishing status")),
            Section("Market Factors", ("Current demand", "Supply in the area", "Recent transactions", "Future development plans")),
        ),
        closing="To get an accurate valuation, please provide property details using the form.",
    ),
    IntentKind.MARKET_TRENDS: TopicTemplate(
        title="📊 *Indian Real Estate Market Trends*",
        subtitle="*Current Insights:*",
        sections=(
            Section("Market Overview", (
                "Residential sector: Growing at 9.5% YoY",
                "Commercial sector: Stable with 7% YoY growth",
                "Affordable housing: High demand in Tier 2 cities",
                "Luxury segment: Recovering in metro cities",
            )),
            Section("City-wise Growth", (
                "Hyderabad: +14.3%", "Bengaluru: +11.8%", "Pune: +9.6%", "Mumbai: +8.2%", "Delhi-NCR: +7.4%",
            )),
            Section("Key Drivers", (
                "Infrastructure development", "Remote work policies", "Foreign investment", "Government initiatives",
            )),
            Section("2025 Projections", (
                "Residential prices: +12-15%", "Commercial yields: 7-9%", "Rental market: +8-10%", "NRI investments: +20%",
            )),
        ),
        tips_title="Recent Trends",
        tips=("Post-pandemic recovery: +15%", "Rental market growth: +8%", "Commercial revival: +12%"),
        closing="Please specify your investment criteria for detailed market analysis.",
    ),
    IntentKind.PROPERTY_FEATURES: TopicTemplate(
        title="🏗️ *Property Features & Amenities*",
        subtitle="*Key Value Factors:*",
        sections=(
            Section("Location Advantages", (
                "Metro/railway connectivity", "School and hospital proximity", "Shopping and entertainment", "Road connectivity",
            )),
            Section("Property Specifications", (
                "Total built-up area", "Bedrooms and bathrooms", "Floor number and view", "Age and condition",
            )),
            Section("Modern Amenities", (
                "Parking (covered/open)", "Power backup", "Security system", "Clubhouse facilities",
            )),
            Section("Premium Features", (
                "Modular kitchen", "Smart home features", "Garden/balcony", "Furnishing status",
            )),
        ),
        tips_title="Value Impact",
        tips=("Each premium feature: +2-5%", "Modern amenities: +5-10%", "Location benefits: +10-15%"),
        closing="Which features are most important to you?",
    ),
    IntentKind.INVESTMENT_ADVICE: TopicTemplate(
        title="💼 *Real Estate Investment Guide*",
        subtitle="*Investment Options:*",
        sections=(
            Section("Property Types", ("Residential properties", "Commercial spaces", "Plots/Land", "REITs")),
            Section("Key Metrics", (
                "Location growth potential", "Rental yield (2-4%)", "Capital appreciation", "Property management",
            )),
            Section("Financial Planning", (
                "Down payment (20-30%)", "Home loan options", "Property taxes", "Maintenance costs",
            )),
            Section("Risk Assessment", (
                "Market fluctuations", "Legal issues", "Maintenance challenges", "Tenant management",
            )),
        ),
        tips_title="Investment Tips",
        tips=(
            "Diversify across locations", "Consider rental potential",
            "Factor in maintenance costs", "Plan for long-term growth",
        ),
        closing="What type of investment interests you?",
    ),
    IntentKind.PROPERTY_TYPE: TopicTemplate(
        title="🏘️ *Property Types & Categories*",
        subtitle="*Available Options:*",
        sections=(
            Section("Residential Properties", ("Apartments/Flats", "Independent Houses", "Villas/Bungalows", "Penthouses")),
            Section("Commercial Properties", ("Office Spaces", "Retail Shops", "Warehouses", "Showrooms")),
            Section("Land/Plots", ("Residential Plots", "Commercial Plots", "Agricultural Land")),
            Section("Special Properties", ("Farmhouses", "Holiday Homes", "Industrial Units")),
        ),
        tips_title="Selection Guide",
        tips=(
            "Residential: Best for first-time buyers", "Commercial: Higher rental yields",
            "Land: Long-term appreciation", "Special: Unique investment opportunities",
        ),
        closing="Which property type interests you?",
    ),
    IntentKind.FINANCING: TopicTemplate(
        title="💳 *Real Estate Financing Guide*",
        subtitle="*Loan Options:*",
        sections=(
            Section("Home Loans", (
                "Interest rates: 6.5-8.5%", "Tenure: up to 30 years", "Down payment: 20-30%", "EMI calculator available",
            )),
            Section("Lending Institutions", (
                "Public sector banks", "Private sector banks", "Housing finance companies",
            )),
            Section("Additional Costs", (
                "Registration charges", "Stamp duty", "Property tax", "Maintenance charges",
            )),
            Section("Tax Benefits", (
                "Home loan interest deduction", "Principal repayment deduction", "Property tax deduction",
            )),
        ),
        tips_title="Financial Tips",
        tips=("Compare multiple lenders", "Consider pre-EMI options", "Factor in all costs", "Plan for long-term EMI"),
        closing="Would you like specific loan details for your budget?",
    ),
    IntentKind.LEGAL: TopicTemplate(
        title="⚖️ *Legal Aspects of Real Estate*",
        subtitle="*Essential Information:*",
        sections=(
            Section("Required Documents", (
                "Sale deed", "Property tax receipts", "Building approval plans", "NOC from authorities",
            )),
            Section("Verification Process", (
                "Title verification", "Encumbrance certificate", "Property tax clearance", "Building compliance",
            )),
            Section("Registration Steps", ("Stamp duty payment", "Document registration", "Mutation entry")),
            Section("Society/Association", ("Maintenance charges", "Society rules", "Common area rights")),
        ),
        tips_title="Legal Tips",
        tips=("Always verify documents", "Check property history", "Understand local laws", "Keep records updated"),
        closing="Which legal aspect would you like to know more about?",
    ),
    IntentKind.LOCATIONS: TopicTemplate(
        title="📍 *Real Estate Locations Guide*",
        subtitle="*Popular Cities:*",
        sections=(
            Section("Tier 1 Cities", (
                "Mumbai: ₹15,000-35,000/sqft", "Delhi NCR: ₹8,000-25,000/sqft",
                "Bangalore: ₹6,000-18,000/sqft", "Hyderabad: ₹5,000-12,000/sqft",
            )),
            Section("Tier 2 Cities", (
                "Pune: ₹5,500-12,000/sqft", "Ahmedabad: ₹3,500-8,000/sqft",
                "Jaipur: ₹3,200-7,500/sqft", "Lucknow: ₹3,000-6,500/sqft",
            )),
            Section("Emerging Markets", (
                "Kochi: ₹4,500-9,000/sqft", "Bhubaneswar: ₹3,200-6,500/sqft",
                "Indore: ₹3,000-6,000/sqft", "Coimbatore: ₹3,800-7,500/sqft",
            )),
            Section("Location Selection Factors", (
                "Infrastructure development", "Employment opportunities",
                "Lifestyle amenities", "Future growth projections",
            )),
        ),
        closing="Which location would you like to know more about?",
    ),
}

CITY_PROFILES: Dict[str, CityProfile] = {
    "mumbai": CityProfile(
        ("Bandra", "Worli", "Andheri", "Powai", "Navi Mumbai"),
        "8-12%", "High", "Premium residential and commercial spaces"),
    "delhi": CityProfile(
        ("South Delhi", "Dwarka", "Noida Extension", "Gurgaon", "Greater Noida"),
        "7-10%", "Moderate to High", "Residential plots and luxury apartments"),
    "bangalore": CityProfile(
        ("Whitefield", "Electronic City", "Hebbal", "Sarjapur Road", "Yelahanka"),
        "8-14%", "Very High", "Tech-hub adjacent residential and office spaces"),
    "hyderabad": CityProfile(
        ("Gachibowli", "HITEC City", "Kondapur", "Kukatpally", "Manikonda"),
        "9-15%", "Very High", "IT corridor properties and gated communities"),
    "kolkata": CityProfile(
        ("New Town", "Salt Lake", "Rajarhat", "Ballygunge", "Alipore"),
        "6-9%", "Moderate", "Mixed residential and developing commercial areas"),
    "chennai": CityProfile(
        ("OMR", "ECR", "Porur", "Sholinganallur", "Siruseri"),
        "7-11%", "Moderate to High", "IT corridor apartments and beach-side properties"),
    "pune": CityProfile(
        ("Kharadi", "Hinjewadi", "Baner", "Wakad", "Kothrud"),
        "8-12%", "High", "Tech-park adjacent properties and township projects"),
}

GENERIC_CITY = CityProfile(
    ("Prime localities", "Developing areas"), "7-10%", "Varies by location", "Mixed residential and commercial",
)

BUDGET_BANDS = ("Entry level: ₹40L - ₹80L", "Mid-range: ₹80L - ₹1.5Cr", "Premium: ₹1.5Cr+")
CITY_TIPS = (
    "Look for infrastructure development plans",
    "Consider connectivity and amenities",
    "Research builder reputation",
    "Evaluate rental yield potential",
)

MENU: Dict[int, MenuTemplate] = {
    1: MenuTemplate(
        "💰 *Property Valuation*", "Please provide:",
        ("Location", "Square footage", "Bedrooms/bathrooms", "Year built", "Additional features"),
        "You can enter these details in the form on the right, or describe the property "
        "you're interested in evaluating."),
    2: MenuTemplate(
        "🏠 *Property Search*", "To help you find the perfect property, please tell me:",
        ("Which city are you interested in?", "What type of property are you looking for?",
         "Do you have a specific budget in mind?", "Any particular features or amenities you need?"),
        "I can provide insights on different locations, property types, and help compare features."),
    3: MenuTemplate(
        "💳 *Financial Guidance*", "I can help with real estate financial planning. Please specify:",
        ("Your budget or loan amount needed", "Preferred down payment percentage",
         "Loan tenure preference (5-30 years)", "Monthly income (for EMI calculation)"),
        "I can provide information on loan options, EMI calculations, and investment ROI analysis."),
    4: MenuTemplate(
        "⚖️ *Legal Information*",
        "To help with legal aspects of real estate, I can provide information on:",
        ("Documentation required for property purchase/sale", "Registration process and stamp duty",
         "Compliance requirements", "Legal due diligence"),
        "Which specific legal aspect of real estate transactions would you like to know more about?"),
    5: MenuTemplate(
        "📊 *Market Trends*",
        "I can provide the latest real estate market trends and analysis. What would you like to know about?",
        ("City-specific market trends", "Segment performance (residential/commercial)",
         "Investment hotspots", "Future projections"),
        "Specify a city or region for detailed market insights."),
    6: MenuTemplate(
        "🏢 *Property Types*", "I can provide information on different property types:",
        ("Residential properties (apartments, villas, independent houses)",
         "Commercial properties (office spaces, retail, warehouses)",
         "Land/plots", "Special purpose properties"),
        "Which property type are you interested in learning more about?"),
    7: MenuTemplate(
        "🏗️ *Property Features*", "I can help you understand how different features affect property value:",
        ("Location advantages", "Size and layout considerations",
         "Amenities and facilities", "Construction quality and specifications"),
        "Which aspects are most important for your property considerations?"),
    8: MenuTemplate(
        "📱 *Contact Support*", f"*Get in touch with our real estate expert:*\n{RULE}",
        extra=(
            f"📞 Phone: {CONTACT_PHONE}\n📧 Email: {CONTACT_EMAIL}",
            "Available for:\n• Property consultations\n• Market insights\n• Investment guidance\n• Site visits",
            "⏰ *Available Hours:*\nMon-Sat: 9:00 AM - 7:00 PM IST",
            f"For immediate assistance:\n• Call/WhatsApp: {CONTACT_PHONE}\n"
            "• Email for detailed queries\n• Response time: Within 2 hours",
        ),
    ),
}

MENU_FALLBACK = "Please enter a number between 1 and 8 for specific information."

# ----- Renderers -----

def render_topic(template: TopicTemplate) -> str:
    blocks = [template.title, f"{template.subtitle}\n{RULE}"]
    for number, section in zip(NUMBERS, template.sections):
        lines = [f"{number} *{section.title}*"] + [f"   • {item}" for item in section.items]
        blocks.append("\n".join(lines))
    if template.tips_title:
        blocks.append("\n".join([f"💡 *{template.tips_title}:*"] + [f"• {tip}" for tip in template.tips]))
    blocks.append(template.closing)
    return "\n\n".join(blocks)

def render_menu(option: int) -> str:
    template = MENU.get(option)
    if template is None:
        return MENU_FALLBACK
    blocks = [template.title, template.intro]
    if template.points:
        blocks.append("\n".join(f"{i}. {p}" for i, p in enumerate(template.points, start=1)))
    blocks.extend(template.extra)
    if template.closing:
        blocks.append(template.closing)
    return "\n\n".join(blocks)

def render_city(city: str) -> str:
    key = city.lower()
    profile = CITY_PROFILES.get(key, GENERIC_CITY)
    name = key[:1].upper() + key[1:]
    areas = "\n".join(f"   • {area}" for area in profile.areas)
    blocks = [
        f"🏢 *Investment Opportunities in {name}*",
        f"*Top Areas for Investment:*\n{RULE}",
        f"1️⃣ *High-Potential Locations*\n{areas}",
        "2️⃣ *Investment Returns*\n"
        f"   • Expected ROI: {profile.returns}\n"
        f"   • Growth potential: {profile.growth}\n"
        "   • Current trends: Positive",
        f"3️⃣ *Recommended Properties*\n   • {profile.properties}",
        "4️⃣ *Budget Recommendations*\n" + "\n".join(f"   • {band}" for band in BUDGET_BANDS),
        "💡 *Investment Tips:*\n" + "\n".join(f"• {tip}" for tip in CITY_TIPS),
        f"Would you like more specific information about any of these areas in {key}?",
    ]
    return "\n\n".join(blocks)

_FIXED: Dict[IntentKind, str] = {
    IntentKind.GREETING: GREETING,
    IntentKind.OFF_TOPIC: OFF_TOPIC,
    IntentKind.UNCLASSIFIED: UNCLASSIFIED,
}

_RENDERERS: Dict[IntentKind, Callable[[Intent], str]] = {
    IntentKind.MENU_SELECTION: lambda intent: render_menu(intent.option or 0),
    IntentKind.CITY_INVESTMENT: lambda intent: render_city(intent.city or ""),
}

def render(intent: Intent) -> str:
    """Reply text for a classified intent. Never empty."""
    if intent.kind in _FIXED:
        return _FIXED[intent.kind]
    if intent.kind in _RENDERERS:
        return _RENDERERS[intent.kind](intent)
    return render_topic(TOPICS[intent.kind])
