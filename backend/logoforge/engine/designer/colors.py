"""Industry colour recommendations."""

from __future__ import annotations

from logoforge.models.designer import ColorAlternative, ColorPalette

GENERAL = "general"


def _palette(
    primary: str,
    secondary: str,
    background: str,
    text: str,
    alternatives: tuple[tuple[str, str, str], ...],
    reasoning: str,
) -> ColorPalette:
    return ColorPalette(
        primary=primary,
        secondary=secondary,
        background=background,
        text=text,
        alternatives=[ColorAlternative(primary=p, secondary=s, name=n) for p, s, n in alternatives],
        reasoning=reasoning,
    )


INDUSTRY_COLORS: dict[str, ColorPalette] = {
    "saas": _palette(
        "#4F46E5", "#06B6D4", "#0F172A", "#F8FAFC",
        (("#3B82F6", "#8B5CF6", "Classic Blue"),
         ("#6366F1", "#EC4899", "Modern Purple"),
         ("#0EA5E9", "#14B8A6", "Ocean Trust")),
        "Blue/indigo conveys trust, stability, and technology. Used by Stripe, Salesforce, Zoom.",
    ),
    "mobile-app": _palette(
        "#F43F5E", "#8B5CF6", "#18181B", "#FAFAFA",
        (("#EC4899", "#F97316", "Sunset Gradient"),
         ("#22C55E", "#10B981", "Fresh Green"),
         ("#3B82F6", "#06B6D4", "Cool Blue")),
        "Vibrant gradients and bold colors drive engagement. Think Instagram, Snapchat, TikTok.",
    ),
    "design-agency": _palette(
        "#000000", "#FF5722", "#FFFFFF", "#171717",
        (("#18181B", "#FBBF24", "Minimal Gold"),
         ("#1E1E1E", "#E11D48", "Bold Red"),
         ("#0A0A0A", "#A855F7", "Creative Purple")),
        "Black shows confidence and sophistication. Accent colors show creativity. Used by Pentagram, IDEO.",
    ),
    "fintech": _palette(
        "#0D9488", "#0EA5E9", "#0C0A09", "#FAFAF9",
        (("#22C55E", "#16A34A", "Money Green"),
         ("#1D4ED8", "#60A5FA", "Trust Blue"),
         ("#7C3AED", "#A78BFA", "Modern Purple")),
        "Green = money/growth. Blue = trust. Purple = modern/disruptive. Robinhood, Stripe, Nubank.",
    ),
    "crypto": _palette(
        "#22C55E", "#A855F7", "#09090B", "#F4F4F5",
        (("#14B8A6", "#06B6D4", "Teal Flow"),
         ("#8B5CF6", "#EC4899", "NFT Purple"),
         ("#F97316", "#FBBF24", "Bitcoin Orange"),
         ("#3B82F6", "#1D4ED8", "DeFi Blue")),
        "Green for growth/wealth. Purple for innovation. Orange for Bitcoin ecosystem. "
        "Ethereum, Uniswap, Chainlink.",
    ),
    "ai": _palette(
        "#8B5CF6", "#06B6D4", "#0A0A0A", "#FAFAFA",
        (("#10B981", "#14B8A6", "OpenAI Green"),
         ("#6366F1", "#3B82F6", "Anthropic Blue"),
         ("#EC4899", "#F43F5E", "Midjourney Pink"),
         ("#F97316", "#FBBF24", "Warm Intelligence")),
        "Purple = creativity/intelligence. Cyan = tech/future. Green = helpful. OpenAI, Anthropic, Midjourney.",
    ),
    "developer": _palette(
        "#F97316", "#22C55E", "#0D1117", "#C9D1D9",
        (("#EF4444", "#F97316", "Error Red"),
         ("#3B82F6", "#60A5FA", "VS Code Blue"),
         ("#A855F7", "#C084FC", "Supabase Purple"),
         ("#FBBF24", "#F59E0B", "Warning Yellow")),
        "Orange/red = power. Green = terminal/success. Dark backgrounds always. GitHub, Vercel, Supabase.",
    ),
    "healthcare": _palette(
        "#0EA5E9", "#10B981", "#FFFFFF", "#0F172A",
        (("#3B82F6", "#06B6D4", "Hospital Blue"),
         ("#14B8A6", "#5EEAD4", "Wellness Teal"),
         ("#EC4899", "#F472B6", "Care Pink"),
         ("#22C55E", "#86EFAC", "Natural Health")),
        "Blue = trust, calm. Green = health, nature. White = cleanliness. CVS, Headspace, One Medical.",
    ),
    "ecommerce": _palette(
        "#F97316", "#FBBF24", "#FFFFFF", "#171717",
        (("#EF4444", "#F97316", "Sale Red"),
         ("#8B5CF6", "#A855F7", "Luxury Purple"),
         ("#22C55E", "#16A34A", "Eco Commerce")),
        "Orange = action, enthusiasm. Yellow = value. Red = urgency. Amazon, Etsy, Shopify.",
    ),
    "education": _palette(
        "#3B82F6", "#22C55E", "#FAFAFA", "#1E293B",
        (("#8B5CF6", "#6366F1", "Creative Learning"),
         ("#F97316", "#FBBF24", "Engaging Orange"),
         ("#14B8A6", "#06B6D4", "Modern EdTech")),
        "Blue = knowledge/trust. Green = growth. Orange = engagement. Duolingo, Coursera, Khan Academy.",
    ),
    "food": _palette(
        "#EF4444", "#F97316", "#FEF2F2", "#1C1917",
        (("#FBBF24", "#F97316", "Fast Food Yellow"),
         ("#22C55E", "#16A34A", "Fresh & Healthy"),
         ("#92400E", "#D97706", "Artisan Brown")),
        "Red/orange stimulate appetite. Green = fresh/healthy. Brown = artisan. "
        "McDonald's, Starbucks, Whole Foods.",
    ),
    "real-estate": _palette(
        "#1D4ED8", "#D4AF37", "#FFFFFF", "#0F172A",
        (("#166534", "#22C55E", "Property Green"),
         ("#0F172A", "#64748B", "Premium Dark"),
         ("#7C3AED", "#A855F7", "Modern Purple")),
        "Blue = trust/stability. Gold = premium/value. Green = growth. Zillow, Redfin, Compass.",
    ),
    "fitness": _palette(
        "#EF4444", "#F97316", "#0A0A0A", "#FAFAFA",
        (("#22C55E", "#10B981", "Healthy Green"),
         ("#3B82F6", "#06B6D4", "Active Blue"),
         ("#F97316", "#FBBF24", "Energetic Orange")),
        "Red = power, energy. Orange = motivation. Dark backgrounds = strength. Nike, Peloton, Under Armour.",
    ),
    "travel": _palette(
        "#0EA5E9", "#F97316", "#FFFFFF", "#0F172A",
        (("#14B8A6", "#06B6D4", "Ocean Teal"),
         ("#EC4899", "#F43F5E", "Adventure Pink"),
         ("#8B5CF6", "#A855F7", "Premium Purple")),
        "Blue = sky/ocean, trust. Orange = adventure, sunset. Airbnb, Booking, Expedia.",
    ),
    "sustainability": _palette(
        "#16A34A", "#22C55E", "#F0FDF4", "#14532D",
        (("#15803D", "#86EFAC", "Forest Green"),
         ("#14B8A6", "#5EEAD4", "Ocean Teal"),
         ("#84CC16", "#A3E635", "Lime Fresh")),
        "Green = nature, sustainability, growth. Universal eco-friendly signal. Ecosia, Beyond Meat.",
    ),
    "gaming": _palette(
        "#8B5CF6", "#06B6D4", "#09090B", "#F4F4F5",
        (("#EF4444", "#F97316", "Action Red"),
         ("#22C55E", "#14B8A6", "Xbox Green"),
         ("#3B82F6", "#1D4ED8", "PlayStation Blue")),
        "Purple = creativity, gaming culture. Neon accents = digital excitement. Twitch, Discord, Steam.",
    ),
    "media": _palette(
        "#DC2626", "#1E293B", "#FFFFFF", "#0F172A",
        (("#0F172A", "#3B82F6", "Trusted Blue"),
         ("#16A34A", "#22C55E", "Eco Media"),
         ("#7C3AED", "#A855F7", "Digital Media")),
        "Red = urgency, breaking news. Dark blue = authority, trust. CNN, BBC, NYT.",
    ),
    GENERAL: _palette(
        "#3B82F6", "#8B5CF6", "#FFFFFF", "#0F172A",
        (("#0F172A", "#64748B", "Minimal Dark"),
         ("#6366F1", "#EC4899", "Modern Gradient"),
         ("#22C55E", "#14B8A6", "Fresh Green")),
        "Blue is universally trusted and professional. Purple adds creativity. Safe default for any industry.",
    ),
}

# UI dropdown labels and common synonyms -> palette key
CATEGORY_ALIASES: dict[str, str] = {
    "saas / b2b startup": "saas",
    "saas/b2b startup": "saas",
    "b2b": "saas",
    "b2b startup": "saas",
    "startup": "saas",
    "mobile app (consumer)": "mobile-app",
    "mobile app": "mobile-app",
    "consumer app": "mobile-app",
    "design agency / studio": "design-agency",
    "design agency": "design-agency",
    "design studio": "design-agency",
    "creative agency": "design-agency",
    "agency": "design-agency",
    "studio": "design-agency",
    "fintech & banking": "fintech",
    "fintech": "fintech",
    "banking": "fintech",
    "finance": "fintech",
    "financial": "fintech",
    "web3 / crypto protocol": "crypto",
    "web3": "crypto",
    "crypto": "crypto",
    "cryptocurrency": "crypto",
    "blockchain": "crypto",
    "defi": "crypto",
    "nft": "crypto",
    "ai / llm tool": "ai",
    "ai": "ai",
    "llm": "ai",
    "machine learning": "ai",
    "artificial intelligence": "ai",
    "developer tool / api": "developer",
    "developer tool": "developer",
    "developer": "developer",
    "api": "developer",
    "devtools": "developer",
    "healthcare": "healthcare",
    "medical": "healthcare",
    "health": "healthcare",
    "wellness": "healthcare",
    "e-commerce": "ecommerce",
    "ecommerce": "ecommerce",
    "retail": "ecommerce",
    "shop": "ecommerce",
    "store": "ecommerce",
    "education": "education",
    "edtech": "education",
    "learning": "education",
    "food": "food",
    "food & beverage": "food",
    "restaurant": "food",
    "beverage": "food",
    "real estate": "real-estate",
    "real-estate": "real-estate",
    "property": "real-estate",
    "fitness": "fitness",
    "sports": "fitness",
    "gym": "fitness",
    "travel": "travel",
    "hospitality": "travel",
    "hotel": "travel",
    "sustainability": "sustainability",
    "green": "sustainability",
    "eco": "sustainability",
    "environment": "sustainability",
    "gaming": "gaming",
    "games": "gaming",
    "entertainment": "gaming",
    "media": "media",
    "news": "media",
    "publishing": "media",
    "technology": "saas",
    "tech": "saas",
    "consulting": "general",
    "fashion": "design-agency",
    "creative": "design-agency",
}


def palette_key(category: str | None) -> str:
    normalized = (category or "").strip().lower()
    key = CATEGORY_ALIASES.get(normalized, normalized)
    return key if key in INDUSTRY_COLORS else GENERAL


def recommend_colors(category: str | None) -> ColorPalette:
    """Alias lookup, then direct palette key, then the general palette."""
    return INDUSTRY_COLORS[palette_key(category)]


def available_color_categories() -> list[str]:
    return list(INDUSTRY_COLORS)
