"""Default URLs and constants for fetching Habbo furnidata."""
from __future__ import annotations

# Some hotels reject requests without a browser user agent
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_TIMEOUT = 30.0      # seconds, per request

# Hotel code -> domain suffix
HOTEL_DOMAINS: dict[str, str] = {
    "com": "com",
    "br": "com.br",
    "tr": "com.tr",
    "de": "de",
    "es": "es",
    "fi": "fi",
    "fr": "fr",
    "it": "it",
    "nl": "nl",
}

# Format -> gamedata path
FURNIDATA_PATHS: dict[str, str] = {
    "xml": "gamedata/furnidata_xml/0",
    "txt": "gamedata/furnidata/0",
}


def derive_furnidata_url(hotel: str = "com", fmt: str = "xml") -> str:
    """Build the public furnidata URL for a hotel code and wire format."""
    domain = HOTEL_DOMAINS.get(hotel.lower())
    if domain is None:
        raise ValueError(f"Unknown hotel '{hotel}'. Known: {', '.join(HOTEL_DOMAINS)}")
    path = FURNIDATA_PATHS.get(fmt.lower())
    if path is None:
        raise ValueError(f"Unknown furnidata format '{fmt}'. Known: {', '.join(FURNIDATA_PATHS)}")
    return f"https://www.habbo.{domain}/{path}"
