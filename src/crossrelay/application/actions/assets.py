"""Asset mention detection."""

import re

# ticker / name -> data source asset ID
KNOWN_ASSETS: dict[str, str] = {
    "btc": "bitcoin",
    "bitcoin": "bitcoin",
    "eth": "ethereum",
    "ethereum": "ethereum",
    "sol": "solana",
    "solana": "solana",
    "xrp": "ripple",
    "bnb": "binancecoin",
    "doge": "dogecoin",
    "dogecoin": "dogecoin",
    "ada": "cardano",
    "cardano": "cardano",
}

DEFAULT_ASSETS: tuple[str, ...] = ("bitcoin", "ethereum")

_ASSET_PATTERN = re.compile(
    r"(?<![\w$])\$?(" + "|".join(sorted(KNOWN_ASSETS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)


def extract_assets(text: str) -> list[str]:
    """Find known assets mentioned in text.

    Args:
        text: Message text.

    Returns:
        Asset IDs in order of first mention, without duplicates.
    """
    found: list[str] = []
    for match in _ASSET_PATTERN.finditer(text):
        coin_id = KNOWN_ASSETS[match.group(1).lower()]
        if coin_id not in found:
            found.append(coin_id)
    return found
