"""
Utility functions for Walutomat client.

Helper functions for request building and input validation.
"""

from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote, urlencode


def validate_pair(pair: str) -> bool:
    """Validate currency pair format (e.g. "EUR_PLN" or "EURPLN")."""
    if not pair or not isinstance(pair, str):
        return False

    return 6 <= len(pair) <= 7 and pair.replace("_", "").isalpha()


def validate_url(url: str) -> bool:
    """Validate URL format."""
    if not url or not isinstance(url, str):
        return False
    return url.startswith(("http://", "https://")) and "." in url


def format_bool(value: bool) -> str:
    """Render a boolean the way the API expects in query strings and forms."""
    return "true" if value else "false"


def sanitize_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    """Remove None values from dictionary, keeping key order."""
    return {key: value for key, value in data.items() if value is not None}


def encode_params(params: Optional[Dict[str, Any]]) -> str:
    """URL-encode parameters in insertion order. Booleans become true/false."""
    if not params:
        return ""
    items = [
        (key, format_bool(value) if isinstance(value, bool) else value)
        for key, value in sanitize_dict(params).items()
    ]
    return urlencode(items, quote_via=quote)


def build_path(path: str, params: Optional[Dict[str, Any]] = None) -> str:
    """Append an ordered query string to a request path."""
    query = encode_params(params)
    return f"{path}?{query}" if query else path


def currency_pairs(currencies: Iterable[str], separator: str = "_") -> List[str]:
    """Build every unordered pair of currencies, in listing order."""
    currencies = list(currencies)
    return [
        f"{currencies[i]}{separator}{currencies[j]}"
        for i in range(len(currencies) - 1)
        for j in range(i + 1, len(currencies))
    ]
