import re
from typing import Optional


def safe_slug(text: str, limit: Optional[int] = None) -> str:
    """
    Robust slug derivation for brand names:
      - Lowercase, replace spaces and underscores with hyphens, collapse repeats.
      - Strip special characters, provide fallback for empty results.
    """
    s = text.strip().replace("_", "-").replace(" ", "-")
    s = re.sub(r"[^a-zA-Z0-9-]", "", s)
    s = re.sub(r"-{2,}", "-", s).strip("-").lower()
    if limit is not None:
        s = s[:limit].rstrip("-")
    return s or "unnamed"


def alnum_prefix(text: str, n: int) -> str:
    """First ``n`` ASCII alphanumerics of ``text``; safe inside an XML id."""
    return re.sub(r"[^a-zA-Z0-9]", "", text)[:n]
