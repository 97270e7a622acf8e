import re

URL_PATTERN = re.compile(r"^https?://[\w\-]+(\.[\w\-]+)+[/#?]?.*$", re.ASCII)


def is_valid_url(url: str) -> bool:
    return bool(URL_PATTERN.match(url or ""))


def should_warn_url(url: str) -> bool:
    """True when a non-empty URL looks malformed. Advisory only, never blocks sending."""
    return bool(url) and not is_valid_url(url)
