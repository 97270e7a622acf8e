from dataclasses import dataclass, field
from typing import List


@dataclass
class VocalMixForm:
    """Customer input for a vocal mix request."""

    name: str = ""
    email: str = ""
    video_url: str = ""
    other_requests: str = ""


@dataclass
class PageSpec:
    name: str = ""
    content: str = ""


def _one_blank_page() -> List[PageSpec]:
    return [PageSpec()]


@dataclass
class WebCreateForm:
    """Customer input for a website build request. Always carries at least one page."""

    name: str = ""
    email: str = ""
    contact_info: str = ""
    site_overview: str = ""
    pages: List[PageSpec] = field(default_factory=_one_blank_page)
    deadline: str = ""
    budget: str = ""
