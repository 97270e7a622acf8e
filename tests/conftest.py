import sys
from pathlib import Path

import pytest

# Ensure `src` is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def default_options():
    from studio_quote.core.models.option import QuoteOptions

    return QuoteOptions.default()


@pytest.fixture
def vocal_form():
    from studio_quote.core.models.forms import VocalMixForm

    return VocalMixForm(
        name="山田太郎",
        email="taro@example.com",
        video_url="https://www.youtube.com/watch?v=abc123",
        other_requests="",
    )


@pytest.fixture
def web_form():
    from studio_quote.core.models.forms import PageSpec, WebCreateForm

    return WebCreateForm(
        name="佐藤花子",
        email="hanako@example.com",
        site_overview="カフェの紹介サイト",
        pages=[
            PageSpec(name="トップ", content="お店の紹介"),
            PageSpec(name="", content="メニュー一覧"),
            PageSpec(name="アクセス", content=""),
        ],
    )
