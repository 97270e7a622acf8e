import logging

import pytest

from studio_quote.core.services import submission
from studio_quote.core.services.validation import is_valid_url, should_warn_url


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=abc",
        "http://example.com",
        "https://nicovideo.jp/watch/sm1",
        "https://example.com/",
    ],
)
def test_valid_urls(url):
    assert is_valid_url(url)
    assert not should_warn_url(url)


@pytest.mark.parametrize("url", ["example.com", "ftp://example.com", "https://localhost", "https://"])
def test_invalid_urls_raise_warning(url):
    assert not is_valid_url(url)
    assert should_warn_url(url)


def test_empty_url_is_not_flagged():
    assert not is_valid_url("")
    assert not should_warn_url("")


def test_submit_order_logs_waits_and_succeeds(caplog):
    waits = []
    payload = submission.build_payload("山田", "y@example.com", "本文")

    with caplog.at_level(logging.INFO):
        ok = submission.submit_order(payload, delay=1.0, sleep=waits.append)

    assert ok is True
    assert waits == [1.0]
    assert payload == {"name": "山田", "email": "y@example.com", "message": "本文"}
    assert "y@example.com" in caplog.text


def test_submit_order_without_delay_does_not_sleep():
    waits = []
    assert submission.submit_order({"name": "a", "email": "", "message": ""}, delay=0, sleep=waits.append)
    assert waits == []
