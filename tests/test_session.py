from studio_quote.core.services.catalog import PricingConfig
from studio_quote.core.services.session import VocalMixSession, WebCreateSession


def _filled_vocal_session():
    session = VocalMixSession(PricingConfig())
    session.set_field("name", "山田太郎")
    session.set_field("email", "taro@example.com")
    session.set_field("video_url", "https://example.com/v/1")
    return session


def test_vocal_session_recomputes_total_and_summary():
    session = _filled_vocal_session()
    assert session.total == 3000

    session.update_option("vocal_addition", "selected", True)
    session.update_option("vocal_addition", "quantity", 2)
    session.update_option("encoding", "selected", True)

    assert session.total == 7500
    assert session.summary.endswith("合計金額 : ¥7,500")
    assert session.can_submit


def test_vocal_session_requires_name_and_url():
    session = VocalMixSession()
    session.set_field("video_url", "https://example.com/v/1")
    assert not session.can_submit
    assert session.summary == ""


def test_vocal_session_url_warning_is_advisory():
    session = _filled_vocal_session()
    session.set_field("video_url", "not a url")

    assert session.url_warning
    assert session.can_submit


def test_vocal_session_payload_and_reset():
    session = _filled_vocal_session()
    session.update_option("urgent_seven_day", "selected", True)

    payload = session.payload()
    assert payload["name"] == "山田太郎"
    assert payload["email"] == "taro@example.com"
    assert payload["message"] == session.summary

    session.reset()
    assert session.form.name == ""
    assert session.options == PricingConfig().default_options()
    assert session.total == 3000


def test_web_session_page_management():
    session = WebCreateSession(PricingConfig())
    assert len(session.form.pages) == 1
    assert session.estimated_price == 1500

    session.add_page()
    session.add_page()
    session.update_page(1, "name", "会社概要")
    assert session.estimated_price == 4500
    assert session.form.pages[1].name == "会社概要"

    session.remove_page(0)
    assert len(session.form.pages) == 2
    assert session.form.pages[0].name == "会社概要"

    session.remove_page(0)
    session.remove_page(0)
    assert len(session.form.pages) == 1


def test_web_session_summary_uses_configured_page_price():
    session = WebCreateSession(PricingConfig(price_per_page=2000))
    session.set_field("name", "佐藤花子")
    session.set_field("site_overview", "ポートフォリオ")
    session.add_page()

    assert session.can_submit
    assert "概算見積もり: ¥4,000 (2ページ × ¥2,000)" in session.summary

    session.reset()
    assert not session.can_submit
    assert len(session.form.pages) == 1


def test_vocal_session_breakdown_splits_base_and_options():
    session = _filled_vocal_session()
    session.update_option("vocal_addition", "selected", True)
    session.update_option("vocal_addition", "quantity", 3)

    breakdown = session.breakdown

    assert breakdown.base == 3000
    assert breakdown.extras == 6000
    assert breakdown.total == session.total == 9000


def test_only_one_request_in_flight():
    session = _filled_vocal_session()

    payload = session.begin_submit()
    assert payload["message"] == session.summary
    assert session.submitting
    assert not session.can_send

    session.set_field("name", "山田花子")
    assert session.can_submit
    assert session.begin_submit() is None
    assert session.submitting


def test_finish_submit_clears_pending_flag_and_resets_form():
    session = _filled_vocal_session()
    session.begin_submit()

    session.finish_submit(True)

    assert not session.submitting
    assert session.form.name == ""
    assert not session.can_send


def test_failed_submit_keeps_form():
    session = WebCreateSession()
    session.set_field("name", "佐藤花子")
    session.set_field("site_overview", "ポートフォリオ")
    session.begin_submit()

    session.finish_submit(False)

    assert not session.submitting
    assert session.form.name == "佐藤花子"
    assert session.can_send


def test_begin_submit_refuses_incomplete_form():
    session = WebCreateSession()
    assert session.begin_submit() is None
    assert not session.submitting
