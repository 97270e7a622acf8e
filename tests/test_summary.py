from dataclasses import replace

from studio_quote.core.calculations.pricing_engine import apply_selection_update, compute_total
from studio_quote.core.services.summary import (
    SEPARATOR,
    generate_order_summary,
    generate_web_create_summary,
    parse_summary_total,
)


def _scenario_options(options):
    options = apply_selection_update(options, "vocal_addition", "selected", True)
    options = apply_selection_update(options, "vocal_addition", "quantity", 2)
    return apply_selection_update(options, "encoding", "selected", True)


def test_separator_is_46_dashes():
    assert SEPARATOR == "-" * 46


def test_vocal_summary_full_layout(vocal_form, default_options):
    options = _scenario_options(default_options)
    total = compute_total(3000, options)

    summary = generate_order_summary(vocal_form, options, total, "email")

    assert summary.split("\n") == [
        "名前 : 山田太郎",
        "メール : taro@example.com",
        "動画URL : https://www.youtube.com/watch?v=abc123",
        SEPARATOR,
        "ボーカルミックス基本プラン",
        "・ボーカル追加: 2人",
        "・エンコード",
        SEPARATOR,
        "合計金額 : ¥7,500",
    ]


def test_vocal_summary_includes_trimmed_notes(vocal_form, default_options):
    form = replace(vocal_form, other_requests="  リバーブ少なめで  \n")
    options = apply_selection_update(default_options, "urgent_three_day", "selected", True)

    lines = generate_order_summary(form, options, 5000).split("\n")

    assert "・お急ぎ納品 (3日以内)" in lines
    idx = lines.index("その他のご要望・ご質問等 : ")
    assert lines[idx + 1] == "リバーブ少なめで"
    assert lines[idx + 2] == SEPARATOR
    assert lines[-1] == "合計金額 : ¥5,000"


def test_vocal_summary_skips_email_for_other_contact_method(vocal_form, default_options):
    summary = generate_order_summary(vocal_form, default_options, 3000, "twitter")
    assert "メール" not in summary

    no_email = generate_order_summary(replace(vocal_form, email=""), default_options, 3000, "email")
    assert "メール" not in no_email


def test_vocal_summary_blank_when_required_missing(vocal_form, default_options):
    assert generate_order_summary(replace(vocal_form, name=""), default_options, 3000) == ""
    assert generate_order_summary(replace(vocal_form, name="   "), default_options, 3000) == ""
    assert generate_order_summary(replace(vocal_form, video_url=""), default_options, 3000) == ""


def test_summary_total_round_trip(vocal_form, default_options):
    options = _scenario_options(default_options)
    options = apply_selection_update(options, "vocal_addition", "quantity", 5)
    options = apply_selection_update(options, "urgent_seven_day", "selected", True)
    total = compute_total(3000, options)

    summary = generate_order_summary(vocal_form, options, total)

    assert parse_summary_total(summary) == total == 14500
    assert parse_summary_total("") is None


def test_web_summary_layout(web_form):
    summary = generate_web_create_summary(web_form, "email", estimated_price=4500, price_per_page=1500)

    assert summary.split("\n") == [
        "名前: 佐藤花子",
        "メール: hanako@example.com",
        "サイトの概要: カフェの紹介サイト",
        SEPARATOR,
        "ページ構成:",
        "1. トップ",
        "   内容: お店の紹介",
        "2. (未入力)",
        "   内容: メニュー一覧",
        "3. アクセス",
        SEPARATOR,
        "概算見積もり: ¥4,500 (3ページ × ¥1,500)",
        "※内容により料金は変動いたします",
        SEPARATOR,
    ]


def test_web_summary_deadline_and_budget_order(web_form):
    form = replace(web_form, deadline="来月末", budget="5万円")
    lines = generate_web_create_summary(form, estimated_price=4500).split("\n")
    assert lines[-2:] == ["納期: 来月末", "予算: 5万円"]

    only_budget = generate_web_create_summary(replace(web_form, budget="5万円")).split("\n")
    assert only_budget[-1] == "予算: 5万円"
    assert not any(line.startswith("納期") for line in only_budget)


def test_web_summary_skips_empty_pages_but_keeps_numbering(web_form):
    pages = [web_form.pages[0], replace(web_form.pages[0], name="", content=""), web_form.pages[2]]
    summary = generate_web_create_summary(replace(web_form, pages=pages))
    assert "2." not in summary
    assert "3. アクセス" in summary
    assert "概算見積もり" not in summary


def test_web_summary_blank_when_required_missing(web_form):
    assert generate_web_create_summary(replace(web_form, name="")) == ""
    assert generate_web_create_summary(replace(web_form, site_overview="")) == ""


def test_whitespace_only_required_fields_count_as_blank(vocal_form, web_form, default_options):
    assert generate_order_summary(replace(vocal_form, video_url="   "), default_options, 3000) == ""
    assert generate_web_create_summary(replace(web_form, site_overview="  ")) == ""
    assert generate_web_create_summary(replace(web_form, name=" \t")) == ""


def test_web_summary_skips_email_for_other_contact_method(web_form):
    summary = generate_web_create_summary(web_form, "twitter", estimated_price=4500)
    assert summary.startswith("名前: 佐藤花子\nサイトの概要: ")
    assert "メール" not in summary

    no_email = generate_web_create_summary(replace(web_form, email="  "), "email")
    assert "メール" not in no_email
