"""Tests for reply templates."""
import pytest

from estatebot.dialogue.intents import Intent, IntentKind
from estatebot.dialogue.responses import (
    CONTACT_EMAIL, CONTACT_PHONE, GREETING, MENU_FALLBACK, OFF_TOPIC, TOPICS, UNCLASSIFIED,
    render, render_city,
)


def test_every_intent_kind_renders_non_empty_text():
    intents = [Intent(kind) for kind in IntentKind if kind not in (IntentKind.MENU_SELECTION, IntentKind.CITY_INVESTMENT)]
    intents += [Intent.menu(n) for n in range(1, 9)]
    intents += [Intent.city_investment("pune"), Intent.city_investment("atlantis")]
    for intent in intents:
        assert render(intent).strip()


def test_fixed_messages():
    assert render(Intent(IntentKind.GREETING)) == GREETING
    assert render(Intent(IntentKind.OFF_TOPIC)) == OFF_TOPIC
    assert render(Intent(IntentKind.UNCLASSIFIED)) == UNCLASSIFIED


def test_contact_option_has_phone_and_email():
    text = render(Intent.menu(8))
    assert CONTACT_PHONE in text
    assert CONTACT_EMAIL in text


def test_valuation_menu_lists_required_inputs():
    text = render(Intent.menu(1))
    assert text.startswith("💰 *Property Valuation*")
    assert "2. Square footage" in text


def test_out_of_range_menu_option():
    assert render(Intent.menu(9)) == MENU_FALLBACK


@pytest.mark.parametrize("kind", list(TOPICS))
def test_topic_blocks_have_four_numbered_sections(kind):
    text = render(Intent(kind))
    for number in ("1️⃣", "2️⃣", "3️⃣", "4️⃣"):
        assert number in text
    assert text.endswith(TOPICS[kind].closing)


def test_topic_tips_block_is_optional():
    assert "💡" not in render(Intent(IntentKind.PROPERTY_VALUATION))
    assert "💡 *Financial Tips:*" in render(Intent(IntentKind.FINANCING))


def test_city_profile_is_substituted():
    text = render(Intent.city_investment("hyderabad"))
    assert text.startswith("🏢 *Investment Opportunities in Hyderabad*")
    assert "   • HITEC City" in text
    assert "Expected ROI: 9-15%" in text
    assert "Growth potential: Very High" in text
    assert text.endswith("any of these areas in hyderabad?")


def test_unknown_city_uses_generic_profile():
    text = render_city("Atlantis")
    assert "   • Prime localities\n   • Developing areas" in text
    assert "Expected ROI: 7-10%" in text
    assert "Growth potential: Varies by location" in text


def test_render_is_pure():
    intent = Intent.city_investment("kolkata")
    assert render(intent) == render(intent)
