"""Tests for the ordered intent classifier."""
import pytest

from estatebot.dialogue.intents import (
    DEFAULT_RULES, MAJOR_CITIES, Intent, IntentClassifier, IntentKind,
    classify, is_off_topic, mentioned_city,
)


class TestRuleOrder:
    def test_rule_order_is_fixed(self):
        assert IntentClassifier().rule_names == (
            "greeting", "off_topic", "menu_number", "heading",
            "city_investment", "city_mention", "topic",
        )

    def test_city_query_beats_topic_patterns(self):
        # also matches the investment_advice and property_type topics
        assert classify("invest in Mumbai property") == Intent.city_investment("mumbai")

    def test_heading_beats_topic_patterns(self):
        # "valuation" would otherwise hit the valuation topic
        assert classify("property valuation please") == Intent.menu(1)

    def test_greeting_beats_everything(self):
        assert classify("hello").kind == IntentKind.GREETING

    def test_custom_rules_short_circuit(self):
        calls = []

        def first(message):
            calls.append("first")
            return Intent(IntentKind.LEGAL)

        def second(message):
            calls.append("second")
            return Intent(IntentKind.FINANCING)

        classifier = IntentClassifier([("first", first), ("second", second)])
        assert classifier.classify("anything").kind == IntentKind.LEGAL
        assert calls == ["first"]


class TestGreeting:
    @pytest.mark.parametrize("message", ["hi", "Hello", "  HEY  ", "hola", "Namaste", "greetings"])
    def test_greetings(self, message):
        assert classify(message).kind == IntentKind.GREETING

    def test_greeting_must_be_whole_message(self):
        assert classify("hi there").kind != IntentKind.GREETING


class TestOffTopic:
    def test_long_message_without_keywords(self):
        assert is_off_topic("What is the weather like today")
        assert classify("What is the weather like today").kind == IntentKind.OFF_TOPIC

    @pytest.mark.parametrize("message", ["what is this", "tell me more", "ok", "", "a b c"])
    def test_short_messages_are_never_off_topic(self, message):
        assert not is_off_topic(message)

    def test_keyword_keeps_message_on_topic(self):
        assert not is_off_topic("I am thinking about a new apartment")

    def test_city_name_counts_as_keyword(self):
        assert not is_off_topic("my cousin lives in chandigarh now")


class TestMenu:
    @pytest.mark.parametrize("option", range(1, 9))
    def test_single_digit(self, option):
        assert classify(str(option)) == Intent.menu(option)

    @pytest.mark.parametrize("message", ["0", "9", "12", "3."])
    def test_other_numbers_are_not_menu(self, message):
        assert classify(message).kind != IntentKind.MENU_SELECTION

    @pytest.mark.parametrize("message, option", [
        ("Property Valuation", 1),
        ("Tell me about Property Search", 2),
        ("financial guidance", 3),
        ("I need legal information", 4),
    ])
    def test_headings(self, message, option):
        assert classify(message) == Intent.menu(option)


class TestCities:
    @pytest.mark.parametrize("message, city", [
        ("I want to invest in Mumbai", "mumbai"),
        ("What are the best properties in Chennai?", "chennai"),
        ("Investment opportunities at Hyderabad", "hyderabad"),
        ("should I buy in pune", "pune"),
    ])
    def test_investment_queries(self, message, city):
        assert classify(message) == Intent.city_investment(city)

    def test_investment_query_for_unsupported_city_falls_through(self):
        # Ahmedabad has prices but no investment profile
        assert classify("Looking for investment in Ahmedabad").kind == IntentKind.INVESTMENT_ADVICE

    @pytest.mark.parametrize("city", MAJOR_CITIES)
    def test_city_alone(self, city):
        assert classify(city) == Intent.city_investment(city)
        assert classify(city.title()) == Intent.city_investment(city)

    def test_two_cities_are_not_a_mention(self):
        assert mentioned_city("Mumbai or Delhi?") is None
        assert classify("Mumbai or Delhi?").kind == IntentKind.UNCLASSIFIED

    def test_long_message_is_not_a_mention(self):
        assert mentioned_city("pune is where I want to live") is None

    def test_mention_needs_whole_word(self):
        assert mentioned_city("punedelhi") is None


class TestTopics:
    @pytest.mark.parametrize("message, kind", [
        ("What is the price trend in Pune", IntentKind.PROPERTY_VALUATION),
        ("market growth report", IntentKind.MARKET_TRENDS),
        ("what amenities come with a flat", IntentKind.PROPERTY_FEATURES),
        ("what is the rental yield", IntentKind.INVESTMENT_ADVICE),
        ("villa or apartment", IntentKind.PROPERTY_TYPE),
        ("How does a home loan work", IntentKind.FINANCING),
        ("Do I need stamp duty registration", IntentKind.LEGAL),
        ("Which area is good for families", IntentKind.LOCATIONS),
    ])
    def test_topics(self, message, kind):
        assert classify(message).kind == kind

    def test_first_matching_topic_wins(self):
        # matches valuation, market_trends and financing
        assert classify("price growth and emi").kind == IntentKind.PROPERTY_VALUATION


class TestTotality:
    @pytest.mark.parametrize("message", ["what is this", "9", "???", "", "   ", "\n"])
    def test_unmatched_input_is_unclassified(self, message):
        assert classify(message).kind == IntentKind.UNCLASSIFIED

    def test_none_is_tolerated(self):
        assert IntentClassifier().classify(None).kind == IntentKind.UNCLASSIFIED

    @pytest.mark.parametrize("message", [
        "hi", "invest in Mumbai property", "How does a home loan work", "What is the weather like today",
    ])
    def test_deterministic(self, message):
        assert classify(message) == classify(message)

    def test_default_rules_are_immutable(self):
        assert isinstance(DEFAULT_RULES, tuple)
