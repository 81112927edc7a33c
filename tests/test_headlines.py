import pytest

from storymatch.clustering import (
    FallbackHeadlineSelector,
    NeutralHeadlineSelector,
    PassthroughHeadlineSelector,
    neutralize_headline,
)
from storymatch.clustering.headlines import MAX_HEADLINE_CHARS


class TestNeutralizeHeadline:
    def test_strips_markers_and_clickbait(self):
        assert neutralize_headline("BREAKING: Senator slammed over shocking vote!") == "Senator criticized over vote."

    def test_drops_trailing_question_mark(self):
        assert neutralize_headline("Is the housing market about to turn?") == "Is the housing market about to turn"

    def test_removes_hype_words(self):
        assert neutralize_headline("Incredible rescue at sea") == "Rescue at sea"

    def test_long_headline_trimmed_to_leading_words(self):
        headline = " ".join(["alpha"] * 20)
        assert len(headline) > MAX_HEADLINE_CHARS

        result = neutralize_headline(headline)

        assert result == "Alpha" + " alpha" * 13 + "..."

    def test_clickbait_words_removed_only_when_whole(self):
        assert neutralize_headline("Shockingly cheap flights return") == "Shockingly cheap flights return"
        assert neutralize_headline("Brutal heatwave grips city") == "Heatwave grips city"

    def test_plain_headline_unchanged(self):
        assert neutralize_headline("Parliament passes budget bill") == "Parliament passes budget bill"

    def test_empty(self):
        assert neutralize_headline("") == ""


class TestPassthroughHeadlineSelector:
    def test_returns_first_title(self, make_item):
        items = [make_item("BREAKING: Newest title!"), make_item("Older title")]
        assert PassthroughHeadlineSelector()(items) == "BREAKING: Newest title!"

    def test_no_items(self):
        assert PassthroughHeadlineSelector().select([]) == ""


class TestNeutralHeadlineSelector:
    def test_prefers_title_without_editorial_prefix(self, make_item):
        items = [make_item("Breaking: Storm hits coast"), make_item("Storm hits the coast overnight")]
        assert NeutralHeadlineSelector()(items) == "Storm hits the coast overnight"

    def test_ties_go_to_newest(self, make_item):
        items = [make_item("Storm hits the coast overnight"), make_item("Coastal storm leaves damage behind")]
        assert NeutralHeadlineSelector()(items) == "Storm hits the coast overnight"

    def test_preferred_source_breaks_tie(self, make_item):
        items = [
            make_item("Storm hits the coast overnight", source="Other"),
            make_item("Coastal storm leaves damage behind", source="ABC"),
        ]
        selector = NeutralHeadlineSelector(preferred_sources=["ABC"])
        assert selector(items) == "Coastal storm leaves damage behind"

    def test_single_item_is_neutralized(self, make_item):
        assert NeutralHeadlineSelector()([make_item("Exclusive: Minister blasted!")]) == "Minister criticized."


class TestFallbackHeadlineSelector:
    def test_uses_primary_when_it_succeeds(self, make_item):
        selector = FallbackHeadlineSelector(lambda items: "  Service headline  ")
        assert selector([make_item("Original")]) == "Service headline"
        assert selector.failures == []

    def test_falls_back_on_exception(self, make_item):
        def broken(items):
            raise RuntimeError("service unavailable")

        selector = FallbackHeadlineSelector(broken, NeutralHeadlineSelector())
        result = selector([make_item("BREAKING: Senator slammed over shocking vote!")])

        assert result == "Senator criticized over vote."
        assert selector.failures == ["service unavailable"]

    def test_falls_back_on_blank_result(self, make_item):
        selector = FallbackHeadlineSelector(lambda items: "   ")
        assert selector([make_item("Original title")]) == "Original title"
        assert selector.failures == []

    @pytest.mark.parametrize("fallback", [None, PassthroughHeadlineSelector()])
    def test_default_fallback_is_passthrough(self, make_item, fallback):
        def broken(items):
            raise ValueError("bad response")

        selector = FallbackHeadlineSelector(broken, fallback)
        assert selector([make_item("Newest"), make_item("Older")]) == "Newest"
