"""Headline selection strategies for clusters.

The grouping engine calls a selector with the cluster's members (newest
first) and uses whatever string comes back as the neutral headline. Any
callable taking a list of items works; the classes below cover the
built-in policies.
"""

import math
import re
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional, Sequence

from rich.console import Console

from ..models import NewsItem

console = Console(stderr=True)

HeadlinePolicy = Callable[[Sequence[NewsItem]], str]

MAX_HEADLINE_CHARS = 85

_EDITORIAL_PREFIX_RE = re.compile(r"^(The Papers?:|Breaking:|Exclusive:|Just In:|Live:|Update:)", re.IGNORECASE)
_LEADING_MARKER_RE = re.compile(r"^(breaking|exclusive|just in):\s*", re.IGNORECASE)
_CLICKBAIT_RE = re.compile(r"you won't believe|\b(shocking|brutal|destroyed)\b", re.IGNORECASE)
_HARSH_VERB_RE = re.compile(r"\b(slammed|blasted)\b", re.IGNORECASE)
_HYPE_RE = re.compile(r"\b(amazing|incredible|unbelievable|insane|crazy|wild)\b", re.IGNORECASE)
_PUNCTUATION_RE = re.compile(r"[!?:;]")
_QUOTES_RE = re.compile(r"['\"]")
_WS_RE = re.compile(r"\s+")


def neutralize_headline(title: str) -> str:
    """Strip clickbait phrasing and editorial markers from a headline."""
    neutral = _CLICKBAIT_RE.sub("", title or "")
    neutral = _HARSH_VERB_RE.sub("criticized", neutral)
    neutral = re.sub(r"\?$", "", neutral)
    neutral = re.sub(r"!+", ".", neutral)
    neutral = _LEADING_MARKER_RE.sub("", neutral.strip())
    neutral = _HYPE_RE.sub("", neutral)
    neutral = _WS_RE.sub(" ", neutral).strip()

    if len(neutral) > MAX_HEADLINE_CHARS:
        words = neutral.split(" ")
        neutral = " ".join(words[: math.floor(len(words) * 0.7)])
        if not neutral.endswith("."):
            neutral += "..."

    return neutral[:1].upper() + neutral[1:]


class HeadlineSelector(ABC):
    """Base class for headline selection policies."""

    @abstractmethod
    def select(self, items: Sequence[NewsItem]) -> str:
        """
        Choose a headline for a cluster.

        Args:
            items: Cluster members, newest first

        Returns:
            Headline text
        """
        pass

    def __call__(self, items: Sequence[NewsItem]) -> str:
        return self.select(items)


class PassthroughHeadlineSelector(HeadlineSelector):
    """Echo the newest member's original title."""

    def select(self, items: Sequence[NewsItem]) -> str:
        return items[0].title if items else ""


class NeutralHeadlineSelector(HeadlineSelector):
    """Pick the most neutral-looking title among members and clean it up."""

    def __init__(self, preferred_sources: Optional[Iterable[str]] = None) -> None:
        """
        Initialize selector.

        Args:
            preferred_sources: Source names whose titles get a small bonus
        """
        self.preferred_sources = set(preferred_sources or [])

    def score_title(self, item: NewsItem) -> int:
        """Quality score for one member's title."""
        title = item.title
        score = 0

        if 20 <= len(title) <= 80:
            score += 3
        elif len(title) <= 100:
            score += 1

        if not _EDITORIAL_PREFIX_RE.match(title):
            score += 2

        if len(_PUNCTUATION_RE.findall(title)) <= 1:
            score += 2

        if item.source in self.preferred_sources:
            score += 1

        if len(_QUOTES_RE.findall(title)) <= 2:
            score += 1

        return score

    def select(self, items: Sequence[NewsItem]) -> str:
        if not items:
            return ""
        if len(items) == 1:
            return neutralize_headline(items[0].title)

        # max() keeps the first of equal scores, i.e. the newest
        best = max(items, key=self.score_title)
        return neutralize_headline(best.title)


class FallbackHeadlineSelector(HeadlineSelector):
    """Use a primary policy, falling back when it fails or returns nothing.

    Intended for wrapping an external collaborator such as an AI headline
    service.
    """

    def __init__(self, primary: HeadlinePolicy, fallback: Optional[HeadlinePolicy] = None) -> None:
        self.primary = primary
        self.fallback = fallback or PassthroughHeadlineSelector()
        self.failures: List[str] = []

    def select(self, items: Sequence[NewsItem]) -> str:
        try:
            headline = self.primary(items)
        except Exception as e:
            self.failures.append(str(e))
            console.print(f"[yellow]Headline selection failed, using fallback: {e}[/yellow]")
            return self.fallback(items)

        if not headline or not headline.strip():
            return self.fallback(items)
        return headline.strip()
