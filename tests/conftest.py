import pytest

from storymatch.models import EvidenceArticle, NewsItem


@pytest.fixture
def make_item():
    counter = {"n": 0}

    def _make_item(title, source="Source", published_at="2024-05-01T10:00:00Z", **kwargs):
        counter["n"] += 1
        kwargs.setdefault("url", f"https://news.example.com/story/{counter['n']}")
        return NewsItem(title=title, source=source, published_at=published_at, **kwargs)

    return _make_item


@pytest.fixture
def make_article():
    def _make_article(id, title, journal, **kwargs):
        return EvidenceArticle(id=id, title=title, journal=journal, **kwargs)

    return _make_article
