"""Load item dumps produced by the feed and email fetchers."""

import json
from pathlib import Path
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError
from rich.console import Console

from ..models import EvidenceArticle, NewsItem

console = Console(stderr=True)

DEFAULT_SECTION = "global"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")


def parse_records(records: List[Dict], model: Type[ModelT]) -> List[ModelT]:
    """Validate raw records, skipping the ones that cannot be read."""
    parsed = []
    for index, record in enumerate(records):
        try:
            parsed.append(model(**record))
        except (ValidationError, TypeError) as e:
            console.print(f"[yellow]Skipping invalid record {index}: {e}[/yellow]")
    return parsed


def load_news_items(path: Path, default_section: str = DEFAULT_SECTION) -> Dict[str, List[NewsItem]]:
    """
    Load news items grouped by section.

    Accepts either a JSON list of items (placed under ``default_section``)
    or an object mapping section names to item lists.
    """
    data = _read_json(path)

    if isinstance(data, list):
        return {default_section: parse_records(data, NewsItem)}

    if isinstance(data, dict):
        sections = {}
        for section, records in data.items():
            if not isinstance(records, list):
                raise ValueError(f"Section '{section}' must contain a list of items")
            sections[section] = parse_records(records, NewsItem)
        return sections

    raise ValueError(f"Expected a list or an object of sections in {path}")


def load_evidence_articles(path: Path) -> List[EvidenceArticle]:
    """Load research articles from a JSON list or an ``{"articles": [...]}`` object."""
    data = _read_json(path)

    if isinstance(data, dict):
        data = data.get("articles", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of articles in {path}")

    return parse_records(data, EvidenceArticle)
