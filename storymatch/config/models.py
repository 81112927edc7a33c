"""Configuration models."""

from typing import Dict, List, Literal

from pydantic import BaseModel, Field, model_validator


class ClusterThresholds(BaseModel):
    """Similarity thresholds for one partition of the input."""

    similarity_threshold: float = Field(0.18, description="Merge threshold for union-find", gt=0.0, lt=1.0)
    min_pair_similarity: float = Field(0.08, description="Minimum similarity for every pair in a cluster", gt=0.0, lt=1.0)

    @model_validator(mode="after")
    def validate_ordering(self) -> "ClusterThresholds":
        """The pair floor cannot exceed the merge threshold."""
        if self.min_pair_similarity > self.similarity_threshold:
            raise ValueError(
                f"min_pair_similarity ({self.min_pair_similarity}) must not exceed "
                f"similarity_threshold ({self.similarity_threshold})"
            )
        return self


class TopicBoost(BaseModel):
    """Popularity bonus applied once when any of its keywords is in a title."""

    keywords: List[str] = Field(..., description="Keywords or phrases, matched as whole words", min_length=1)
    bonus: float = Field(..., description="Points added (or removed, when negative)")


def _boost(bonus: float, *keywords: str) -> TopicBoost:
    return TopicBoost(keywords=list(keywords), bonus=bonus)


class SectionConfig(BaseModel):
    """Clustering and ranking rules for one news section."""

    thresholds: ClusterThresholds = Field(default_factory=ClusterThresholds)
    require_multi_source: bool = Field(
        False,
        description="Drop single-source clusters unless they come from a trusted source",
    )
    trusted_sources: List[str] = Field(
        default_factory=list,
        description="Sources allowed to appear as single-source stories",
    )
    topic_boosts: List[TopicBoost] = Field(
        default_factory=list,
        description="Keyword groups scored on single-source titles",
    )
    max_clusters: int = Field(50, description="Max clusters kept for the section", ge=1, le=1000)


class DedupConfig(BaseModel):
    """Duplicate-article detection configuration."""

    title_threshold: float = Field(0.85, description="Title similarity for duplicates", gt=0.0, le=1.0)


def default_sections() -> Dict[str, SectionConfig]:
    """Built-in section settings."""
    return {
        "global": SectionConfig(
            thresholds=ClusterThresholds(similarity_threshold=0.18, min_pair_similarity=0.08),
            require_multi_source=True,
            topic_boosts=[_boost(-5, "weather", "traffic"), _boost(-3, "sport")],
        ),
        "australia": SectionConfig(
            thresholds=ClusterThresholds(similarity_threshold=0.18, min_pair_similarity=0.08),
            require_multi_source=True,
            trusted_sources=["ABC News Australia", "ABC Just In", "ABC News Australia (Popular)"],
            topic_boosts=[
                _boost(12, "election", "politics", "government"),
                _boost(10, "economy", "housing", "interest rate"),
                _boost(8, "climate", "bushfire", "flood"),
                _boost(6, "sydney", "melbourne", "brisbane"),
                _boost(5, "sport", "afl", "nrl"),
                _boost(10, "breaking", "live", "urgent"),
                _boost(8, "exclusive", "investigation"),
                _boost(-5, "weather", "traffic"),
            ],
        ),
        # Tech headlines reuse more boilerplate vocabulary, so merge later
        "technology": SectionConfig(
            thresholds=ClusterThresholds(similarity_threshold=0.25, min_pair_similarity=0.12),
            require_multi_source=True,
            trusted_sources=["Ars Technica", "Ars Technica Main"],
            topic_boosts=[
                _boost(15, "ai", "artificial intelligence", "chatgpt", "gpt"),
                _boost(12, "apple", "iphone", "google", "microsoft"),
                _boost(10, "security", "privacy", "hack"),
                _boost(8, "climate", "space", "mars"),
                _boost(8, "bitcoin", "crypto", "blockchain"),
                _boost(6, "tesla", "electric", "ev"),
                _boost(5, "review", "test"),
                _boost(8, "breaking", "exclusive"),
                _boost(-5, "weather", "traffic"),
                _boost(-3, "sport"),
            ],
        ),
        "medical": SectionConfig(
            thresholds=ClusterThresholds(similarity_threshold=0.20, min_pair_similarity=0.10),
            topic_boosts=[_boost(-5, "weather", "traffic"), _boost(-3, "sport")],
            max_clusters=20,
        ),
    }


class ConfigModel(BaseModel):
    """Main configuration model."""

    default_thresholds: ClusterThresholds = Field(default_factory=ClusterThresholds)
    sections: Dict[str, SectionConfig] = Field(default_factory=default_sections)
    dedup: DedupConfig = Field(default_factory=DedupConfig)
    headline_policy: Literal["passthrough", "neutral"] = Field(
        "passthrough",
        description="Built-in headline policy used when no external selector is supplied",
    )

    def section(self, name: str) -> SectionConfig:
        """Settings for a section, falling back to defaults for unknown names."""
        if name in self.sections:
            return self.sections[name]
        return SectionConfig(thresholds=self.default_thresholds)
