"""Ranking models."""

from typing import Dict, List

from pydantic import BaseModel, Field

from ..models import NewsCluster


class ClusterScore(BaseModel):
    """Popularity score of one cluster with breakdown."""

    cluster_id: str = Field(..., description="Cluster identifier")
    total_score: float = Field(..., description="Sum of all component scores")
    components: Dict[str, float] = Field(default_factory=dict, description="Score per scorer")


class RankingResult(BaseModel):
    """Result of ranking one section's clusters."""

    section: str = Field(..., description="Section name")
    total_clusters: int = Field(..., description="Clusters before filtering")
    filtered_out: int = Field(0, description="Single-source clusters dropped by section rules")
    ranked_clusters: List[NewsCluster] = Field(..., description="Kept clusters, most popular first")
    scores: List[ClusterScore] = Field(default_factory=list, description="Scores of the kept clusters")
