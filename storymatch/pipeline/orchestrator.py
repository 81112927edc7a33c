"""Pipeline orchestrator that clusters and ranks every section of a run."""

import time
from typing import Dict, List, Optional

import pendulum
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from ..clustering import (
    ClusterEngine,
    FallbackHeadlineSelector,
    HeadlineSelector,
    NeutralHeadlineSelector,
    PassthroughHeadlineSelector,
)
from ..clustering.headlines import HeadlinePolicy
from ..config import Config
from ..dedup import collapse_duplicates
from ..models import EvidenceArticle, NewsCluster, NewsItem, SectionResult
from ..ranking import ClusterRanker

console = Console(stderr=True)


class PipelineStage:
    """Represents a pipeline stage."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.success = False
        self.errors: Dict[str, str] = {}
        self.stats: Dict = {}

    def start(self):
        """Mark stage as started."""
        self.start_time = time.time()

    def complete(self, stats: Optional[Dict] = None):
        """Mark stage as completed; it succeeds only if no section failed."""
        self.end_time = time.time()
        self.success = not self.errors
        if stats:
            self.stats.update(stats)

    def fail(self, section: str, error: str):
        """Record a failure for one section."""
        self.errors[section] = error

    @property
    def duration(self) -> float:
        """Get stage duration in seconds."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


class PipelineOrchestrator:
    """Clusters each section independently, then applies section ranking."""

    def __init__(
        self,
        config: Config,
        headline_selector: Optional[HeadlinePolicy] = None,
        show_progress: bool = True,
    ):
        """
        Initialize pipeline orchestrator.

        Args:
            config: Configuration manager
            headline_selector: External headline policy; failures fall back to
                the configured built-in policy
            show_progress: Whether to render progress and the summary table
        """
        self.config = config
        self.show_progress = show_progress
        self.headline_selector = self._build_headline_selector(headline_selector)
        self.stages = self._new_stages()

    @staticmethod
    def _new_stages() -> List[PipelineStage]:
        return [
            PipelineStage("cluster", "Clustering items into stories"),
            PipelineStage("rank", "Applying section rules and ranking"),
        ]

    def _build_headline_selector(self, external: Optional[HeadlinePolicy]) -> HeadlineSelector:
        """Get configured headline policy."""
        if self.config.config.headline_policy == "neutral":
            builtin: HeadlineSelector = NeutralHeadlineSelector()
        else:
            builtin = PassthroughHeadlineSelector()

        if external is None:
            return builtin
        return FallbackHeadlineSelector(external, builtin)

    def cluster_section(self, section: str, items: List[NewsItem]) -> List[NewsCluster]:
        """Cluster one section with its own thresholds."""
        engine = ClusterEngine(
            thresholds=self.config.thresholds_for(section),
            headline_selector=self.headline_selector,
        )
        return engine.cluster(items)

    def dedupe_evidence(self, articles: List[EvidenceArticle]) -> List[EvidenceArticle]:
        """Collapse duplicate research articles to one record each."""
        return collapse_duplicates(articles, self.config.config.dedup.title_threshold)

    def run(self, sections: Dict[str, List[NewsItem]]) -> Dict[str, SectionResult]:
        """
        Run clustering and ranking for every section.

        A section that fails in either stage is left out of the result and
        recorded on the stage; other sections still complete.
        """
        self.stages = self._new_stages()
        cluster_stage, rank_stage = self.stages
        clustered: Dict[str, List[NewsCluster]] = {}
        results: Dict[str, SectionResult] = {}

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=console,
            disable=not self.show_progress,
        ) as progress:
            task = progress.add_task(cluster_stage.description, total=len(sections))
            cluster_stage.start()
            for section, items in sections.items():
                try:
                    clustered[section] = self.cluster_section(section, items)
                except Exception as e:
                    cluster_stage.fail(section, str(e))
                progress.advance(task, 1)
            cluster_stage.complete({
                "sections": len(sections),
                "items": sum(len(items) for items in sections.values()),
                "clusters": sum(len(c) for c in clustered.values()),
            })

            progress.remove_task(task)
            task = progress.add_task(rank_stage.description, total=len(clustered))
            rank_stage.start()
            now = pendulum.now("UTC")
            filtered_out = 0
            for section, clusters in clustered.items():
                try:
                    ranking = ClusterRanker(section, self.config.section(section), now=now).rank(clusters)
                except Exception as e:
                    rank_stage.fail(section, str(e))
                    progress.advance(task, 1)
                    continue

                filtered_out += ranking.filtered_out
                results[section] = SectionResult(
                    section=section,
                    updated_at=now,
                    clusters=ranking.ranked_clusters,
                )
                progress.advance(task, 1)
            rank_stage.complete({
                "selected": sum(len(r.clusters) for r in results.values()),
                "filtered_out": filtered_out,
            })

        if self.show_progress:
            self._print_summary()

        return results

    def _print_summary(self):
        """Print pipeline execution summary."""
        table = Table(title="Pipeline Summary")
        table.add_column("Stage", style="cyan")
        table.add_column("Status", style="bold")
        table.add_column("Duration", style="yellow")
        table.add_column("Details", style="dim")

        for stage in self.stages:
            status = "[green]✓[/green]" if stage.success else "[red]✗[/red]"
            duration = f"{stage.duration:.2f}s" if stage.duration > 0 else "-"

            if stage.name == "cluster":
                details = (
                    f"{stage.stats.get('items', 0)} items -> "
                    f"{stage.stats.get('clusters', 0)} clusters in {stage.stats.get('sections', 0)} sections"
                )
            else:
                details = (
                    f"{stage.stats.get('selected', 0)} selected, "
                    f"{stage.stats.get('filtered_out', 0)} filtered out"
                )
            if stage.errors:
                details += "; failed: " + ", ".join(f"{s} ({e})" for s, e in stage.errors.items())

            table.add_row(stage.name.title(), status, duration, details)

        console.print(table)
