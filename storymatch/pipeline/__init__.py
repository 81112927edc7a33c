"""Per-section clustering pipeline."""

from .orchestrator import PipelineOrchestrator, PipelineStage

__all__ = ["PipelineOrchestrator", "PipelineStage"]
