import pytest
import yaml

from storymatch.config import Config
from storymatch.pipeline import PipelineOrchestrator


@pytest.fixture
def config(tmp_path):
    return Config(tmp_path / "missing.yaml")


@pytest.fixture
def sections(make_item):
    return {
        "global": [
            make_item("Haemorrhage risk rises after surgery", source="BMJ"),
            make_item("Hemorrhage risk rises after surgery", source="Lancet"),
            make_item("Chess tournament ends in dramatic draw", source="Blog"),
        ],
        "medical": [
            make_item("Paediatric anaemia treatment trial", source="BMJ"),
        ],
    }


def test_sections_are_clustered_and_ranked(config, sections):
    results = PipelineOrchestrator(config, show_progress=False).run(sections)

    assert set(results) == {"global", "medical"}
    # global requires multi-source coverage
    assert [c.coverage for c in results["global"].clusters] == [2]
    assert results["global"].clusters[0].popularity_score == 2000
    assert len(results["medical"].clusters) == 1
    assert results["global"].updated_at is not None


def test_stages_report_success(config, sections):
    orchestrator = PipelineOrchestrator(config, show_progress=False)
    orchestrator.run(sections)

    assert [stage.name for stage in orchestrator.stages] == ["cluster", "rank"]
    assert all(stage.success for stage in orchestrator.stages)
    assert orchestrator.stages[0].stats["items"] == 4
    assert orchestrator.stages[1].stats["filtered_out"] == 1


def test_failing_external_headline_falls_back(config, sections):
    def broken(items):
        raise RuntimeError("headline service down")

    results = PipelineOrchestrator(config, headline_selector=broken, show_progress=False).run(sections)
    cluster = results["global"].clusters[0]

    assert cluster.neutral_headline == cluster.title


def test_neutral_policy_from_config(tmp_path, make_item):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"headline_policy": "neutral"}))
    items = {"medical": [make_item("BREAKING: Senator slammed over shocking vote!")]}

    results = PipelineOrchestrator(Config(path), show_progress=False).run(items)

    assert results["medical"].clusters[0].neutral_headline == "Senator criticized over vote."


class FlakyOrchestrator(PipelineOrchestrator):
    def cluster_section(self, section, items):
        if section == "medical":
            raise RuntimeError("boom")
        return super().cluster_section(section, items)


def test_failed_section_does_not_stop_others(config, sections):
    orchestrator = FlakyOrchestrator(config, show_progress=False)
    results = orchestrator.run(sections)

    assert list(results) == ["global"]
    cluster_stage = orchestrator.stages[0]
    assert not cluster_stage.success
    assert cluster_stage.errors == {"medical": "boom"}


def test_stage_errors_reset_between_runs(config, sections):
    orchestrator = FlakyOrchestrator(config, show_progress=False)
    orchestrator.run(sections)
    orchestrator.run({"global": sections["global"]})

    assert all(stage.success for stage in orchestrator.stages)


def test_dedupe_evidence(config, make_article):
    articles = [
        make_article("1", "Haemorrhage in surgery", "BJOG"),
        make_article("2", "Hemorrhage in surgery", "BJOG"),
    ]
    survivors = PipelineOrchestrator(config, show_progress=False).dedupe_evidence(articles)
    assert [a.id for a in survivors] == ["1"]
