import pytest
import yaml

from storymatch.config import (
    CONFIG_ENV_VAR,
    Config,
    ConfigModel,
    default_config_path,
    load_config,
    save_config,
)


def test_builtin_section_thresholds():
    config = ConfigModel()

    assert config.section("global").thresholds.similarity_threshold == 0.18
    assert config.section("global").thresholds.min_pair_similarity == 0.08
    assert config.section("technology").thresholds.similarity_threshold == 0.25
    assert config.section("technology").thresholds.min_pair_similarity == 0.12
    assert config.section("medical").thresholds.similarity_threshold == 0.20
    assert config.section("medical").thresholds.min_pair_similarity == 0.10
    assert config.dedup.title_threshold == 0.85
    assert config.headline_policy == "passthrough"


def test_unknown_section_uses_default_thresholds():
    section = ConfigModel().section("sport")

    assert section.thresholds.similarity_threshold == 0.18
    assert section.thresholds.min_pair_similarity == 0.08
    assert not section.require_multi_source


def test_missing_file_uses_defaults(tmp_path):
    config = Config(tmp_path / "missing.yaml")
    assert config.thresholds_for("technology").similarity_threshold == 0.25


def test_load_config_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_yaml_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "default_thresholds": {"similarity_threshold": 0.3, "min_pair_similarity": 0.2},
                "sections": {
                    "medical": {
                        "thresholds": {"similarity_threshold": 0.4, "min_pair_similarity": 0.25},
                        "max_clusters": 5,
                    }
                },
                "headline_policy": "neutral",
            }
        )
    )
    config = Config(path)

    assert config.thresholds_for("medical").similarity_threshold == 0.4
    assert config.section("medical").max_clusters == 5
    # Listing sections replaces the built-in set
    assert config.thresholds_for("global").similarity_threshold == 0.3
    assert config.config.headline_policy == "neutral"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == ConfigModel()


def test_invalid_yaml_raises_value_error(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("sections: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)


def test_invalid_thresholds_raise_value_error(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump({"default_thresholds": {"similarity_threshold": 0.1, "min_pair_similarity": 0.5}})
    )
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    save_config(ConfigModel(), path)
    assert load_config(path) == ConfigModel()


def test_env_var_selects_config(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text(yaml.safe_dump({"dedup": {"title_threshold": 0.9}}))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert default_config_path() == path
    assert Config().config.dedup.title_threshold == 0.9
