from pathlib import Path

import pytest

from bdd_reports.core.config import Config
from bdd_reports.core.discovery import find_repo_root
from bdd_reports.core.errors import ConfigurationError, RepoRootNotFoundError


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.delenv("BDD_REPORTS_CONFIG", raising=False)
    monkeypatch.delenv("BDD_REPORTS_ROOT", raising=False)


def test_default_paths_follow_project_root(tmp_path: Path):
    config = Config(project_root=tmp_path)
    root = tmp_path.resolve()
    assert config.input_path == root / "target" / "cucumber-reports" / "cucumber.json"
    assert config.report_dir == root / "target" / "html-reports"
    assert config.export_json is False


def test_relative_paths_resolve_against_project_root(tmp_path: Path):
    config = Config(project_root=tmp_path, input_path=Path("logs/run.json"), report_dir="out")
    assert config.input_path == tmp_path.resolve() / "logs" / "run.json"
    assert config.report_dir == tmp_path.resolve() / "out"


def test_toml_file_supplies_defaults(tmp_path: Path):
    (tmp_path / "bdd_reports.toml").write_text(
        "[bdd_reports]\n"
        'input_path = "build/cucumber.json"\n'
        'report_dir = "build/reports"\n'
        "export_json = true\n"
        "verbosity = 2\n"
    )
    config = Config(project_root=tmp_path)
    assert config.input_path == tmp_path.resolve() / "build" / "cucumber.json"
    assert config.report_dir == tmp_path.resolve() / "build" / "reports"
    assert config.export_json is True
    assert config.verbosity == 2


def test_explicit_arguments_win_over_toml(tmp_path: Path):
    (tmp_path / "bdd_reports.toml").write_text(
        "[tool.bdd_reports]\n"
        'report_dir = "from-file"\n'
        "verbosity = 1\n"
    )
    config = Config(project_root=tmp_path, report_dir=tmp_path / "explicit", verbosity=3)
    assert config.report_dir == tmp_path.resolve() / "explicit"
    assert config.verbosity == 3


def test_config_file_from_environment(tmp_path: Path, monkeypatch):
    alt = tmp_path / "alt.toml"
    alt.write_text("[bdd_reports]\nwarn_unknown_elements = true\n")
    monkeypatch.setenv("BDD_REPORTS_CONFIG", str(alt))
    assert Config(project_root=tmp_path).warn_unknown_elements is True


def test_unreadable_toml_raises_configuration_error(tmp_path: Path):
    (tmp_path / "bdd_reports.toml").write_text("[bdd_reports\n")
    with pytest.raises(ConfigurationError):
        Config(project_root=tmp_path)


def test_invalid_verbosity_rejected(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        Config(project_root=tmp_path, verbosity=7)


def test_dict_round_trip(tmp_path: Path):
    config = Config(project_root=tmp_path, export_json=True, force=True)
    restored = Config.from_dict(config.to_dict())
    assert restored.to_dict() == config.to_dict()


def test_find_repo_root_walks_up_to_marker(tmp_path: Path):
    (tmp_path / "pom.xml").write_text("<project/>")
    nested = tmp_path / "src" / "test"
    nested.mkdir(parents=True)
    assert find_repo_root(nested) == tmp_path.resolve()


def test_find_repo_root_env_override_must_exist(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("BDD_REPORTS_ROOT", str(tmp_path / "missing"))
    with pytest.raises(RepoRootNotFoundError):
        find_repo_root(tmp_path)


def test_out_of_range_verbosity_in_toml_is_a_configuration_error(tmp_path: Path):
    (tmp_path / "bdd_reports.toml").write_text("[bdd_reports]\nverbosity = 5\n")
    with pytest.raises(ConfigurationError):
        Config(project_root=tmp_path)
