"""Tests for ConfigService."""

from pathlib import Path

from checkboard.models import CheckboardConfig, DoneColumn, TagColumn, TodoColumn
from checkboard.services import ConfigService


def write_config(vault: Path, text: str) -> None:
    (vault / "checkboard.yml").write_text(text, encoding="utf-8")


class TestConfigLoading:
    """Tests for loading checkboard.yml."""

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        service = ConfigService(tmp_path)

        config = service.get_config()

        assert config == CheckboardConfig.default()
        assert not service.has_config_error

    def test_custom_config(self, tmp_path: Path):
        write_config(
            tmp_path,
            """
global_filter: "#todo"
todo_filter: all-undone
done_limit: 5
excluded_folders: [Archive/]
columns:
  - id: today
    label: Today
    type: todo
  - id: waiting
    label: Waiting
    type: tag
    tag: waiting
    color: "#8b5cf6"
  - id: done
    label: Done
    type: done
    limit: 3
""",
        )
        service = ConfigService(tmp_path)

        config = service.get_config()

        assert config.global_filter == "#todo"
        assert config.todo_filter == "all-undone"
        assert config.done_limit == 5
        assert config.excluded_folders == ["Archive"]
        assert [type(col) for col in config.columns] == [TodoColumn, TagColumn, DoneColumn]
        assert config.columns[1].tag == "#waiting"
        assert config.columns[2].limit == 3
        assert not service.has_config_error

    def test_empty_file(self, tmp_path: Path):
        write_config(tmp_path, "")
        service = ConfigService(tmp_path)

        assert service.get_config() == CheckboardConfig.default()
        assert service.has_config_error

    def test_invalid_yaml(self, tmp_path: Path):
        write_config(tmp_path, "columns: [unclosed")
        service = ConfigService(tmp_path)

        assert service.get_config() == CheckboardConfig.default()
        assert "Invalid YAML" in service.config_error

    def test_not_a_mapping(self, tmp_path: Path):
        write_config(tmp_path, "- just\n- a list\n")
        service = ConfigService(tmp_path)

        service.get_config()

        assert "mapping" in service.config_error

    def test_unknown_column_type(self, tmp_path: Path):
        write_config(tmp_path, "columns:\n  - {id: x, label: X, type: kanban}\n")
        service = ConfigService(tmp_path)

        assert service.get_config() == CheckboardConfig.default()
        assert service.has_config_error

    def test_config_is_cached_until_reload(self, tmp_path: Path):
        service = ConfigService(tmp_path)
        first = service.get_config()
        write_config(tmp_path, "done_limit: 2\n")

        assert service.get_config() is first

        service.reload()

        assert service.get_config().done_limit == 2

