"""Generate command for creating default config."""

import logging
from pathlib import Path

import yaml

from ..models.checkboard_config import CheckboardConfig
from ..services.config_service import ConfigService
from .output import error, info, success

logger = logging.getLogger(__name__)

CONFIG_HEADER = """\
# checkboard Board Configuration
#
# global_filter: Only checklist lines containing this tag become tasks
# todo_filter:   due-today (overdue + due today only) or all-undone
# done_limit:    Maximum number of tasks shown in the done column
# excluded_folders: Folder prefixes skipped when scanning for tasks
#
# Column types:
#   - backlog: open tasks without a due date
#   - todo:    open dated tasks
#   - tag:     open tasks carrying the column's tag (requires `tag`)
#   - done:    done and cancelled tasks (optional `limit`)
#
# Example tag column:
#   - id: waiting
#     label: "Waiting"
#     type: tag
#     tag: "#waiting"
#     color: "#8b5cf6"

"""


def generate_config_yaml() -> str:
    """Generate YAML config from the default CheckboardConfig model.

    Uses CheckboardConfig.default() as the single source of truth,
    ensuring generated config always matches internal defaults.
    """
    config = CheckboardConfig.default()
    config_dict = config.model_dump(mode="json", exclude_none=True)
    yaml_content = yaml.safe_dump(
        config_dict, default_flow_style=False, sort_keys=False, allow_unicode=True
    )
    return CONFIG_HEADER + yaml_content


def run_generate(vault_root: Path) -> int:
    """
    Generate default configuration.

    Args:
        vault_root: Directory where checkboard.yml will be created

    Returns:
        Exit code (0 = success, 1 = nothing to do or failure)
    """
    config_path = vault_root / ConfigService.CONFIG_FILE

    if config_path.exists():
        info(f"Config exists: {config_path}")
        print("Nothing to generate.")
        return 1

    try:
        vault_root.mkdir(parents=True, exist_ok=True)
        config_path.write_text(generate_config_yaml(), encoding="utf-8")
    except OSError as e:
        logger.warning("Failed to write %s: %s", config_path, e)
        error(f"Cannot write config: {e}")
        return 1

    success(f"Generated config: {config_path}")
    return 0
