import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from barguide.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_FILENAME = "barguide_rules.yaml"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(env: Mapping[str, str] | None = None) -> Path:
    """
    Pick the rules file: RULES_PATH if set, else the project root default.
    """
    environ = os.environ if env is None else env
    env_path = environ.get("RULES_PATH")
    if env_path:
        return Path(env_path)
    return _find_project_root() / DEFAULT_RULES_FILENAME


def _strip_yaml_fence(content: str) -> str:
    # Rules may be kept inside a markdown doc as a ```yaml block
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def parse_rules(content: str) -> Rules:
    """
    Parse and validate rules text.
    Raises ValueError if the YAML or the schema is invalid.
    """
    try:
        data = yaml.safe_load(_strip_yaml_fence(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    rules = parse_rules(content)
    logger.info("Loaded rules %s (version %s) from %s",
                rules.project.slug, rules.project.rules_version, path)
    return rules
