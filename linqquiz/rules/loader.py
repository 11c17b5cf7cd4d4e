from pathlib import Path

import yaml
from pydantic import ValidationError

from linqquiz.rules.models import SUPPORTED_SCHEMA_VERSION, QuizRules


def default_rules() -> QuizRules:
    """Built-in rules, used when no rules file is given."""
    return QuizRules()


def _strip_yaml_fence(content: str) -> str:
    # Accept rules wrapped in a ```yaml markdown block
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


def load_rules(path: Path) -> QuizRules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_yaml_fence(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        data = {}

    try:
        rules = QuizRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    if rules.schema_version != SUPPORTED_SCHEMA_VERSION:
        raise ValueError(
            f"Invalid schema_version: expected {SUPPORTED_SCHEMA_VERSION}, "
            f"got {rules.schema_version}"
        )

    return rules
