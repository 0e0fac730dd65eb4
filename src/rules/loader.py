import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import ChartRules

logger = logging.getLogger(__name__)


def load_rules(path: Path) -> ChartRules:
    """
    Load and validate the chart rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    # Accept a ```yaml fenced block (rules kept inside a markdown doc)
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
            in_block = False
            break

        if in_block:
            yaml_lines.append(line)

    clean_content = "\n".join(yaml_lines) if found_block else content

    try:
        data = yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = ChartRules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info("Loaded chart rules from %s", path)
    return rules
