"""
Workflow template overrides.

Loads .chkd/workflows.yaml so a repository can replace or extend the
built-in workflow templates used when new items are added:

    workflows:
      default:
        - task: "Explore: read the code"
          children:
            - "Research: find related modules"
      spike:
        - task: "Prototype: throwaway build"
          children: ["Build: hack it together", "Share: demo to the team"]

Each key is a task type; "default" replaces the full cycle. A missing or
malformed file means no overrides.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from chkd.lib.validate import PayloadError, validate
from chkd.spec.models import WorkflowStep

logger = logging.getLogger(__name__)


def parse_workflows(data) -> dict[str, list[WorkflowStep]]:
    """Turn the loaded YAML document into {task_type: [WorkflowStep]}.

    Raises:
        PayloadError: if the document does not match workflows.schema.json
    """
    if not data:
        return {}
    validate(data, "workflows")
    return {
        name: [WorkflowStep(task=step["task"], children=list(step.get("children", []))) for step in steps]
        for name, steps in data.get("workflows", {}).items()
    }


def load_workflows_config(config_path: Optional[Path]) -> dict[str, list[WorkflowStep]]:
    """Load the override catalogue, or {} when there is none."""
    if config_path is None:
        return {}

    config_path = Path(config_path)
    if not config_path.exists():
        return {}

    try:
        catalog = parse_workflows(yaml.safe_load(config_path.read_text()))
        logger.debug(f"Loaded {len(catalog)} workflow override(s) from {config_path}")
        return catalog
    except (yaml.YAMLError, PayloadError) as e:
        logger.warning(f"Failed to parse {config_path}: {e}")
        return {}
