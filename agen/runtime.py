"""Shared runtime helpers for agen CLI and gateway."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from agen.actions import DetectionError, PathArg, detect_actions
from agen.config import Settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def inspect_repo(root: PathArg, strict: bool = False) -> Dict[str, Any]:
    try:
        resolved = str(Path(root).resolve())
    except (OSError, ValueError):
        resolved = os.path.abspath(root)
    try:
        actions = detect_actions(root, strict=strict)
    except DetectionError as exc:
        return {"success": False, "root": resolved, "actions": [], "error": str(exc)}
    return {"success": True, "root": resolved, "actions": [a.to_dict() for a in actions]}


def format_actions(actions: List[Dict[str, str]]) -> str:
    if not actions:
        return "No actions detected."

    lines = ["Detected actions:"]
    for idx, action in enumerate(actions, 1):
        lines.append(f"{idx}. [{action.get('id')}] {action.get('label', '')}: {action.get('cmd', '')}")
    return "\n".join(lines)
