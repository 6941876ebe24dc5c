"""Marker-file detection of build/test actions for a project root."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Tuple, Union

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class Action:
    id: str
    label: str
    cmd: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# (marker, id, label, cmd), checked in this order; results keep it.
MARKERS: Tuple[Tuple[str, str, str, str], ...] = (
    ("go.mod", "go", "go test", "go test ./..."),
    ("package.json", "npm", "npm ci && npm test", "npm ci && npm test"),
)

_NOT_FOUND = (FileNotFoundError, NotADirectoryError)


class DetectionError(Exception):
    """A marker probe failed for a reason other than the file being absent."""

    def __init__(self, marker: str, path: Path, reason: str) -> None:
        super().__init__(f"cannot probe {path}: {reason}")
        self.marker = marker
        self.path = path


def _probe(root: Path, marker: str, strict: bool) -> bool:
    path = root / marker
    try:
        os.stat(path)
    except _NOT_FOUND:
        return False
    except (OSError, ValueError) as exc:
        if strict:
            raise DetectionError(marker, path, str(exc)) from exc
        logger.debug("skipping %s, probe inconclusive: %s", path, exc)
        return False
    return True


def detect_actions(root: PathArg, strict: bool = False) -> List[Action]:
    """Return the actions whose marker file exists under ``root``.

    The root is not validated: a missing root or one that is a regular file
    simply matches nothing. Probes that fail for other reasons (permission
    denied, name too long) are treated as absent unless ``strict`` is set,
    in which case they raise ``DetectionError``.
    """
    base = Path(root)
    actions: List[Action] = []
    for marker, action_id, label, cmd in MARKERS:
        if _probe(base, marker, strict):
            logger.debug("found %s in %s", marker, base)
            actions.append(Action(id=action_id, label=label, cmd=cmd))
    return actions
