"""Output locations — allow-listed clearing and JSON dumps of built trees."""

from __future__ import annotations

import enum
import json
import logging
import os
import shutil
from collections.abc import Iterable, Mapping
from pathlib import Path

from icontree.engine.reporter import LoggingReporter, Reporter
from icontree.engine.results import ThemePassResult

logger = logging.getLogger(__name__)


class PathRole(str, enum.Enum):
    SVG_DIR = "svg_dir"
    ICON_OUTPUT_DIR = "icon_output_dir"
    MANIFEST_OUTPUT = "manifest_output"


# The only roles clear_outputs may delete. New roles are kept unless added here.
CLEARABLE_ROLES: frozenset[PathRole] = frozenset({PathRole.ICON_OUTPUT_DIR, PathRole.MANIFEST_OUTPUT})


def clear_outputs(
    paths: Mapping[PathRole, str | os.PathLike[str]],
    roles: Iterable[PathRole | str] | None = None,
    reporter: Reporter | None = None,
) -> list[Path]:
    """Delete the output locations in ``paths``; returns what was removed.

    With ``roles`` omitted every clearable role present in ``paths`` is
    cleared. Asking for a role outside CLEARABLE_ROLES raises ValueError
    before anything is touched.
    """
    reporter = reporter or LoggingReporter()
    if roles is None:
        selected = [role for role in paths if role in CLEARABLE_ROLES]
    else:
        selected = [PathRole(role) for role in roles]
        refused = [role.value for role in selected if role not in CLEARABLE_ROLES]
        if refused:
            raise ValueError(f"Refusing to clear non-output roles: {', '.join(refused)}")

    reporter.notice("Clear folders.")
    removed: list[Path] = []
    for role in selected:
        if role not in paths:
            continue
        target = Path(paths[role])
        if not target.exists():
            continue
        reporter.notice(f"Delete {target}.")
        if target.is_dir():
            shutil.rmtree(target)
        else:
            target.unlink()
        removed.append(target)
    return removed


def write_theme_pass(result: ThemePassResult, output_dir: str | os.PathLike[str]) -> list[Path]:
    """Write ``<output_dir>/<theme>/<Identifier>.json`` per icon plus ``bindings.json``."""
    theme_dir = Path(output_dir) / result.theme.value
    theme_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for icon in result.icons:
        path = theme_dir / f"{icon.binding.identifier}.json"
        path.write_text(icon.tree.model_dump_json(indent=2), encoding="utf-8")
        written.append(path)

    bindings_path = theme_dir / "bindings.json"
    bindings_path.write_text(json.dumps(result.bindings, indent=2, sort_keys=True), encoding="utf-8")
    written.append(bindings_path)
    logger.debug("Wrote %d files to %s", len(written), theme_dir)
    return written


def write_manifest(manifest: Mapping[str, list[str]], path: str | os.PathLike[str]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(dict(manifest), indent=2), encoding="utf-8")
    return path
