"""Stylesheet placement for generated pages.

The generator never builds CSS. A prebuilt Tailwind stylesheet is expected at
``style/tailwind.css`` under the output root; it can be copied there from a
user supplied path.
"""

from __future__ import annotations

import logging
import posixpath
import shutil
from pathlib import Path, PurePosixPath

from ..config import STYLESHEET_RELPATH

logger = logging.getLogger(__name__)


def stylesheet_target(out_dir: Path) -> Path:
    return out_dir / STYLESHEET_RELPATH


def stylesheet_href(page: PurePosixPath | Path) -> str:
    """Relative href from a page (relative to the output root) to the stylesheet."""
    parent = PurePosixPath(Path(page).as_posix()).parent
    return posixpath.relpath(STYLESHEET_RELPATH, start=str(parent))


def install_stylesheet(out_dir: Path, source: Path | None) -> tuple[Path | None, str | None]:
    """Copy the stylesheet into the output tree when a source is given.

    Returns:
        (stylesheet path or None, warning or None)
    """
    target = stylesheet_target(out_dir)

    if source is not None:
        source = source.resolve()
        if not source.is_file():
            raise FileNotFoundError(f"Stylesheet not found: {source}")
        if source != target.resolve():
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
            logger.info("Copied stylesheet %s -> %s", source, target)
        return target, None

    if target.exists():
        return target, None

    warning = f"No stylesheet at {target}; pages expect a prebuilt {STYLESHEET_RELPATH}"
    logger.warning(warning)
    return None, warning
