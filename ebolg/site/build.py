"""Static page generator for Markdown posts."""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Mapping
from pathlib import Path, PurePosixPath

from ..config import (
    DEFAULT_STYLESHEET,
    ENCODING,
    INDEX_NAME,
    MARKDOWN_SUFFIX,
    SITE_TITLE,
)
from ..models import BuildReport, Post
from ..parse.frontmatter import FrontMatterError, read_post
from ..parse.md_render import render_html
from .styles import install_stylesheet, stylesheet_href
from .templates import IndexEntry, NavLink, html_doc, index_page

logger = logging.getLogger(__name__)


def build_site(
    source: Path,
    out_dir: Path,
    *,
    stylesheet: Path | None = None,
    with_index: bool = False,
    classes: Mapping[str, str] | None = None,
) -> BuildReport:
    """Convert a Markdown file or a directory of posts into HTML pages.

    Args:
        source: A Markdown file or a directory searched recursively
        out_dir: Output root; the source tree is mirrored below it
        stylesheet: Prebuilt stylesheet copied to ``style/tailwind.css``
        with_index: Also write an ``index.html`` listing all posts
        classes: Optional tag -> utility class map for rendered Markdown

    Returns:
        BuildReport describing written and skipped files

    Raises:
        FileNotFoundError: If the source or stylesheet does not exist.
        ValueError: If the source is neither a file nor a directory.
        FrontMatterError: If a single source file has invalid front matter.
    """
    source = source.resolve()
    out_dir = out_dir.resolve()

    if not source.exists():
        raise FileNotFoundError(f"Source path does not exist or is not accessible: {source}")

    report = BuildReport(out_dir=out_dir)

    if source.is_dir():
        posts = _collect_posts(source, report)
    elif source.is_file():
        posts = [read_post(source)]
    else:
        raise ValueError(f"Source path is neither a file nor a directory: {source}")

    out_dir.mkdir(parents=True, exist_ok=True)
    installed, warning = install_stylesheet(out_dir, stylesheet or DEFAULT_STYLESHEET)
    report.stylesheet = installed
    if warning:
        report.warnings.append(warning)

    posts.sort(key=lambda p: p.sort_key)
    for i, post in enumerate(posts):
        prev_post = posts[i - 1] if i > 0 else None
        next_post = posts[i + 1] if i + 1 < len(posts) else None
        report.written.append(_write_post(post, out_dir, prev_post, next_post, classes))

    if with_index:
        _write_index(posts, source, out_dir, report)

    logger.info("Wrote %d page(s) to %s", len(report.written), out_dir)
    return report


def _collect_posts(root: Path, report: BuildReport) -> list[Post]:
    posts: list[Post] = []
    for path in sorted(root.rglob(f"*{MARKDOWN_SUFFIX}")):
        rel = path.relative_to(root)
        if any(part.startswith(".") for part in rel.parts) or not path.is_file():
            continue
        try:
            posts.append(read_post(path, root))
        except FrontMatterError as e:
            # Posts without valid metadata are skipped, not fatal.
            logger.warning("Skipping %s", e)
            report.skipped.append(str(e))
        except (UnicodeDecodeError, OSError) as e:
            reason = f"{path}: unreadable ({e})"
            logger.warning("Skipping %s", reason)
            report.skipped.append(reason)
    return posts


def _write_post(
    post: Post,
    out_dir: Path,
    prev_post: Post | None,
    next_post: Post | None,
    classes: Mapping[str, str] | None,
) -> Path:
    page = _page_path(post)
    html = html_doc(
        title=post.metadata.title,
        body=render_html(post.body, classes),
        stylesheet_href=stylesheet_href(page),
        prev_link=_nav_link(page, prev_post),
        next_link=_nav_link(page, next_post),
    )
    target = out_dir / post.output_name
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(html, encoding=ENCODING)
    logger.info("Wrote %s", target)
    return target


def _write_index(posts: list[Post], source: Path, out_dir: Path, report: BuildReport) -> None:
    if not source.is_dir():
        report.warnings.append("Index page is only generated for directory sources")
        return
    if any(_page_path(p) == PurePosixPath(INDEX_NAME) for p in posts):
        warning = f"A post already renders to {INDEX_NAME}; index page not written"
        logger.warning(warning)
        report.warnings.append(warning)
        return

    index = PurePosixPath(INDEX_NAME)
    entries = [
        IndexEntry(
            title=p.metadata.title,
            date=p.metadata.date.isoformat(),
            href=_relative_href(index, _page_path(p)),
            summary=p.metadata.summary,
        )
        for p in sorted(posts, key=lambda p: p.sort_key, reverse=True)
    ]
    target = out_dir / INDEX_NAME
    target.write_text(
        index_page(SITE_TITLE, entries, stylesheet_href(index)), encoding=ENCODING
    )
    report.index = target


def _page_path(post: Post) -> PurePosixPath:
    return PurePosixPath(post.output_name.as_posix())


def _nav_link(page: PurePosixPath, other: Post | None) -> NavLink | None:
    if other is None:
        return None
    return NavLink(href=_relative_href(page, _page_path(other)), title=other.metadata.title)


def _relative_href(from_page: PurePosixPath, to_page: PurePosixPath) -> str:
    return posixpath.relpath(str(to_page), start=str(from_page.parent))
