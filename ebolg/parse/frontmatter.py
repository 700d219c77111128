"""YAML front matter parsing for posts."""

from __future__ import annotations

import logging
from pathlib import Path

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import ValidationError

from ..config import ENCODING
from ..models import Post, PostMetadata

logger = logging.getLogger(__name__)

_YAML_HANDLER = YAMLHandler()


class FrontMatterError(ValueError):
    """Raised when a post has missing or invalid front matter."""


def split_front_matter(text: str) -> tuple[str, str]:
    """Split a document into its YAML block and Markdown body.

    The document must open with a ``---`` line (only a byte order mark may
    precede it) and close the block with another ``---`` line. Both parts are
    returned stripped.

    Raises:
        FrontMatterError: If the delimiters are missing.
    """
    text = text.lstrip("\ufeff")
    if not _YAML_HANDLER.detect(text):
        raise FrontMatterError("document must open with a '---' front matter line")
    try:
        yaml_text, body = _YAML_HANDLER.split(text)
    except ValueError as e:
        raise FrontMatterError("missing closing '---' front matter line") from e
    return yaml_text.strip(), body.strip()


def parse_post_text(text: str) -> tuple[PostMetadata, str]:
    """Parse front matter into PostMetadata and return it with the body."""
    text = text.lstrip("\ufeff")
    split_front_matter(text)

    try:
        parsed = frontmatter.loads(text)
    except (yaml.YAMLError, ValueError) as e:
        raise FrontMatterError(f"invalid YAML: {e}") from e

    # Non-mapping YAML documents come back as empty metadata.
    if not parsed.metadata:
        raise FrontMatterError("front matter must be a non-empty mapping")

    try:
        metadata = PostMetadata.model_validate(dict(parsed.metadata))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'front matter'}: {err['msg']}"
            for err in e.errors()
        )
        raise FrontMatterError(problems) from e

    return metadata, parsed.content.strip()


def read_post(path: Path, root: Path | None = None) -> Post:
    """Read a Markdown file and build a Post.

    Args:
        path: Markdown file
        root: Source root the output tree mirrors (defaults to the file's directory)

    Raises:
        FrontMatterError: If the front matter is missing or invalid.
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not UTF-8.
    """
    path = path.resolve()
    root = (root or path.parent).resolve()
    text = path.read_text(encoding=ENCODING)
    try:
        metadata, body = parse_post_text(text)
    except FrontMatterError as e:
        raise FrontMatterError(f"{path}: {e}") from e

    logger.debug("Parsed %s (%s, %s)", path, metadata.title, metadata.date)
    return Post(source=path, relative=path.relative_to(root), metadata=metadata, body=body)
