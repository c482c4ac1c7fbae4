"""Tags declared in a document's YAML front matter."""

import logging

import frontmatter
import yaml

logger = logging.getLogger(__name__)


def _as_tag(value: object) -> str:
    text = str(value).strip()
    return text if text.startswith("#") else f"#{text}"


def parse_page_tags(content: str) -> list[str]:
    """
    Read the `tags` front matter field as a list of '#tag' strings.

    Accepts a single string or a list. Documents without front matter,
    or with front matter that fails to parse, have no page tags.
    """
    try:
        post = frontmatter.loads(content)
    except (yaml.YAMLError, ValueError) as e:
        logger.debug("Unparsable front matter: %s", e)
        return []

    tags = post.metadata.get("tags")
    if isinstance(tags, str):
        return [_as_tag(tags)] if tags.strip() else []
    if isinstance(tags, list):
        return [_as_tag(tag) for tag in tags if tag is not None and str(tag).strip()]
    return []
