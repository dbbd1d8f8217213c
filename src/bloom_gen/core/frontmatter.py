"""YAML frontmatter extraction and metadata validation."""

import logging
import re
from typing import Any

import yaml

from bloom_gen.core.diagnostics import Diagnostics

log = logging.getLogger(__name__)

# A leading "---" line, the YAML block, then a closing "---" line
FRONTMATTER_PATTERN = re.compile(r"\A---\r?\n(.*?)\r?\n---(?:\r?\n|\Z)", re.DOTALL)

REQUIRED_FIELDS = ("allTitles", "languages", "l1")
MAPPING_FIELDS = ("allTitles", "languages")
LANGUAGE_FIELDS = ("l1", "l2")

BOOL_TAG = "tag:yaml.org,2002:bool"


class FrontmatterLoader(yaml.SafeLoader):
    """Safe loader that only reads true/false as booleans.

    Language codes such as ``no`` (Norwegian) stay strings, as in YAML 1.2.
    """


FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontmatterLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def split_frontmatter(content: str, diagnostics: Diagnostics) -> tuple[str, str]:
    """Separate the frontmatter block from the document body.

    Returns:
        ``(frontmatter, body)``. When the document does not start with a
        frontmatter block, the frontmatter is empty, the body is the whole
        input and an error is recorded.
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        diagnostics.add_error("No YAML frontmatter found")
        return "", content

    return match.group(1), content[match.end():]


def parse_metadata(frontmatter: str, diagnostics: Diagnostics) -> dict[str, Any]:
    """Parse frontmatter YAML and validate it.

    Returns:
        The parsed mapping, or an empty dict when the YAML could not be
        parsed into a mapping. An empty result is failed metadata, not
        valid-but-empty metadata. An empty block is validated like an
        empty mapping, so each missing field is reported.
    """
    try:
        raw = yaml.load(frontmatter, Loader=FrontmatterLoader)
    except yaml.YAMLError as e:
        diagnostics.add_error(f"Failed to parse YAML frontmatter: {e}")
        return {}

    if raw is None:
        raw = {}
    elif not isinstance(raw, dict):
        diagnostics.add_error(
            "Failed to parse YAML frontmatter: frontmatter is not a mapping"
        )
        return {}

    log.debug(f"Frontmatter fields: {', '.join(str(k) for k in raw) or 'none'}")
    validate_metadata(raw, diagnostics)
    return raw


def validate_metadata(metadata: dict[str, Any], diagnostics: Diagnostics) -> bool:
    """Check required fields and language cross-references.

    Every required field is checked, so a document missing all of them
    gets one error per field.

    Returns:
        True if no error has been recorded in ``diagnostics`` so far,
        including errors from earlier stages of the same parse.
    """
    for name in REQUIRED_FIELDS:
        if not metadata.get(name):
            diagnostics.add_error(f"Missing required field: {name}")

    for name in MAPPING_FIELDS:
        value = metadata.get(name)
        if value and not isinstance(value, dict):
            diagnostics.add_error(f"Field '{name}' must be a mapping")

    languages = metadata.get("languages")
    if not isinstance(languages, dict):
        languages = None

    for name in LANGUAGE_FIELDS:
        value = metadata.get(name)
        if value and not isinstance(value, str):
            diagnostics.add_error(f"Field '{name}' must be a language code")

    l1 = metadata.get("l1")
    if isinstance(l1, str) and l1 and languages and l1 not in languages:
        diagnostics.add_error(f"Primary language '{l1}' not found in languages")

    l2 = metadata.get("l2")
    if isinstance(l2, str) and l2 and languages and l2 not in languages:
        diagnostics.add_error(f"Secondary language '{l2}' not found in languages")

    return not diagnostics.has_errors
