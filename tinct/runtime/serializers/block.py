# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Palette block serializer.

Formats a sequence of colors as a text block (JSON, CSS custom
properties, or a Markdown table) that can be pasted into a stylesheet
or a document. Serialization never modifies the colors.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Sequence

from tinct.runtime.serializers.base import to_palette_dict
from tinct.space.base import ColorSpace

logger = logging.getLogger(__name__)


class BlockFormat(Enum):
    """Block format options."""

    JSON = "json"
    CSS = "css"
    MARKDOWN = "markdown"


def to_palette_block(
    colors: Sequence[ColorSpace],
    *,
    format: BlockFormat = BlockFormat.JSON,
    name: str = "palette",
) -> str:
    """Serialize a palette as a text block.

    Args:
        colors: Colors in any color space.
        format: Block format (JSON, CSS, or MARKDOWN).
        name: Wrapper key (JSON), custom property prefix (CSS) or
            heading (Markdown).

    Returns:
        Formatted block string.

    Example (CSS)::

        :root {
          --palette-0: #FF0000;
          --palette-1: #00FF00;
        }
    """
    data = to_palette_dict(colors)
    logger.debug("Serializing %d colors as %s", data["count"], format.value)
    if format == BlockFormat.JSON:
        return json.dumps({name: data}, indent=2)
    elif format == BlockFormat.CSS:
        return _to_css(data, name)
    else:
        return _to_markdown(data, name)


def _to_css(data: dict, name: str) -> str:
    lines = [":root {"]
    for i, entry in enumerate(data["colors"]):
        lines.append(f"  --{name}-{i}: {entry['hex']};")
    lines.append("}")
    return "\n".join(lines)


def _to_markdown(data: dict, name: str) -> str:
    lines = [
        f"### {name}",
        "",
        "| # | hex | space | value |",
        "|---|-----|-------|-------|",
    ]
    for i, entry in enumerate(data["colors"]):
        value = ", ".join(f"{k}={v:.3f}" for k, v in entry["value"].items())
        lines.append(f"| {i} | {entry['hex']} | {entry['space']} | {value} |")
    return "\n".join(lines)
