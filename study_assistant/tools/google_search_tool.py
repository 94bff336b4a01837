"""
Google Search grounding tool.

Chat sessions with search enabled attach the native Google Search tool so
the model can ground its answer in live web results. The citations come
back in the candidate's grounding metadata.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from google.genai import types


WEB_SEARCH = "web-search"

_logger = logging.getLogger(__name__)


def _google_search_tool() -> types.Tool:
    return types.Tool(google_search=types.GoogleSearch())


_TOOL_BUILDERS = {
    WEB_SEARCH: _google_search_tool,
}


def build_tools(descriptors: Iterable[str]) -> list[types.Tool]:
    """
    Translate capability descriptors into SDK tools.

    Args:
        descriptors: Capability names, e.g. ``"web-search"``

    Returns:
        Tools in descriptor order. Unknown descriptors are skipped with a warning.
    """
    tools: list[types.Tool] = []
    for descriptor in descriptors:
        builder = _TOOL_BUILDERS.get(descriptor)
        if builder is None:
            _logger.warning("Ignoring unknown tool descriptor: %s", descriptor)
            continue
        tools.append(builder())
    return tools
