"""
Backend tool descriptors.

Capability names used in ModelConfig.tools are translated here into
google-genai Tool objects.
"""

from study_assistant.tools.google_search_tool import WEB_SEARCH, build_tools

__all__ = ["WEB_SEARCH", "build_tools"]
