"""
Pytest configuration and fixtures for the test suite.

This file is automatically loaded by pytest before running tests.
It disables Langfuse tracing to prevent sending traces during test runs.
"""

import os
import logging
from collections.abc import Callable

import pytest
from google.genai import types

# Disable Langfuse tracing before any test modules import Langfuse
os.environ["LANGFUSE_TRACING_ENABLED"] = "false"
os.environ["TESTING"] = "true"

_langfuse_logger = logging.getLogger("langfuse")
_langfuse_logger.setLevel(logging.CRITICAL)
_langfuse_logger.propagate = False


def _build_response(
    parts: list[types.Part] | None = None,
    citations: list[tuple[str, str | None]] | None = None,
) -> types.GenerateContentResponse:
    grounding = None
    if citations is not None:
        grounding = types.GroundingMetadata(
            grounding_chunks=[
                types.GroundingChunk(web=types.GroundingChunkWeb(uri=uri, title=title))
                for uri, title in citations
            ]
        )
    candidate = types.Candidate(
        content=types.Content(role="model", parts=parts or []),
        grounding_metadata=grounding,
    )
    return types.GenerateContentResponse(candidates=[candidate])


@pytest.fixture
def make_response() -> Callable[..., types.GenerateContentResponse]:
    """Build a GenerateContentResponse from parts and optional web citations."""
    return _build_response


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("StudyAssistantTest")
