"""
Response normalization.

Turns a raw generate-content response into exactly one NormalizedResult for
the calling mode. Parts are walked in response order:

- chat / homework: the text parts are the payload; chat also collects the
  grounding citations when the backend attached any.
- creative / editor: the first part with inline image bytes wins and any
  later image parts are dropped. With no image part, the first text part is
  returned as a refusal.

Nothing usable raises NoUsablePayloadError.
"""

from __future__ import annotations

import base64

from google.genai import types

from study_assistant.entities.interaction import InteractionMode
from study_assistant.entities.media import PNG_MIME_TYPE, MediaPayload
from study_assistant.entities.results import (
    GroundingCitation,
    ImageResult,
    NormalizedResult,
    RefusalResult,
    TextResult,
)
from study_assistant.errors import NoUsablePayloadError


TEXT_MODES = frozenset({InteractionMode.CHAT, InteractionMode.HOMEWORK_ANALYSIS})


def _first_candidate(response: types.GenerateContentResponse) -> types.Candidate | None:
    if not response.candidates:
        return None
    return response.candidates[0]


def _response_parts(response: types.GenerateContentResponse) -> list[types.Part]:
    candidate = _first_candidate(response)
    if candidate is None or candidate.content is None:
        return []
    return list(candidate.content.parts or [])


def _text_parts(parts: list[types.Part]) -> list[str]:
    # Thought summaries are not part of the answer
    return [part.text for part in parts if part.text and not part.thought]


def _first_image_part(parts: list[types.Part]) -> types.Part | None:
    for part in parts:
        if part.inline_data is not None and part.inline_data.data:
            return part
    return None


def extract_citations(
    response: types.GenerateContentResponse,
) -> tuple[GroundingCitation, ...]:
    """Return web grounding citations in response order; empty when absent."""
    candidate = _first_candidate(response)
    if candidate is None or candidate.grounding_metadata is None:
        return ()

    citations: list[GroundingCitation] = []
    for chunk in candidate.grounding_metadata.grounding_chunks or []:
        if chunk.web is None or not chunk.web.uri:
            continue
        citations.append(
            GroundingCitation(uri=chunk.web.uri, title=chunk.web.title or None)
        )
    return tuple(citations)


def _normalize_text(
    mode: InteractionMode, response: types.GenerateContentResponse
) -> TextResult:
    text = "".join(_text_parts(_response_parts(response)))
    if not text.strip():
        raise NoUsablePayloadError(f"No text in {mode} response")

    if mode is InteractionMode.CHAT:
        return TextResult(text=text, citations=extract_citations(response))
    return TextResult(text=text)


def _normalize_image(
    mode: InteractionMode, response: types.GenerateContentResponse
) -> ImageResult | RefusalResult:
    parts = _response_parts(response)

    image_part = _first_image_part(parts)
    if image_part is not None and image_part.inline_data is not None:
        data = base64.b64encode(image_part.inline_data.data or b"").decode("ascii")
        return ImageResult(media=MediaPayload(data=data, mime_type=PNG_MIME_TYPE))

    texts = _text_parts(parts)
    if texts:
        return RefusalResult(text=texts[0])

    raise NoUsablePayloadError(f"No image or text in {mode} response")


def normalize(
    mode: InteractionMode, response: types.GenerateContentResponse
) -> NormalizedResult:
    """
    Normalize a backend response for ``mode``.

    Raises:
        NoUsablePayloadError: If the response holds nothing usable for the mode.
    """
    if mode in TEXT_MODES:
        return _normalize_text(mode, response)
    return _normalize_image(mode, response)
