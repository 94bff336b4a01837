"""
Normalized results returned by the interaction layer.

Callers must handle every member of NormalizedResult: a refusal is a
successful call whose payload explains why the artifact was not produced.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from study_assistant.entities.media import MediaPayload


class GroundingCitation(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str
    title: str | None = None


class TextResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str
    citations: tuple[GroundingCitation, ...] = ()


class ImageResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    media: MediaPayload


class RefusalResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["refusal"] = "refusal"
    text: str


NormalizedResult = TextResult | ImageResult | RefusalResult
