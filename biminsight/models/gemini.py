"""Request and response bodies for the Gemini ``generateContent`` call."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from biminsight.config import NO_INSIGHT_MESSAGE


class Part(BaseModel):
    text: str | None = None


class Content(BaseModel):
    parts: list[Part] = Field(default_factory=list)
    role: str | None = None


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Content = Field(default_factory=Content)
    finish_reason: str | None = Field(default=None, alias="finishReason")


class GenerateContentRequest(BaseModel):
    """``{contents:[{parts:[{text}]}], systemInstruction:{parts:[{text}]}}``."""

    model_config = ConfigDict(populate_by_name=True)

    contents: list[Content]
    system_instruction: Content | None = Field(default=None, alias="systemInstruction")

    @classmethod
    def from_prompt(cls, prompt: str, system_instruction: str | None = None) -> GenerateContentRequest:
        system = None
        if system_instruction:
            system = Content(parts=[Part(text=system_instruction)])
        return cls(contents=[Content(parts=[Part(text=prompt)])], system_instruction=system)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready body using the wire (camelCase) names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class GenerateContentResponse(BaseModel):
    """Parsed response; only ``candidates[0].content.parts[0].text`` is used."""

    model_config = ConfigDict(extra="ignore")

    candidates: list[Candidate] = Field(default_factory=list)

    def first_text(self) -> str:
        """Return the first candidate's first text part.

        Raises
        ------
        LookupError
            If the response carries no candidate or no part.
        """
        if not self.candidates:
            raise LookupError("response contains no candidates")
        parts = self.candidates[0].content.parts
        if not parts:
            raise LookupError("first candidate contains no parts")
        text = parts[0].text
        return text or NO_INSIGHT_MESSAGE
