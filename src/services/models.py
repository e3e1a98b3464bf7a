"""
Hand Cricket - Provider Models

Pydantic models for the Gemini ``generateContent`` response and the
display-only annotations the providers return.
"""

from pydantic import BaseModel, ConfigDict, Field


class VenueInfo(BaseModel):
    """A stadium shown on the scoreboard. Never affects scoring."""

    name: str = Field(min_length=1, max_length=120)
    link: str | None = None


class InlineData(BaseModel):
    """Binary payload returned by the speech model."""

    mime_type: str = Field(default="", alias="mimeType")
    data: str

    model_config = ConfigDict(populate_by_name=True)


class GeminiPart(BaseModel):
    text: str | None = None
    inline_data: InlineData | None = Field(default=None, alias="inlineData")

    model_config = ConfigDict(populate_by_name=True)


class GeminiContent(BaseModel):
    parts: list[GeminiPart] = Field(default_factory=list)


class GeminiCandidate(BaseModel):
    content: GeminiContent = Field(default_factory=GeminiContent)


class GeminiResponse(BaseModel):
    """Subset of the ``generateContent`` response body that is used."""

    candidates: list[GeminiCandidate] = Field(default_factory=list)

    def first_text(self) -> str | None:
        """Concatenated text of the first candidate, stripped, or None."""
        if not self.candidates:
            return None
        text = "".join(p.text or "" for p in self.candidates[0].content.parts).strip()
        return text or None

    def first_audio(self) -> InlineData | None:
        """First inline audio payload of the first candidate, or None."""
        if not self.candidates:
            return None
        for part in self.candidates[0].content.parts:
            if part.inline_data is not None:
                return part.inline_data
        return None
