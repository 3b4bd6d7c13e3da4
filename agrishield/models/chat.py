from typing import Optional

from pydantic import BaseModel, Field


class Location(BaseModel):
    lat: Optional[float] = Field(
        default=None, ge=-90, le=90, allow_inf_nan=False, description="Latitude"
    )
    lon: Optional[float] = Field(
        default=None, ge=-180, le=180, allow_inf_nan=False, description="Longitude"
    )


class ChatRequest(BaseModel):
    message: str = Field(default="", description="Text typed by the farmer.")
    language: str = Field(
        default="English", description="Language the reply must be written in."
    )
    location: Optional[Location] = Field(default=None)
    date: Optional[str] = Field(
        default=None, description="ISO-8601 timestamp taken on the client."
    )


class ChatResponse(BaseModel):
    response: str


class ChatErrorResponse(BaseModel):
    error: str
    details: str


class CompletionParameters(BaseModel):
    model: str
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_output_tokens: int = Field(default=1000, ge=1)
