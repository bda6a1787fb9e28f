from typing import Literal
from pydantic import BaseModel, Field

class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str

class TransformRequest(BaseModel):
    text: str = Field(..., description="Casual or raw text to rewrite, at most 5000 characters")

class TransformResponse(BaseModel):
    result: str = Field(..., description="LinkedIn-style rewrite of the input")
    timing_ms: int = Field(..., ge=0, description="Wall-clock time spent handling the request")

class ErrorResponse(BaseModel):
    error: str
