import time
from typing import Any, Optional

import httpx
from openai import APIStatusError, AsyncOpenAI

from .config import Settings
from .exceptions import ConfigurationError, InputValidationError, UpstreamError
from .logging import hash_preview, jlog
from .prompt import build_messages
from .providers import ResolvedProvider, select_provider
from .schemas import TransformRequest, TransformResponse

MAX_INPUT_CHARS = 5000
MAX_TOKENS = 1024
TEMPERATURE = 0.7

def validate_input(body: Any) -> TransformRequest:
    text = body.get("text") if isinstance(body, dict) else None
    if not isinstance(text, str) or not text.strip():
        raise InputValidationError("Input text is required.")
    if len(text) > MAX_INPUT_CHARS:
        raise InputValidationError(f"Input text cannot exceed {MAX_INPUT_CHARS} characters.")
    return TransformRequest(text=text)

def _make_client(provider: ResolvedProvider, http_client: Optional[httpx.AsyncClient]) -> AsyncOpenAI:
    if not provider.api_key:
        raise ConfigurationError("Server configuration error: No API key provided.")
    # One attempt only; the SDK retries 429/5xx by default.
    return AsyncOpenAI(
        api_key=provider.api_key,
        base_url=provider.base_url,
        max_retries=0,
        http_client=http_client,
    )

def _first_content(data: Any) -> str:
    if not isinstance(data, dict) or not isinstance(data.get("choices"), list):
        raise ValueError("Malformed response from the AI service.")
    choices = data["choices"]
    first = choices[0] if choices else None
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content.strip() if isinstance(content, str) else ""

async def linkedinify(
    body: Any,
    started_at: float,
    settings: Settings,
    http_client: Optional[httpx.AsyncClient] = None,
) -> TransformResponse:
    req = validate_input(body)
    messages = build_messages(req.text)

    provider = select_provider(settings)
    jlog(event="provider_selected", provider=provider.name, model_name=provider.model, base_url=provider.base_url)

    try:
        client = _make_client(provider, http_client)
    except ConfigurationError:
        jlog(event="provider_missing_key", severity="ERROR", provider=provider.name)
        raise

    try:
        raw = await client.chat.completions.with_raw_response.create(
            model=provider.model,
            messages=[m.model_dump() for m in messages],  # type: ignore
            max_tokens=MAX_TOKENS,
            temperature=TEMPERATURE,
            stream=False,
        )
    except APIStatusError as e:
        jlog(
            event="provider_error",
            severity="ERROR",
            provider=provider.name,
            status=e.status_code,
            body=e.response.text,
        )
        raise UpstreamError(e.status_code) from e

    # Raises on a 2xx body that is not JSON (e.g. an HTML proxy page)
    data = raw.http_response.json()
    result = _first_content(data)
    timing_ms = max(0, int((time.time() - started_at) * 1000))

    usage = data.get("usage") if isinstance(data.get("usage"), dict) else {}
    jlog(
        event="linkedinify_ok",
        provider=provider.name,
        model_name=provider.model,
        latency_ms=timing_ms,
        text_hash=hash_preview(req.text),
        prompt_tokens=usage.get("prompt_tokens"),
        completion_tokens=usage.get("completion_tokens"),
        total_tokens=usage.get("total_tokens"),
    )
    return TransformResponse(result=result, timing_ms=timing_ms)
