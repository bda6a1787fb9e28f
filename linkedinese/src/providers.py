from dataclasses import dataclass
from typing import Optional, Tuple

from .config import Settings

@dataclass(frozen=True)
class ProviderSpec:
    name: str
    model: str
    default_base_url: str
    api_key_field: str
    base_url_field: Optional[str] = None

@dataclass(frozen=True)
class ResolvedProvider:
    name: str
    model: str
    base_url: str
    api_key: Optional[str]

# Evaluated in order; the last entry is the unconditional fallback.
PROVIDERS: Tuple[ProviderSpec, ...] = (
    ProviderSpec(
        name="groq",
        model="llama3-8b-8192",
        default_base_url="https://api.groq.com/openai/v1",
        api_key_field="groq_api_key",
    ),
    ProviderSpec(
        name="openai",
        model="gpt-4o",
        default_base_url="https://api.openai.com/v1",
        api_key_field="openai_api_key",
    ),
    ProviderSpec(
        name="deepseek",
        model="deepseek-chat",
        default_base_url="https://api.deepseek.com/v1",
        api_key_field="deepseek_api_key",
        base_url_field="deepseek_api_base_url",
    ),
)

def _resolve(spec: ProviderSpec, settings: Settings) -> ResolvedProvider:
    base_url = getattr(settings, spec.base_url_field) if spec.base_url_field else None
    return ResolvedProvider(
        name=spec.name,
        model=spec.model,
        base_url=(base_url or spec.default_base_url).rstrip("/"),
        api_key=getattr(settings, spec.api_key_field) or None,
    )

def select_provider(settings: Settings) -> ResolvedProvider:
    """
    First provider with a credential wins. If none has one, the last provider
    is returned as-is, possibly without a key; callers must check `api_key`.
    """
    for spec in PROVIDERS[:-1]:
        if getattr(settings, spec.api_key_field):
            return _resolve(spec, settings)
    return _resolve(PROVIDERS[-1], settings)
