from __future__ import annotations

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class ClientSettings:
    """Defaults applied when a client is constructed without overrides."""

    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-4.1-nano"
    timeout_ms: int = 30000
    temperature: float = 1.0
    api_key_env: str = "OPENAI_API_KEY"

    def to_dict(self):
        return asdict(self)
