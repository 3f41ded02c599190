# config.py - runtime settings for the presentation evaluation service

import os
from dataclasses import dataclass, field
from typing import List, Literal, Optional

from dotenv import load_dotenv


LLMProvider = Literal["groq", "gemini"]

DEFAULT_MODELS = {
    "groq": "llama-3.3-70b-versatile",
    "gemini": "models/gemini-1.5-flash-latest",
}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    llm_provider: LLMProvider = "groq"
    llm_model: str = DEFAULT_MODELS["groq"]
    groq_api_key: Optional[str] = None
    google_api_key: Optional[str] = None
    log_level: str = "INFO"
    # Empty string disables the file sink.
    log_file: str = "logs/server.log"
    log_payloads: bool = True
    strict_schema: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment, loading `.env` first."""
        load_dotenv()

        provider = os.getenv("LLM_PROVIDER", "groq").strip().lower()
        if provider not in DEFAULT_MODELS:
            raise ValueError(f"Unsupported LLM_PROVIDER: {provider!r}")

        origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")

        return cls(
            llm_provider=provider,  # type: ignore[arg-type]
            llm_model=os.getenv("LLM_MODEL") or DEFAULT_MODELS[provider],
            groq_api_key=os.getenv("GROQ_API_KEY"),
            google_api_key=os.getenv("GOOGLE_API_KEY"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE", "logs/server.log"),
            log_payloads=_env_bool("LOG_PAYLOADS", True),
            strict_schema=_env_bool("EVALUATION_STRICT_SCHEMA", False),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
        )
