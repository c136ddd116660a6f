from __future__ import annotations
import logging
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PANTRY_CHEF_",
        extra="ignore",
        populate_by_name=True,
    )

    anthropic_api_key: str = Field("", validation_alias="ANTHROPIC_API_KEY")
    anthropic_model: str = "claude-sonnet-4-5"
    temperature: float = 0.7
    max_tokens: int = 4096
    request_timeout: float = 60.0
    data_dir: Path = Path.home() / ".pantry_chef"
    log_level: str = "WARNING"
    shopping_categories: list[str] = [
        "Proteins",
        "Produce",
        "Dairy",
        "Pantry",
        "Frozen",
        "Bakery",
        "Other",
    ]
    system_prompt: str = (
        "You are a professional chef assistant that writes recipes for home cooks. "
        "You always answer with a single JSON object and nothing else: "
        "no prose before or after it, no markdown code fences, no comments. "
        "Every key listed in the requested format must be present."
    )


def init_logging(config: Config, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    for noisy in ("httpx", "httpcore", "anthropic"):
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))
