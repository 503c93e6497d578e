"""
Runtime settings resolved from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from hotel_capital.compliance.disclaimers import DEFAULT_FIRM_NAME, DisclaimerTemplates


@dataclass(frozen=True, slots=True)
class Settings:
    """Configuration shared by the API, CLI and caller helpers."""

    firm_name: str = DEFAULT_FIRM_NAME
    default_deal_minimum: float = 100_000
    default_deal_target: float = 500_000
    target_raise_divisor: float = 20
    max_active_sequences: int = 2
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_reload: bool = False
    cors_origins: Tuple[str, ...] = ("*",)

    def disclaimers(self) -> DisclaimerTemplates:
        return DisclaimerTemplates(firm_name=self.firm_name)

    def deal_target_for(self, total_raise: float) -> float:
        """Target allocation per investor for a raise of `total_raise`."""
        return total_raise / self.target_raise_divisor


def _env_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


def _env_number(env: Mapping[str, str], name: str, default: float, cast=float):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return cast(default)
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be numeric, got {raw!r}.") from exc


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from `env` (defaults to `os.environ`)."""

    env = os.environ if env is None else env
    divisor = _env_number(env, "HC_TARGET_RAISE_DIVISOR", 20)
    if divisor <= 0:
        raise ValueError("Environment variable HC_TARGET_RAISE_DIVISOR must be positive.")

    origins = tuple(origin.strip() for origin in env.get("HC_API_CORS_ORIGINS", "*").split(",") if origin.strip())
    return Settings(
        firm_name=env.get("FIRM_NAME") or DEFAULT_FIRM_NAME,
        default_deal_minimum=_env_number(env, "HC_DEFAULT_DEAL_MINIMUM", 100_000),
        default_deal_target=_env_number(env, "HC_DEFAULT_DEAL_TARGET", 500_000),
        target_raise_divisor=divisor,
        max_active_sequences=_env_number(env, "HC_MAX_ACTIVE_SEQUENCES", 2, cast=int),
        api_host=env.get("HC_API_HOST", "127.0.0.1"),
        api_port=_env_number(env, "HC_API_PORT", 8000, cast=int),
        api_reload=_env_bool(env.get("HC_API_RELOAD")),
        cors_origins=origins or ("*",),
    )


__all__ = ["Settings", "load_settings"]
