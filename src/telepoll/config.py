"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from telepoll.models.config import BotConfig, HandlerKind


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "TELEPOLL_",
) -> BotConfig:
    """Load client configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (TELEPOLL_TOKEN, etc.; BOT_TOKEN as fallback)
        2. TOML config file
        3. Defaults from BotConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = BotConfig()

    # ── Bot section ────────────────────────────────────────
    bot = raw.get("bot", {})
    if v := bot.get("token"):
        cfg.token = str(v)
    if v := bot.get("api_url"):
        cfg.api_url = str(v)

    # ── Polling section ────────────────────────────────────
    polling = raw.get("polling", {})
    if (v := polling.get("timeout")) is not None:
        cfg.poll_timeout = int(v)
    if v := polling.get("request_timeout"):
        cfg.request_timeout = int(v)
    if (v := polling.get("initial_offset")) is not None:
        cfg.initial_offset = int(v)

    # ── Runner section ─────────────────────────────────────
    runner = raw.get("runner", {})
    if v := runner.get("handler"):
        cfg.handler = HandlerKind(v)
    if (v := runner.get("error_backoff")) is not None:
        cfg.error_backoff = int(v)
    if v := runner.get("log_level"):
        cfg.log_level = str(v)

    # ── Environment variable overrides (highest priority) ──
    if token := os.environ.get(f"{env_prefix}TOKEN") or os.environ.get("BOT_TOKEN"):
        cfg.token = token
    if url := os.environ.get(f"{env_prefix}API_URL"):
        cfg.api_url = url
    if timeout := os.environ.get(f"{env_prefix}POLL_TIMEOUT"):
        cfg.poll_timeout = int(timeout)
    if handler := os.environ.get(f"{env_prefix}HANDLER"):
        cfg.handler = HandlerKind(handler)

    return cfg
