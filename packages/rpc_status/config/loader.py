"""Settings loading with deterministic source precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/rpc-status/rpc-status.yaml, or an explicit ``config_path``
4) Model defaults

Environment variable format:
- Prefix: ``RPC_STATUS_``
- Nested keys: ``__`` separator
- Example: ``RPC_STATUS_STATUS__MAX_UNWRAP_DEPTH=20``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import SettingsConfigDict

from .models import StatusSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> StatusSettings:
    """Resolve settings from CLI params, env, YAML, and defaults."""
    params = dict(cli_params) if cli_params is not None else {}
    if config_path is None:
        return StatusSettings(**params)

    class _FileSettings(StatusSettings):
        model_config = SettingsConfigDict(yaml_file=Path(config_path))

    return _FileSettings(**params)
