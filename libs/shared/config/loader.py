from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from apps.reporter.settings import ReporterSettings

ENV_PREFIX = "ZENIT_"

_STR_FIELDS: frozenset[str] = frozenset(
    name for name, f in ReporterSettings.model_fields.items() if f.annotation is str
)

# --- paths --------------------------------------------------------------------


def _repo_root() -> Path:
    """Heuristic: walk up from this file until we find pyproject.toml."""
    p = Path(__file__).resolve()
    for ancestor in [p, *p.parents]:
        if (ancestor / "pyproject.toml").exists():
            return ancestor
    return Path.cwd()


def _profiles_dir(env: Mapping[str, str]) -> Path:
    # ZENIT_CONFIG_DIR points *at* profiles/
    override = env.get(f"{ENV_PREFIX}CONFIG_DIR")
    if override:
        return Path(override)
    return _repo_root() / "configs" / "profiles"


def _load_profile_table(env: Mapping[str, str], profile: str) -> dict[str, Any]:
    f = _profiles_dir(env) / f"{profile}.toml"
    if not f.exists():
        return {}
    text = f.read_text("utf-8")
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise RuntimeError(f"Failed to parse profile TOML: {f}") from e


# --- env overlay helpers ------------------------------------------------------


def _coerce_env_value(raw: str) -> Any:
    """
    Try to parse JSON first (so numbers/bools/null work),
    then fall back to the original string.
    """
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _collect_env_for(
    fields: set[str],
    env: Mapping[str, str],
    prefix: str = ENV_PREFIX,
    raw_fields: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """
    Collect overrides like ZENIT_MOD_NAME, ZENIT_DISABLE_TELEMETRY -> {'mod_name': '...'}.
    Case-insensitive; underscores only. Fields in `raw_fields` keep the raw string,
    so a version like "1.2" stays a string.
    """
    out: dict[str, Any] = {}
    upper_to_field = {f.upper(): f for f in fields}
    plen = len(prefix)
    for k, v in env.items():
        if not k.startswith(prefix):
            continue
        key = k[plen:].upper()
        if key in upper_to_field:
            field = upper_to_field[key]
            out[field] = v if field in raw_fields else _coerce_env_value(v)
    return out


# --- public API ---------------------------------------------------------------


def load_reporter_settings(
    env: Mapping[str, str] | None = None, profile: str | None = None
) -> ReporterSettings:
    """
    Merge defaults (ReporterSettings) <- TOML [reporter] <- env ZENIT_*.
    Env examples: ZENIT_DISABLE_TELEMETRY=true, ZENIT_STEAM_QUERY_PORT=27016,
    ZENIT_TELEMETRY_URL=https://zenit.example.org
    """
    env = os.environ if env is None else env
    profile = (profile or env.get(f"{ENV_PREFIX}PROFILE") or "dev").strip()

    # defaults only; the model must not read os.environ behind our back
    base = ReporterSettings.model_construct().model_dump()

    toml_table = _load_profile_table(env, profile)
    toml_reporter = toml_table.get("reporter", {}) if isinstance(toml_table, dict) else {}
    if isinstance(toml_reporter, dict):
        base.update(toml_reporter)

    env_over = _collect_env_for(set(base.keys()), env, raw_fields=_STR_FIELDS)
    base.update(env_over)

    return ReporterSettings.model_validate(base)
