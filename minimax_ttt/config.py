"""YAML configuration for the terminal front-end and the arena."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .agents import AGENTS

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be turned into a :class:`Config`."""


@dataclass(frozen=True)
class ArenaConfig:
    games: int = 20
    baseline: str = "random"
    seed: Optional[int] = None


@dataclass(frozen=True)
class Config:
    ai_delay_ms: int = 600
    show_index_map: bool = True
    log_level: str = "WARNING"
    arena: ArenaConfig = field(default_factory=ArenaConfig)

    @property
    def ai_delay(self) -> float:
        return self.ai_delay_ms / 1000.0

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def _check_keys(section: str, values: Mapping[str, Any], known: set) -> None:
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"unknown {section} keys: {', '.join(unknown)}")


def _typed(section: str, values: Mapping[str, Any], key: str, default: Any, kind: type) -> Any:
    value = values.get(key, default)
    # bool is an int subclass; neither may stand in for the other.
    if isinstance(value, bool) != (kind is bool) or not isinstance(value, kind):
        raise ConfigError(
            f"{section}.{key} must be of type {kind.__name__}, got {value!r}"
        )
    return value


def config_from_dict(raw: Optional[Mapping[str, Any]]) -> Config:
    raw = dict(raw or {})
    _check_keys("config", raw, {f.name for f in fields(Config)})

    arena_raw = raw.pop("arena", None) or {}
    if not isinstance(arena_raw, Mapping):
        raise ConfigError("'arena' must be a mapping")
    _check_keys("arena", arena_raw, {f.name for f in fields(ArenaConfig)})

    seed = arena_raw.get("seed")
    arena = ArenaConfig(
        games=_typed("arena", arena_raw, "games", ArenaConfig.games, int),
        baseline=_typed("arena", arena_raw, "baseline", ArenaConfig.baseline, str),
        seed=None if seed is None else _typed("arena", arena_raw, "seed", None, int),
    )
    config = Config(
        ai_delay_ms=_typed("config", raw, "ai_delay_ms", Config.ai_delay_ms, int),
        show_index_map=_typed("config", raw, "show_index_map", Config.show_index_map, bool),
        log_level=_typed("config", raw, "log_level", Config.log_level, str),
        arena=arena,
    )
    return _validate(config)


def _validate(config: Config) -> Config:
    if config.ai_delay_ms < 0:
        raise ConfigError("ai_delay_ms must not be negative")
    if config.arena.games < 0:
        raise ConfigError("arena.games must not be negative")
    if config.arena.baseline not in AGENTS:
        raise ConfigError(
            f"unknown arena.baseline {config.arena.baseline!r}; "
            f"expected one of {', '.join(sorted(AGENTS))}"
        )
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ConfigError(f"unknown log level {config.log_level!r}")
    return config


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    with config_path.open("r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigError(f"{config_path}: {exc}") from exc
    if raw is not None and not isinstance(raw, Mapping):
        raise ConfigError(f"{config_path}: top level must be a mapping")
    return config_from_dict(raw)


def with_overrides(config: Config, **overrides: Any) -> Config:
    """Return ``config`` with every override that is not ``None`` applied.

    Keys prefixed with ``arena_`` target the nested arena section.
    """

    top: Dict[str, Any] = {}
    arena: Dict[str, Any] = {}
    for key, value in overrides.items():
        if value is None:
            continue
        if key.startswith("arena_"):
            arena[key[len("arena_"):]] = value
        else:
            top[key] = value
    if arena:
        top["arena"] = replace(config.arena, **arena)
    return _validate(replace(config, **top))


__all__ = [
    "ArenaConfig",
    "Config",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "config_from_dict",
    "load_config",
    "with_overrides",
]
