# sequence/config.py
from __future__ import annotations

import copy
import json
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

# Two decks, two hands
_DECK_SIZE = 104
_PLAYERS = 2


@dataclass
class GameConfig:
    """
    Canonical configuration for a game.
    `from_dict` accepts the nested JSON shape used by config files so callers
    can pass a parsed file without manual unpacking.
    """
    # Rules
    hand_size: int = 7
    win_sequences_needed: int = 2

    # Reproducibility (None -> fresh entropy every game)
    seed: Optional[int] = None

    # Logging: JSONL file receiving one line per accepted move
    match_log_path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.hand_size < 1 or self.hand_size * _PLAYERS > _DECK_SIZE:
            raise ValueError(f"hand_size must be between 1 and {_DECK_SIZE // _PLAYERS}, got {self.hand_size}")
        if self.win_sequences_needed < 1:
            raise ValueError(f"win_sequences_needed must be >= 1, got {self.win_sequences_needed}")

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "GameConfig":
        """
        Build a GameConfig from a nested dict.
        Expected top-level keys: "rules", "engine", "logging" (all optional).
        """
        rules = dict(cfg.get("rules", {}))
        eng = dict(cfg.get("engine", {}))
        log_cfg = dict(cfg.get("logging", {}))

        seed = eng.get("seed", None)
        if seed == "random":
            seed = None

        return cls(
            hand_size=int(rules.get("hand_size", 7)),
            win_sequences_needed=int(rules.get("win_sequences_needed", 2)),
            seed=int(seed) if seed is not None else None,
            match_log_path=log_cfg.get("match_log", None),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Nested dict in the same shape `from_dict` reads."""
        flat = asdict(self)
        return {
            "rules": {
                "hand_size": flat["hand_size"],
                "win_sequences_needed": flat["win_sequences_needed"],
            },
            "engine": {"seed": flat["seed"]},
            "logging": {"match_log": flat["match_log_path"]},
        }


def load_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def deep_update(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge 'override' into 'base' (returns a new dict).
    """
    out = copy.deepcopy(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: str, overrides: Optional[Dict[str, Any]] = None) -> GameConfig:
    return GameConfig.from_dict(deep_update(load_json(path), overrides or {}))
