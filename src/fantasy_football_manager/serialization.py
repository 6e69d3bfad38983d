"""JSON-ready conversion of decision artifacts.

Usage:
    payload = to_dict(analysis)
    text = to_json(advice, indent=2)

Enums become their values, tuples become lists, and players and teams are
reduced to a reference (id and name) so artifacts stay small.
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from fantasy_football_manager.domain.player import Player
from fantasy_football_manager.domain.team import Team


def _player_ref(player: Player) -> dict[str, Any]:
    return {"player_id": player.player_id, "name": player.name, "position": player.position.value}


def _team_ref(team: Team) -> dict[str, Any]:
    return {"team_id": team.team_id, "name": team.name}


def to_dict(value: Any) -> Any:
    """Recursively convert a dataclass (or container of them) to plain JSON types."""
    if isinstance(value, Player):
        return _player_ref(value)
    if isinstance(value, Team):
        return _team_ref(value)
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_dict(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {str(to_dict(k)): to_dict(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_dict(v) for v in value]
    return value


def to_json(value: Any, indent: int | None = None) -> str:
    return json.dumps(to_dict(value), indent=indent)
