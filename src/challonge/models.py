"""
Dataclasses for raw Challonge v1 API payloads.

The v1 API wraps every object in a single-key dict, e.g.
{"participant": {...}}. from_dict accepts either the wrapped or the bare form.
IDs are coerced to strings so they compare equal regardless of JSON type.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any


def _unwrap(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    inner = data.get(key)
    if isinstance(inner, dict):
        return inner
    return data


def _str_id(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass
class GroupStage:
    """A group (Swiss/round robin) stage of a tournament."""
    id: str
    identifier: str
    state: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GroupStage':
        data = _unwrap(data, "group_stage")
        return cls(
            id=_str_id(data.get("id")),
            identifier=str(data.get("identifier") or ""),
            state=data.get("state")
        )


@dataclass
class ChallongeParticipant:
    """A tournament participant."""
    id: str
    name: str
    final_rank: Optional[int] = None
    seed: Optional[int] = None
    group_player_ids: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChallongeParticipant':
        data = _unwrap(data, "participant")
        name = data.get("name") or data.get("display_name") or data.get("username") or ""
        return cls(
            id=_str_id(data.get("id")),
            name=name,
            final_rank=data.get("final_rank"),
            seed=data.get("seed"),
            group_player_ids=[str(g) for g in (data.get("group_player_ids") or [])]
        )


@dataclass
class ChallongeMatch:
    """A tournament match as reported by the API."""
    id: str
    round: int
    state: str
    identifier: Optional[str] = None
    player1_id: Optional[str] = None
    player2_id: Optional[str] = None
    winner_id: Optional[str] = None
    loser_id: Optional[str] = None
    player1_score: Optional[int] = None
    player2_score: Optional[int] = None
    scores_csv: Optional[str] = None
    forfeited: bool = False
    group_id: Optional[str] = None
    suggested_play_order: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChallongeMatch':
        data = _unwrap(data, "match")
        return cls(
            id=_str_id(data.get("id")),
            round=int(data.get("round") or 0),
            state=data.get("state") or "",
            identifier=data.get("identifier"),
            player1_id=_str_id(data.get("player1_id")),
            player2_id=_str_id(data.get("player2_id")),
            winner_id=_str_id(data.get("winner_id")),
            loser_id=_str_id(data.get("loser_id")),
            player1_score=data.get("player1_score"),
            player2_score=data.get("player2_score"),
            scores_csv=data.get("scores_csv"),
            forfeited=data.get("forfeited") is True,
            group_id=_str_id(data.get("group_id")),
            suggested_play_order=data.get("suggested_play_order"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at")
        )


@dataclass
class ChallongeTournament:
    """A tournament with its participants and matches."""
    id: str
    name: str
    url: Optional[str] = None
    tournament_type: Optional[str] = None
    state: Optional[str] = None
    group_stages_enabled: bool = False
    group_stages: List[GroupStage] = field(default_factory=list)
    participants: List[ChallongeParticipant] = field(default_factory=list)
    matches: List[ChallongeMatch] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChallongeTournament':
        data = _unwrap(data, "tournament")
        return cls(
            id=_str_id(data.get("id")) or "",
            name=data.get("name") or "",
            url=data.get("url"),
            tournament_type=data.get("tournament_type"),
            state=data.get("state"),
            group_stages_enabled=bool(data.get("group_stages_enabled")),
            group_stages=[GroupStage.from_dict(g) for g in (data.get("group_stages") or [])],
            participants=[ChallongeParticipant.from_dict(p) for p in (data.get("participants") or [])],
            matches=[ChallongeMatch.from_dict(m) for m in (data.get("matches") or [])]
        )

    def find_group_stage(self, group_id: str) -> Optional[GroupStage]:
        for stage in self.group_stages:
            if stage.id == group_id:
                return stage
        return None
