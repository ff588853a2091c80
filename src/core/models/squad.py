"""Nested value records shared by night and run payloads."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireRecord(BaseModel):
    """Immutable record decoded from camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SquadMember(WireRecord):
    """One player of a squad. Anonymous members carry only a scope."""

    uuid: str | None = None
    ign: str | None = Field(None, description="In-game name")
    role: str | None = None
    scope: str


class Eidolon(WireRecord):
    """Timing breakdown of a single eidolon encounter, in seconds."""

    result: str
    spawn_delay: float | None = None
    spawn_animation_time: float | None = None
    first_limb_break_time: float | None = None
    last_limb_break_time: float | None = None
    median_limb_break_time: float | None = None
    limb_break_times: list[float] = Field(default_factory=list)
    shrine_time: float | None = None
    shard_insertion_times: list[float] = Field(default_factory=list)
    capshot_time: float | None = None


class NightSummary(WireRecord):
    """The night a run belongs to, as embedded in run payloads."""

    uuid: str
    scope: str
    verified: bool
    season: int
    squad_size: int
    created_at: str
    users: list[SquadMember] = Field(default_factory=list)
