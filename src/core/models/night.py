"""Night resource model."""

from typing import ClassVar

from pydantic import Field

from core.filters.night_filters import NightFilters
from core.filters.paginable import Paginable
from core.models.resource import ResourceModel
from core.models.squad import SquadMember
from core.utils.constants import NIGHTS_PATH, get_api_base_url


class Night(ResourceModel):
    """A recorded night: one squad session made of several runs."""

    filters_class: ClassVar[type[Paginable]] = NightFilters

    uuid: str = Field(..., description="Unique night identifier")
    average_real_time: float = Field(..., description="Average run real time, in seconds")

    scope: str | None = None
    verified: bool | None = None
    season: int | None = None
    squad_size: int | None = None
    created_at: str | None = Field(None, description="ISO-8601 creation timestamp")
    users: list[SquadMember] = Field(default_factory=list)

    @classmethod
    def resource_url(cls) -> str:
        return f"{get_api_base_url()}/{NIGHTS_PATH}"
