"""Run resource model."""

from typing import ClassVar

from pydantic import Field

from core.filters.paginable import Paginable
from core.filters.run_filters import RunFilters
from core.models.resource import ResourceModel
from core.models.squad import Eidolon, NightSummary
from core.utils.constants import RUNS_PATH, get_api_base_url


class Run(ResourceModel):
    """A single recorded run with its per-eidolon timing breakdown."""

    filters_class: ClassVar[type[Paginable]] = RunFilters

    uuid: str = Field(..., description="Unique run identifier")
    verified: bool
    extraction_time: float
    night: NightSummary

    last_hydrolyst_limb_break_time: float | None = None
    real_time: float | None = None
    load_time: float | None = None
    median_limb_break_time: float | None = None
    eidolons: list[Eidolon] | None = None

    @classmethod
    def resource_url(cls) -> str:
        return f"{get_api_base_url()}/{RUNS_PATH}"
