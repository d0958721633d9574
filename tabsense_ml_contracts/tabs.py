"""Tab snapshot input."""

from typing import Literal

from pydantic import BaseModel, Field

TimestampUnit = Literal["ms", "s", "auto"]


class TabInput(BaseModel):
    """One browser tab as seen by the host.

    ``last_active`` is an epoch timestamp in ``timestamp_unit``. Use
    ``"auto"`` only for data whose unit is unknown.
    """

    id: str | int
    title: str = ""
    url: str = ""
    domain: str | None = None
    last_active: float | None = Field(None, ge=0)
    timestamp_unit: TimestampUnit = "ms"
    inactive: bool = False
