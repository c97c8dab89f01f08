"""
Launch records as exposed by the launch catalog
"""

from pydantic import BaseModel, ConfigDict


class Mission(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    mission_patch_small: str | None = None
    mission_patch_large: str | None = None


class Rocket(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None
    type: str | None = None


class Launch(BaseModel):
    """A launch normalized from the provider's raw record."""

    model_config = ConfigDict(frozen=True)

    id: int
    cursor: str | None = None
    site: str | None = None
    mission: Mission | None = None
    rocket: Rocket | None = None
