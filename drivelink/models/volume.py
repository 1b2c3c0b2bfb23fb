"""Storage quota model."""

from pydantic import BaseModel, ConfigDict


class VolumeInfo(BaseModel):
    """Capacity and usage reported by a provider, in bytes (-1 when unknown)."""

    total_capacity: int = -1
    usage: int = -1

    model_config = ConfigDict(frozen=True)

    @property
    def available_capacity(self) -> int:
        if self.total_capacity < 0 or self.usage < 0:
            return -1
        return max(self.total_capacity - self.usage, 0)
