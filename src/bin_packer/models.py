from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, computed_field, model_validator

from bin_packer.errors import ItemTooLarge


class Package(BaseModel):
    """Package model with its input position and integer size."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Position of the package in the input sequence")
    size: int = Field(ge=0, description="Size consumed in a bin")


class Bin(BaseModel):
    """Bin holding packages in the order they were added."""

    capacity: int = Field(ge=0, description="Maximum total size of the bin")
    packages: list[Package] = Field(default_factory=list)

    # Running sum of package sizes, kept in step by add_package.
    _total: int = PrivateAttr(default=0)

    @model_validator(mode="after")
    def check_total(self) -> "Bin":
        total = sum(p.size for p in self.packages)
        if total > self.capacity:
            raise ValueError(f"Bin total {total} exceeds capacity {self.capacity}")
        return self

    def model_post_init(self, __context: Any) -> None:
        self._total = sum(p.size for p in self.packages)

    @computed_field
    @property
    def total(self) -> int:
        return self._total

    @property
    def sizes(self) -> list[int]:
        return [p.size for p in self.packages]

    @property
    def remaining(self) -> int:
        return self.capacity - self.total

    @property
    def fill_rate(self) -> float:
        return 0.0 if self.capacity == 0 else self.total / self.capacity

    def can_fit(self, package: Package) -> bool:
        return self.total + package.size <= self.capacity

    def add_package(self, package: Package) -> None:
        """Append a package; bins are append-only and never exceed capacity."""
        if not self.can_fit(package):
            raise ItemTooLarge(package.index, package.size, self.remaining)
        self.packages.append(package)
        self._total += package.size


class PackingResult(BaseModel):
    """Summary of one packing run."""

    capacity: int = Field(ge=0)
    bins: list[Bin] = Field(default_factory=list)
    package_count: int = 0
    bin_count: int = 0
    total_size: int = 0
    used_capacity: int = 0
    fill_rate: float = 0.0
    lower_bound: int = 0
