"""Data schemas for input/output operations."""

from typing import Any, Dict, List
from pydantic import BaseModel, Field, StrictInt

class PackRequest(BaseModel):
    """Schema for a packing request."""
    capacity: StrictInt = Field(description="Capacity shared by every bin")
    sizes: List[StrictInt] = Field(default_factory=list, description="Package sizes, in input order")

class PackResponse(BaseModel):
    """Schema for a packing response."""
    bin_count: int = Field(ge=0, description="Number of bins used")
    package_count: int = Field(ge=0, description="Number of packages packed")
    bins: List[List[int]] = Field(description="Package sizes held by each bin, in creation order")
    fill_rate: float = Field(ge=0, le=1, description="Packed size over capacity of the bins used")
    lower_bound: int = Field(ge=0, description="Fewest bins any packing could use")
    summary: str

class ErrorResponse(BaseModel):
    """Schema for a rejected packing request."""
    error: str
    summary: str
    details: Dict[str, Any] = Field(default_factory=dict)
