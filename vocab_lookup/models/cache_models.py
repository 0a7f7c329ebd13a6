"""Pydantic models for cache-related data structures"""

from pydantic import BaseModel, Field, field_validator


class CacheStats(BaseModel):
    """Model for cache statistics"""

    total_entries: int = Field(description="Total number of entries")
    max_entries: int | None = Field(None, description="Bound, None when unbounded")
    hits: int = Field(default=0, description="Cache hits")
    misses: int = Field(default=0, description="Cache misses")
    evictions: int = Field(default=0, description="Entries evicted by the bound")
    hit_rate: float = Field(description="Cache hit rate percentage")

    @field_validator("hit_rate")
    @classmethod
    def validate_hit_rate(cls, v: float) -> float:
        """Validate hit rate percentage"""
        if not 0 <= v <= 100:
            raise ValueError("Hit rate must be between 0 and 100")
        return v
