"""
Input data model for the dependency layout: pydantic models of the fetched payload.
Field aliases follow the planning API (`from`, `to`, `maxSprint`).
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StoryRef(BaseModel):
    """One side of a dependency: the team owning the story and its sprint (None = backlog)."""
    model_config = ConfigDict(frozen=True)
    name: str
    sprint: Optional[int] = Field(None, ge=0)


class DependencyEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    source: StoryRef = Field(..., alias="from")
    target: StoryRef = Field(..., alias="to")


class DependencyPayload(BaseModel):
    """Board dependency payload as fetched from the planning API."""
    model_config = ConfigDict(populate_by_name=True)
    max_sprint: int = Field(..., ge=0, alias="maxSprint")
    deps: List[DependencyEdge] = Field(default_factory=list)
