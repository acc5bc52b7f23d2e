"""Pydantic schemas for JSON:API style resource documents."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResourceIdentifier(BaseModel):
    """Type and id of a related resource."""

    type: str = Field(description="Resource type")
    id: str = Field(description="Resource ID")


class Relationship(BaseModel):
    """To-many relationship linkage."""

    data: list[ResourceIdentifier] = Field(default_factory=list)


class Resource(BaseModel):
    """A typed resource object."""

    type: str = Field(description="Resource type")
    id: str = Field(description="Resource ID")
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, Relationship] | None = None
    links: dict[str, str] | None = None
    meta: dict[str, Any] | None = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.type, self.id)


class ListDocument(BaseModel):
    """Top-level document for a collection."""

    links: dict[str, str] = Field(description="self, first, last and optional prev/next")
    data: list[Resource] = Field(default_factory=list)
    included: list[Resource] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)


class SingleDocument(BaseModel):
    """Top-level document for a single resource."""

    links: dict[str, str] = Field(description="self link")
    data: Resource
    included: list[Resource] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)


class ErrorObject(BaseModel):
    """A single error entry."""

    model_config = ConfigDict(extra="ignore")

    status: str = Field(description="HTTP status code as a string")
    title: str = Field(description="Short summary of the problem")
    detail: str = Field(description="Explanation specific to this occurrence")


class ErrorDocument(BaseModel):
    """Top-level document for errors."""

    errors: list[ErrorObject] = Field(default_factory=list)
