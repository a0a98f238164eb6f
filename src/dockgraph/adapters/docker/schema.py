"""Pydantic models describing the Docker Engine API payloads we consume."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


class DockerBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ContainerSummary(DockerBaseModel):
    """One entry of ``GET /containers/json``."""

    id: str = Field(alias="Id")
    names: list[str] = Field(alias="Names", min_length=1)
    image: str = Field(alias="Image")
    state: str = Field(alias="State")
    labels: dict[str, str] = Field(default_factory=dict, alias="Labels")

    @field_validator("labels", mode="before")
    @classmethod
    def _null_labels(cls, value: object) -> object:
        return {} if value is None else value


class ContainerList(RootModel[list[ContainerSummary]]):
    pass
