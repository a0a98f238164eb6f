"""Pydantic models for SPARQL 1.1 JSON result documents."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SparqlBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Term(SparqlBaseModel):
    type: Literal["uri", "literal", "typed-literal", "bnode"]
    value: str
    datatype: str | None = None
    lang: str | None = Field(default=None, alias="xml:lang")


class Head(SparqlBaseModel):
    vars: list[str] = Field(default_factory=list)


class Results(SparqlBaseModel):
    bindings: list[dict[str, Term]]


class SelectResponse(SparqlBaseModel):
    head: Head
    results: Results

    def rows(self) -> list[dict[str, str]]:
        """Flatten bindings to plain values; unbound variables are left out."""

        return [
            {name: term.value for name, term in binding.items() if name in self.head.vars}
            for binding in self.results.bindings
        ]


class AskResponse(SparqlBaseModel):
    head: Head = Field(default_factory=Head)
    boolean: bool
