"""SPARQL store configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var, require_env_var
from .http_resilience import ResilienceConfig

DEFAULT_SPARQL_ENDPOINT: Final[str] = "http://database:8890/sparql"
DEFAULT_RESOURCE_BASE: Final[str] = "http://data.lblod.info/id/"
SPARQL_TIMEOUT_SECONDS: Final[float] = 30.0


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Holds the SPARQL endpoint and the graph all records live in."""

    endpoint: str
    graph: str
    resource_base: str
    resilience: ResilienceConfig


def get_store_config(*, resilience: ResilienceConfig | None = None) -> StoreConfig:
    endpoint = optional_env_var("MU_SPARQL_ENDPOINT") or DEFAULT_SPARQL_ENDPOINT
    return StoreConfig(
        endpoint=endpoint,
        graph=require_env_var("MU_APPLICATION_GRAPH"),
        resource_base=optional_env_var("MONITOR_RESOURCE_BASE") or DEFAULT_RESOURCE_BASE,
        resilience=resilience
        or ResilienceConfig(
            name="sparql",
            timeout_seconds=SPARQL_TIMEOUT_SECONDS,
            default_headers={"Accept": "application/sparql-results+json"},
        ),
    )
