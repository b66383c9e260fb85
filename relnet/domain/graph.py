"""Graph projection models handed to the layout and rendering layer."""

from pydantic import BaseModel, ConfigDict, field_validator

from relnet.domain.entities import Number


class FilterState(BaseModel):
    """Facet filters for the graph.

    An empty facet places no restriction on that dimension. Facets combine with
    AND, values within one facet with OR.
    """

    model_config = ConfigDict(frozen=True)

    departments: frozenset[str] = frozenset()
    risk_levels: frozenset[str] = frozenset()
    relationship_types: frozenset[str] = frozenset()
    sentiments: frozenset[str] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def _drop_none(cls, value: object) -> object:
        return frozenset() if value is None else value

    @property
    def is_empty(self) -> bool:
        return not (
            self.departments or self.risk_levels or self.relationship_types or self.sentiments
        )


class GraphNode(BaseModel):
    id: str
    name: str
    title: str
    department: str
    influence: Number
    risk_level: str


class GraphLink(BaseModel):
    """A relationship edge; source and target are person IDs for the layout engine."""

    id: str
    type: str
    strength: Number
    sentiment: str
    direction: str
    source: str
    target: str


class NetworkGraph(BaseModel):
    nodes: list[GraphNode] = []
    links: list[GraphLink] = []
