"""Entity domain models loaded from the People, Relationships and Events tables."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

RelationshipType = Literal[
    "Reports To",
    "Mentors",
    "Collaborates With",
    "Competes With",
    "Influences",
    "Sponsors",
    "Advises",
    "Blocks",
    "Supports",
    "Conflicts With",
]
Sentiment = Literal["Positive", "Negative", "Neutral", "Complex"]
Direction = Literal["A→B", "B→A", "Both"]
EventType = Literal[
    "Meeting",
    "Email",
    "Decision",
    "Conflict",
    "Promotion",
    "Departure",
    "Reorganization",
    "Alliance",
    "Betrayal",
    "Achievement",
]
Impact = Literal["Positive", "Negative", "Neutral", "Mixed"]
RiskLevel = Literal["Low", "Medium", "High"]

RELATIONSHIP_TYPES: tuple[str, ...] = RelationshipType.__args__
SENTIMENTS: tuple[str, ...] = Sentiment.__args__
DIRECTIONS: tuple[str, ...] = Direction.__args__
EVENT_TYPES: tuple[str, ...] = EventType.__args__
IMPACTS: tuple[str, ...] = Impact.__args__
RISK_LEVELS: tuple[str, ...] = RiskLevel.__args__

PEOPLE_TABLE = "People"
RELATIONSHIPS_TABLE = "Relationships"
EVENTS_TABLE = "Events"

PEOPLE_HEADERS = ["ID", "Name", "Title", "Department", "Influence", "RiskLevel", "Notes"]
RELATIONSHIPS_HEADERS = [
    "ID",
    "PersonA_ID",
    "PersonB_ID",
    "Type",
    "Strength",
    "Sentiment",
    "Direction",
    "Notes",
]
EVENTS_HEADERS = ["ID", "Date", "People_IDs", "Type", "Description", "Impact", "Severity"]

Number = int | float


class Entity(BaseModel):
    """Base for records parsed from a table row.

    Fields are aliased to the spreadsheet column headers. Enumerated fields are
    plain strings: values outside the known sets are kept as-is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(alias="ID")


class Person(Entity):
    name: str = Field(default="", alias="Name")
    title: str = Field(default="", alias="Title")
    department: str = Field(default="", alias="Department")
    influence: Number = Field(default=0, alias="Influence")  # 1-10
    risk_level: str = Field(default="", alias="RiskLevel")
    notes: str = Field(default="", alias="Notes")


class Relationship(Entity):
    person_a_id: str = Field(default="", alias="PersonA_ID")
    person_b_id: str = Field(default="", alias="PersonB_ID")
    type: str = Field(default="", alias="Type")
    strength: Number = Field(default=0, alias="Strength")  # 1-10
    sentiment: str = Field(default="", alias="Sentiment")
    direction: str = Field(default="", alias="Direction")
    notes: str = Field(default="", alias="Notes")


class RelationshipEvent(Entity):
    date: str = Field(default="", alias="Date")  # ISO date
    people_ids: str = Field(default="", alias="People_IDs")  # comma separated person IDs
    type: str = Field(default="", alias="Type")
    description: str = Field(default="", alias="Description")
    impact: str = Field(default="", alias="Impact")
    severity: Number = Field(default=0, alias="Severity")  # 1-10


class ValidationError(BaseModel):
    """A problem found while loading a table.

    Attributes:
        table: Table label the problem was found in
        row: 1-based data row number, 0 for table-level problems. Rows whose
            cells are all blank are skipped by the store and not counted.
        field: Offending column, empty for row or table-level problems
        message: Human readable description
    """

    model_config = ConfigDict(frozen=True)

    table: str
    row: int
    field: str = ""
    message: str


class DataLoadResult(BaseModel):
    """Everything parsed from one load of the three tables."""

    people: list[Person] = []
    relationships: list[Relationship] = []
    events: list[RelationshipEvent] = []
    errors: list[ValidationError] = []

    @computed_field
    @property
    def tables_missing(self) -> bool:
        """True when nothing was loaded because the tables do not exist yet."""
        if self.people or self.relationships or self.events:
            return False
        return any("not found" in error.message for error in self.errors)
