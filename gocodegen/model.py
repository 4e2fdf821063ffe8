"""Entity model extracted from a Go API source file.

An Entity is one endpoint, correlated by name across three declarations:
the ``{Name}Request`` struct, the ``{Name}Response`` type and the
``func (api *api) {Name}`` handler.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Parameter:
    field: str
    type: str
    description: str = ""
    tag: str = ""


@dataclass
class ResponseField:
    field: str  # json key
    type: str
    description: str = ""


@dataclass
class Response:
    type: str
    fields: list[ResponseField] = field(default_factory=list)

    def is_empty(self) -> bool:
        """An object response without fields carries nothing worth generating."""
        return self.type == "Object" and not self.fields


@dataclass
class Entity:
    name: str
    description: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    parameter_by_name: dict[str, Parameter] = field(default_factory=dict)
    response: Response | None = None

    def add_parameter(self, param: Parameter) -> None:
        # a repeated field name replaces the index entry but stays in the list
        self.parameters.append(param)
        self.parameter_by_name[param.field] = param


@dataclass(frozen=True)
class ExtractionResult:
    entities: list[Entity]  # endpoints, in handler order
    entities_by_name: dict[str, Entity]


class EntityBuilder:
    """Accumulates entities for a single source file."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._by_name: dict[str, Entity] = {}
        self._endpoints: set[str] = set()
        self._finalized = False

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError("EntityBuilder already finalized")

    def get_or_create(self, name: str) -> Entity:
        self._check_open()
        if name not in self._by_name:
            self._by_name[name] = Entity(name=name)
        return self._by_name[name]

    def add_parameter(self, name: str, param: Parameter) -> None:
        self.get_or_create(name).add_parameter(param)

    def set_response(self, name: str, response: Response) -> None:
        """Attach a response unless it is an empty object; the last one wins."""
        entity = self.get_or_create(name)
        if not response.is_empty():
            entity.response = response

    def add_endpoint(self, name: str, description: str) -> Entity:
        entity = self.get_or_create(name)
        entity.description = description
        if name not in self._endpoints:
            self._endpoints.add(name)
            self._entities.append(entity)
        return entity

    def finalize(self) -> ExtractionResult:
        self._check_open()
        self._finalized = True
        return ExtractionResult(entities=list(self._entities), entities_by_name=dict(self._by_name))
