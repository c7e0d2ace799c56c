"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/design.py

Design: a flat table of TopLevel objects addressed by integer handles.

Objects reference each other by identity URI (SubComponent.instance_of,
Component.has_sequence, Location.sequence), so the table never holds an
ownership cycle even when the references form one. Graph passes translate
those URIs into handles and work on index adjacency.

Lifecycle: build single-threaded with `add`, then `publish` runs every
design-level check and freezes the table. Published designs are read-only and
may be shared between threads without locking.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator

from .component import Component
from .errors import DesignError, DesignIssue, DesignValidationError, InvalidUri
from .identified import TopLevel
from .sequence import Sequence
from .uri import Uri, parse_uri

if TYPE_CHECKING:
    from .config import ValidationConfig

log = logging.getLogger(__name__)


class Design:
    def __init__(self, objects: Iterable[TopLevel] = ()) -> None:
        self._objects: list[TopLevel] = []
        self._index: dict[Uri, int] = {}
        self._published = False
        for obj in objects:
            self.add(obj)

    # ----- assembly -----

    def add(self, obj: TopLevel) -> int:
        if self._published:
            raise DesignError("Design is published; build a new Design to change it")
        if not isinstance(obj, TopLevel):
            raise DesignError(f"Only TopLevel objects can be added, got {type(obj).__name__}")
        identity = obj.identity
        if identity is None:
            raise DesignError(f"{type(obj).__name__} without display_id is not addressable")
        if identity in self._index:
            raise DesignError(f"Duplicate identity in design: {identity}")
        handle = len(self._objects)
        self._objects.append(obj)
        self._index[identity] = handle
        log.debug("added %s %s as handle %d", type(obj).__name__, identity, handle)
        return handle

    # ----- lookup -----

    def handle(self, uri: str | Uri) -> int | None:
        return self._index.get(parse_uri(uri))

    def at(self, handle: int) -> TopLevel:
        return self._objects[handle]

    def get(self, uri: str | Uri) -> TopLevel | None:
        h = self.handle(uri)
        return None if h is None else self._objects[h]

    def __contains__(self, uri: object) -> bool:
        if not isinstance(uri, (str, Uri)):
            return False
        try:
            return self.handle(uri) is not None
        except InvalidUri:
            return False

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[TopLevel]:
        return iter(self._objects)

    def handles(self) -> range:
        return range(len(self._objects))

    def components(self) -> list[Component]:
        return [o for o in self._objects if isinstance(o, Component)]

    def sequences(self) -> list[Sequence]:
        return [o for o in self._objects if isinstance(o, Sequence)]

    def roots(self) -> list[Component]:
        """Components no other Component in the design instantiates."""
        instantiated = {sc.instance_of for c in self.components() for sc in c.sub_components()}
        return [c for c in self.components() if c.identity not in instantiated]

    # ----- lifecycle -----

    @property
    def published(self) -> bool:
        return self._published

    def validate(self, config: "ValidationConfig | None" = None) -> list[DesignIssue]:
        from .validate import validate_design

        return validate_design(self, config)

    def publish(self, config: "ValidationConfig | None" = None) -> "Design":
        issues = self.validate(config)
        if issues:
            raise DesignValidationError(issues)
        self._published = True
        log.info("published design with %d top-level object(s)", len(self))
        return self
