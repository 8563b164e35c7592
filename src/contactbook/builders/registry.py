"""Builder registry for contactbook.

Maps each contact kind to the ``ContactBuilder`` subclass that constructs
it.  The registry is the single place the rest of the package asks "which
schema, which builder, for this kind?", so a new contact kind only has to
declare a schema, a builder, and register it.

Example
-------
Register a builder with the decorator::

    from contactbook.builders.registry import builder_registry

    @builder_registry.register("person")
    class PersonContactBuilder(ContactBuilder):
        schema = PERSON_SCHEMA
        ...

Load builders shipped by other distributions via entry-points::

    builder_registry.load_entrypoints("contactbook.variants")

Retrieve a builder class and its schema::

    cls = builder_registry.get("person")
    schema = builder_registry.schema_for("person")
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable
from datetime import datetime

from contactbook.builders.base import ContactBuilder
from contactbook.errors import (
    SchemaDriftError,
    VariantAlreadyRegisteredError,
    VariantNotFoundError,
)
from contactbook.io import Prompter
from contactbook.model.notices import NoticeReporter
from contactbook.model.schema import FieldSchema

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "contactbook.variants"


class BuilderRegistry:
    """Registry of builder classes keyed by contact kind.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in log messages).
    """

    def __init__(self, name: str = "builders") -> None:
        self._name = name
        self._builders: dict[str, type[ContactBuilder]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self, kind: str
    ) -> Callable[[type[ContactBuilder]], type[ContactBuilder]]:
        """Return a class decorator that registers the decorated builder.

        Raises
        ------
        VariantAlreadyRegisteredError
            If ``kind`` is already in use.
        TypeError
            If the class is not a ``ContactBuilder`` for ``kind``.
        SchemaDriftError
            If the class's ``STEPS`` table does not cover its schema.
        """

        def decorator(cls: type[ContactBuilder]) -> type[ContactBuilder]:
            self.register_class(kind, cls)
            return cls

        return decorator

    def register_class(self, kind: str, cls: type[ContactBuilder]) -> None:
        """Register ``cls`` under ``kind`` without the decorator syntax."""
        if kind in self._builders:
            raise VariantAlreadyRegisteredError(kind)
        if not (isinstance(cls, type) and issubclass(cls, ContactBuilder)):
            raise TypeError(
                f"Cannot register {cls!r} under {kind!r}: "
                "it must be a subclass of ContactBuilder."
            )
        schema = getattr(cls, "schema", None)
        if not isinstance(schema, FieldSchema) or schema.kind != kind:
            raise TypeError(
                f"Cannot register {cls.__qualname__} under {kind!r}: "
                f"its schema describes {getattr(schema, 'kind', None)!r}."
            )
        steps = getattr(cls, "STEPS", {})
        for field_name in schema.names():
            if field_name not in steps:
                raise SchemaDriftError(field_name, cls.__qualname__)
        self._builders[kind] = cls
        logger.debug(
            "Registered builder %r -> %s in registry %r",
            kind,
            cls.__qualname__,
            self._name,
        )

    def deregister(self, kind: str) -> None:
        """Remove the builder registered under ``kind``.

        Raises
        ------
        VariantNotFoundError
            If ``kind`` is not registered.
        """
        if kind not in self._builders:
            raise VariantNotFoundError(kind, self.kinds())
        del self._builders[kind]
        logger.debug("Deregistered builder %r from registry %r", kind, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, kind: str) -> type[ContactBuilder]:
        """Return the builder class registered under ``kind``.

        Raises
        ------
        VariantNotFoundError
            If no builder is registered under ``kind``.
        """
        try:
            return self._builders[kind]
        except KeyError:
            raise VariantNotFoundError(kind, self.kinds()) from None

    def schema_for(self, kind: str) -> FieldSchema:
        """Return the field schema for ``kind``."""
        return self.get(kind).schema

    def kinds(self) -> list[str]:
        """Return registered kinds in registration order."""
        return list(self._builders)

    def create_builders(
        self,
        prompter: Prompter,
        reporter: NoticeReporter | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> dict[str, ContactBuilder]:
        """Instantiate one builder per registered kind."""
        return {
            kind: cls(prompter, reporter=reporter, clock=clock)
            for kind, cls in self._builders.items()
        }

    def __contains__(self, kind: object) -> bool:
        return kind in self._builders

    def __len__(self) -> int:
        return len(self._builders)

    def __repr__(self) -> str:
        return f"BuilderRegistry(name={self._name!r}, kinds={self.kinds()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register builders declared as package entry-points.

        Kinds that are already registered are skipped, which makes repeated
        calls idempotent.  Entry-points that fail to import or register are
        logged and skipped.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."contactbook.variants"]
            supplier = "my_package.builders:SupplierContactBuilder"
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._builders:
                logger.debug(
                    "Entry-point %r already registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls)
            except (VariantAlreadyRegisteredError, TypeError, SchemaDriftError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered "
                    "in registry %r; skipping.",
                    ep.name,
                    self._name,
                )


builder_registry = BuilderRegistry()
