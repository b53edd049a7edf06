"""Constraint providers and the registry that discovers them.

A constraint provider bundles named predicates so they can be merged into
a validator in one call::

    class PostalConstraints(ConstraintProvider):
        def get_constraints(self):
            return {"zip": lambda value: len(str(value)) == 5}

    validator.add_constraints_from(PostalConstraints())

Providers are registered with the module-level ``providers`` registry
either with the decorator at import time::

    @providers.register("postal")
    class PostalConstraints(ConstraintProvider):
        ...

or by declaring an entry-point in a package's ``pyproject.toml`` under the
"fieldrules.constraints" group::

    [project.entry-points."fieldrules.constraints"]
    postal = "my_package.constraints:PostalConstraints"

and calling ``providers.load_entrypoints()``.  ``providers.create(name)``
then returns an instance ready for ``add_constraints_from``.
"""
from __future__ import annotations

import importlib.metadata
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping

from fieldrules.schema.types import Constraint

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "fieldrules.constraints"


class ConstraintProvider(ABC):
    """A named bundle of constraint predicates."""

    @abstractmethod
    def get_constraints(self) -> Mapping[str, Constraint]:
        """Return the ``name -> predicate`` mapping this provider exposes."""


class ProviderNotFoundError(KeyError):
    """No provider is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.provider_name = name
        super().__init__(f"No constraint provider named {name!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class ProviderAlreadyRegisteredError(ValueError):
    """A provider name is taken."""

    def __init__(self, name: str) -> None:
        self.provider_name = name
        super().__init__(f"Constraint provider name {name!r} is taken")


class ProviderRegistry:
    """Provider classes by name, filled by decorator or from entry-points.

    A registered class is instantiated on demand with :meth:`create`, and
    the instance is what a validator merges with ``add_constraints_from``.
    """

    def __init__(self) -> None:
        self._providers: dict[str, type[ConstraintProvider]] = {}

    def register(
        self, name: str
    ) -> Callable[[type[ConstraintProvider]], type[ConstraintProvider]]:
        """Class decorator form of :meth:`register_class`."""

        def decorator(cls: type[ConstraintProvider]) -> type[ConstraintProvider]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[ConstraintProvider]) -> None:
        """Store ``cls`` under ``name``.

        Raises
        ------
        ProviderAlreadyRegisteredError
            If ``name`` is taken.
        TypeError
            If ``cls`` is not a ``ConstraintProvider`` subclass.
        """
        if name in self._providers:
            raise ProviderAlreadyRegisteredError(name)
        if not isinstance(cls, type) or not issubclass(cls, ConstraintProvider):
            raise TypeError(f"{cls!r} is not a ConstraintProvider subclass")
        self._providers[name] = cls
        logger.debug("Constraint provider %r registered (%s)", name, cls.__qualname__)

    def deregister(self, name: str) -> None:
        if self._providers.pop(name, None) is None:
            raise ProviderNotFoundError(name)
        logger.debug("Constraint provider %r removed", name)

    def get(self, name: str) -> type[ConstraintProvider]:
        """Return the class registered under ``name``."""
        cls = self._providers.get(name)
        if cls is None:
            raise ProviderNotFoundError(name)
        return cls

    def create(self, name: str) -> ConstraintProvider:
        """Instantiate the provider registered under ``name``.

        Raises
        ------
        ProviderNotFoundError
            If ``name`` is not registered.
        """
        return self.get(name)()

    def list_providers(self) -> list[str]:
        return sorted(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def __repr__(self) -> str:
        return f"<ProviderRegistry {self.list_providers()}>"

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> list[str]:
        """Register the providers installed packages declare under ``group``.

        Names already present are left alone, so calling this twice is
        harmless.  An entry-point that fails to import, or that does not
        resolve to a provider class, is logged and ignored.

        Returns
        -------
        list[str]
            Names registered by this call.
        """
        added: list[str] = []
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._providers:
                logger.debug("Constraint provider %r already present", ep.name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception("Cannot import constraint provider %r from %r", ep.name, group)
                continue
            try:
                self.register_class(ep.name, cls)
            except (ProviderAlreadyRegisteredError, TypeError) as exc:
                logger.warning("Ignoring entry-point %r: %s", ep.name, exc)
                continue
            added.append(ep.name)
        return added


providers = ProviderRegistry()
