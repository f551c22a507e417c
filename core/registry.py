"""
Demo Registry: Registration + Lookup of Runnable Pattern Demos

Each demo module registers its scenarios at import time:
- One entry per (pattern, variant) pair, e.g. ("strategy", "with")
- Metadata is a pydantic model so the CLI and API can list it as JSON
- Handlers are kept beside the metadata, keyed the same way
"""
from __future__ import annotations

import logging
from typing import Callable, Literal, Optional

from pydantic import BaseModel, Field

from patterns.domain_config import DemoConfig

logger = logging.getLogger(__name__)

Variant = Literal["without", "with"]
VARIANTS: tuple[str, ...] = ("without", "with")

DemoHandler = Callable[..., None]


class DemoDefinition(BaseModel):
    """Registered demo metadata."""
    pattern: str
    variant: Variant
    title: str
    summary: str = ""
    roles: list[str] = Field(default_factory=list)
    inputs: dict[str, list[str]] = Field(default_factory=dict)  # name -> allowed values

    @property
    def key(self) -> str:
        return f"{self.pattern}:{self.variant}"


class DemoRegistry:
    """Central registry for all pattern demos."""

    def __init__(self):
        self._demos: dict[tuple[str, str], DemoDefinition] = {}
        self._handlers: dict[tuple[str, str], DemoHandler] = {}

    def register(self, definition: DemoDefinition, handler: DemoHandler) -> None:
        """Register a demo; re-registering the same key replaces it."""
        key = (definition.pattern, definition.variant)
        self._demos[key] = definition
        self._handlers[key] = handler
        logger.debug("Registered demo %s", definition.key)

    def deregister(self, pattern: str, variant: str) -> None:
        """Remove a demo."""
        self._demos.pop((pattern, variant), None)
        self._handlers.pop((pattern, variant), None)

    def list_demos(self, pattern: Optional[str] = None) -> list[DemoDefinition]:
        """List demos ordered by registration, optionally for a single pattern."""
        demos = list(self._demos.values())
        if pattern is not None:
            demos = [d for d in demos if d.pattern == pattern]
        return demos

    def patterns(self) -> list[str]:
        """Distinct pattern names in registration order."""
        seen: dict[str, None] = {}
        for pattern, _variant in self._demos:
            seen.setdefault(pattern, None)
        return list(seen)

    def variants(self, pattern: str) -> list[str]:
        """Variants registered for ``pattern``, naive first."""
        return [v for v in VARIANTS if (pattern, v) in self._demos]

    def get(self, pattern: str, variant: str) -> Optional[DemoDefinition]:
        return self._demos.get((pattern, variant))

    def run(
        self,
        pattern: str,
        variant: str,
        config: Optional[DemoConfig] = None,
        **inputs: str,
    ) -> None:
        """Run a registered demo.

        Raises ValueError for an unknown demo or an input it does not accept.
        Input values are lower-cased; validating them is the demo's own job.
        """
        key = (pattern, variant)
        definition = self._demos.get(key)
        if definition is None:
            raise ValueError(f"Demo not found: {pattern}:{variant}")

        unexpected = sorted(set(inputs) - set(definition.inputs))
        if unexpected:
            raise ValueError(f"Demo {definition.key} does not accept inputs: {unexpected}")

        normalized = {k: v.strip().lower() for k, v in inputs.items() if v is not None}
        logger.info("Running demo %s", definition.key)
        self._handlers[key](config or DemoConfig.default(), **normalized)


registry = DemoRegistry()


def register_demo(
    pattern: str,
    variant: Variant,
    title: str,
    summary: str = "",
    roles: Optional[list[str]] = None,
    inputs: Optional[dict[str, list[str]]] = None,
) -> Callable[[DemoHandler], DemoHandler]:
    """Decorator registering a scenario function with the default registry.

    Example::

        @register_demo("singleton", "with", title="One shared connection")
        def run_with(config: DemoConfig) -> None:
            ...
    """
    def decorator(handler: DemoHandler) -> DemoHandler:
        registry.register(
            DemoDefinition(
                pattern=pattern,
                variant=variant,
                title=title,
                summary=summary,
                roles=roles or [],
                inputs=inputs or {},
            ),
            handler,
        )
        return handler

    return decorator
