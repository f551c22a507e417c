"""Scripted scenarios for every pattern.

Importing this package registers each scenario with ``core.registry.registry``.
"""

from demos import (  # noqa: F401
    singleton,
    builder,
    simple_factory,
    factory_method,
    abstract_factory,
    strategy,
    decorator,
    observer,
    state,
)
