"""Service wiring for the demonstration runner.

Importing this module registers the factory registry and the client with the
global container:

>>> from gof_patterns.bootstrap import container
>>> client = container.resolve(Client)
"""

from __future__ import annotations

from .client import Client
from .container import global_container as container
from .factories.registry import VariantFactoryRegistry

if not container.is_registered(VariantFactoryRegistry):
    container.register_instance(VariantFactoryRegistry, VariantFactoryRegistry())

if not container.is_registered(Client):
    container.register_singleton(Client, Client)

__all__ = ["container"]
