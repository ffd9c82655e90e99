"""Registry module — baseline hashes and hunk snapshots per generated file."""

from regen_engine.registry.hashing import content_hash
from regen_engine.registry.loader import load_registry, save_registry
from regen_engine.registry.store import GenerationRegistry, RegistryEntry

__all__ = [
    "content_hash",
    "load_registry",
    "save_registry",
    "GenerationRegistry",
    "RegistryEntry",
]
