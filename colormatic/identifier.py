"""
Namespaced identifiers ("namespace:path"). Registries and resources are keyed by these.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_NAMESPACE = "minecraft"

_NAMESPACE_RE = re.compile(r"[a-z0-9_.-]+")
_PATH_RE = re.compile(r"[a-z0-9_.\-/]+")


class InvalidIdentifierError(ValueError):
    """Text is not a valid namespaced identifier."""


@dataclass(frozen=True, order=True)
class Identifier:
    namespace: str
    path: str

    def __post_init__(self) -> None:
        if not _NAMESPACE_RE.fullmatch(self.namespace):
            raise InvalidIdentifierError(f"Non [a-z0-9_.-] character in namespace of identifier: {self}")
        if not _PATH_RE.fullmatch(self.path):
            raise InvalidIdentifierError(f"Non [a-z0-9/._-] character in path of identifier: {self}")

    @classmethod
    def parse(cls, text: str) -> Identifier:
        """Parse "ns:path" or bare "path" (default namespace)."""
        if not isinstance(text, str):
            raise InvalidIdentifierError(f"Identifier must be a string, got {type(text).__name__}")
        namespace, sep, path = text.partition(":")
        if not sep:
            return cls(DEFAULT_NAMESPACE, text)
        return cls(namespace or DEFAULT_NAMESPACE, path)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.path}"
