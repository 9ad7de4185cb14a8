"""Body transforms applied between extraction and serialization."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from functools import reduce


class Transform(ABC):
    @abstractmethod
    def apply(self, body: str) -> str:
        """Return the rewritten document body."""
        ...


class TransformPipeline:
    """Ordered body transforms; each one sees the previous one's output."""

    def __init__(self, transforms: Iterable[Transform] = ()):
        self.transforms: list[Transform] = list(transforms)

    def __len__(self) -> int:
        return len(self.transforms)

    def add(self, transform: Transform) -> TransformPipeline:
        self.transforms.append(transform)
        return self

    def apply(self, body: str) -> str:
        return reduce(lambda text, t: t.apply(text), self.transforms, body)
