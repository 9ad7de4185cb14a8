"""Pydantic models for per-file translation results and the run report."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class DocumentKind(str, Enum):
    COMMAND = "command"
    AGENT = "agent"


class Converted(BaseModel):
    status: Literal["converted"] = "converted"
    kind: DocumentKind
    name: str
    source: str
    destination: str


class Skipped(BaseModel):
    status: Literal["skipped"] = "skipped"
    kind: DocumentKind
    name: str
    source: str
    reason: str


TranslationResult = Annotated[Converted | Skipped, Field(discriminator="status")]


class TranslateReport(BaseModel):
    commands: int = 0
    agents: int = 0
    results: list[TranslationResult] = []
    dry_run: bool = False
    duration: float = 0.0

    @property
    def converted(self) -> list[Converted]:
        return [r for r in self.results if isinstance(r, Converted)]

    @property
    def skipped(self) -> list[Skipped]:
        return [r for r in self.results if isinstance(r, Skipped)]

    def record(self, result: TranslationResult) -> None:
        self.results.append(result)
        if isinstance(result, Converted):
            if result.kind is DocumentKind.COMMAND:
                self.commands += 1
            else:
                self.agents += 1
