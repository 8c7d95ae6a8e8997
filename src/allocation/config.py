from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from src.allocation.classify import DEFAULT_RULES, ClassRule
from src.allocation.importers.fields import FIELD_SYNONYMS
from src.allocation.normalize import DEFAULT_PLACEHOLDER_TOKENS


class ClassRuleConfig(BaseModel):
    label: str
    keywords: list[str]
    requires: list[str] = Field(default_factory=list)
    excludes: list[str] = Field(default_factory=list)


class ClassificationConfig(BaseModel):
    # Empty means the built-in rule table.
    rules: list[ClassRuleConfig] = Field(default_factory=list)


class AllocationConfig(BaseModel):
    placeholder_tokens: list[str] = Field(default_factory=lambda: list(DEFAULT_PLACEHOLDER_TOKENS))
    footer_markers: list[str] = Field(default_factory=lambda: ["data and information"])
    account_label_max: int = 40
    field_synonyms: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in FIELD_SYNONYMS.items()}
    )
    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)

    def compiled_rules(self) -> tuple[ClassRule, ...]:
        if not self.classification.rules:
            return DEFAULT_RULES
        return tuple(
            ClassRule(
                label=r.label,
                keywords=tuple(k.lower() for k in r.keywords),
                requires=tuple(k.lower() for k in r.requires),
                excludes=tuple(k.lower() for k in r.excludes),
            )
            for r in self.classification.rules
        )

    def synonyms(self) -> dict[str, tuple[str, ...]]:
        merged = {k: tuple(v) for k, v in FIELD_SYNONYMS.items()}
        merged.update({k: tuple(v) for k, v in self.field_synonyms.items()})
        return merged


def _candidate_paths() -> list[Path]:
    paths = [Path("allocation.yaml")]
    home = Path(os.path.expanduser("~"))
    paths.append(home / ".allocation" / "allocation.yaml")
    return paths


def load_allocation_config() -> tuple[AllocationConfig, Optional[str]]:
    for p in _candidate_paths():
        if p.exists():
            data = yaml.safe_load(p.read_text()) or {}
            return AllocationConfig.model_validate(data.get("allocation") or data), str(p)
    return AllocationConfig(), None
