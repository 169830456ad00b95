"""Data models for generated declarations."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from typedef_gen.targets import FLOW, Target

DEFAULT_SOURCE_URL = "https://github.com/LoganBarnett/typedef-gen"


@dataclass(frozen=True)
class SplitPoint:
    """One way of splitting a function's parameters for partial application."""

    arity: int  # total parameters of the wrapped function
    bound: int  # parameters supplied up front

    @property
    def remaining(self) -> int:
        """Number of parameters the resulting function still takes."""
        return self.arity - self.bound


@dataclass(frozen=True)
class Fragment:
    """Generated text for a single arity or (arity, split) pair."""

    arity: int
    text: str
    bound: int | None = None


@dataclass(frozen=True)
class CompoundDeclaration:
    """All fragments of one generator run, in output order."""

    kind: str  # "partial", "complement", "complement-tests"
    target: str
    max_arity: int
    separator: str
    fragments: tuple[Fragment, ...] = ()

    def to_text(self) -> str:
        """Join the fragments with the target separator."""
        return self.separator.join(f.text for f in self.fragments)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "kind": self.kind,
            "target": self.target,
            "max_arity": self.max_arity,
            "fragment_count": len(self.fragments),
            "fragments": [self._fragment_to_dict(f) for f in self.fragments],
        }

    def _fragment_to_dict(self, fragment: Fragment) -> dict:
        """Convert a fragment to a dictionary, leaving out an unset bound."""
        result = {"arity": fragment.arity, "text": fragment.text}
        if fragment.bound is not None:
            result["bound"] = fragment.bound
        return result

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


@dataclass
class GeneratorConfig:
    """Settings for one generator run."""

    max_arity: int
    target: Target = FLOW
    source_url: str = DEFAULT_SOURCE_URL
    output_root: Path = field(default_factory=Path.cwd)
