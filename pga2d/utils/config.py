"""
Configuration management for PGA2D.

Provides a configuration class holding the numeric tolerances used by
the geometry queries, with JSON load/save helpers. The library never
reads a config implicitly: pass ``config.eps`` to the queries that take
an ``eps`` keyword, and ``config.eps_norm`` to ``normalized``,
``inverse``, ``cartesian``, ``dehomogenized`` and ``unit``.
"""

import json
from dataclasses import dataclass, field, fields, replace, asdict
from typing import Dict, Any
from pathlib import Path

from ..core.constants import DEFAULT_EPS, DEFAULT_EPS_NORM


@dataclass
class Config:
    """
    Configuration for PGA2D computations.

    Attributes:
        eps: Relative tolerance for geometric comparisons against zero
        eps_norm: Magnitude below which elements count as null or ideal
        extra: Application keys (plot bounds, scene names) kept verbatim
    """

    eps: float = DEFAULT_EPS
    eps_norm: float = DEFAULT_EPS_NORM
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("eps", "eps_norm"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    def to_dict(self) -> Dict[str, Any]:
        """Flat dictionary; extra keys sit next to the tolerances."""
        data = asdict(self)
        data.update(data.pop("extra"))
        return data

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """
        Create config from a flat or nested dictionary.

        Keys that are not tolerances end up in ``extra``.
        """
        data = dict(config_dict)
        extra = dict(data.pop("extra", {}))
        tolerances = {f.name: data.pop(f.name) for f in fields(cls) if f.name in data}
        extra.update(data)
        return cls(extra=extra, **tolerances)

    def update(self, **kwargs) -> 'Config':
        """Return a new config; unknown keys are merged into ``extra``."""
        names = {f.name for f in fields(self)} - {"extra"}
        known = {k: v for k, v in kwargs.items() if k in names}
        extra = {**self.extra, **{k: v for k, v in kwargs.items() if k not in names}}
        return replace(self, extra=extra, **known)


def load_config(filepath: str) -> Config:
    """Read a Config from a JSON file written by ``save_config``."""
    return Config.from_dict(json.loads(Path(filepath).read_text()))


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Parent directories are created as needed.
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2))
