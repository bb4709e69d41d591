"""
Configuration management for exact-vecmath.

Provides a configuration class for float export and diagnostic printing.
The algebra itself takes no configuration: exact results never depend on it.
"""

import json
from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, Optional, Union
from pathlib import Path

from ..core.constants import (
    DEFAULT_COLUMN_SEPARATOR,
    DEFAULT_DEVICE,
    DEFAULT_DTYPE,
    DEFAULT_INDENT,
)


@dataclass
class Config:
    """
    Configuration for exact-vecmath interop and diagnostics.

    Attributes:
        # Float interop
        dtype: Floating dtype name for exported tensors/arrays ('float32', 'float64')
        device: Torch device for exported tensors ('cpu', 'cuda', 'mps')
        max_denominator: If set, floats imported from tensors/arrays are
            approximated by the closest fraction with at most this denominator;
            None keeps the exact binary value

        # Diagnostic printing
        column_separator: Text placed between entries of a printed row
        indent: Prefix of every printed row
    """

    # Float interop
    dtype: str = DEFAULT_DTYPE
    device: str = DEFAULT_DEVICE
    max_denominator: Optional[int] = None

    # Diagnostic printing
    column_separator: str = DEFAULT_COLUMN_SEPARATOR
    indent: str = DEFAULT_INDENT

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.dtype not in ('float16', 'float32', 'float64'):
            raise ValueError(
                f"dtype must be one of float16, float32, float64, got {self.dtype}"
            )
        if self.max_denominator is not None and self.max_denominator < 1:
            raise ValueError(
                f"max_denominator must be a positive int, got {self.max_denominator}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict of every field, extra included, ready for JSON."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Build a config; keys that are not fields are kept in extra."""
        known_fields = {f.name for f in fields(cls)} - {'extra'}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = dict(config_dict.get('extra', {}))
        extra_kwargs.update(
            {k: v for k, v in config_dict.items() if k not in known_fields and k != 'extra'}
        )
        return cls(**known_kwargs, extra=extra_kwargs)

    def update(self, **kwargs) -> 'Config':
        """Copy with the given fields replaced; re-runs validation."""
        return Config.from_dict({**self.to_dict(), **kwargs})


DEFAULT_CONFIG = Config()


def load_config(filepath: Union[str, Path]) -> Config:
    """Read a config written by save_config."""
    with open(filepath, 'r') as f:
        return Config.from_dict(json.load(f))


def save_config(config: Config, filepath: Union[str, Path]) -> None:
    """Write config as indented JSON, creating parent directories."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
