"""
Load level-graph generator configuration.
"""
import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Optional

from .core.rng import UNSPECIFIED_SEED
from .emit.targets import Target

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    levels: int = 10
    total_graphs: int = 20
    language: str = "Lisp"
    seed: Optional[int] = UNSPECIFIED_SEED
    percentage_sources: float = 0.4
    percentage_sinks: float = 0.0
    percentage_ifs: float = 0.0
    output: Optional[str] = None
    preamble: Optional[str] = None

    @property
    def type_weights(self) -> tuple[float, float]:
        return (self.percentage_sources, self.percentage_sinks)


def safe_get(d: dict, key: str, default: Any) -> Any:
    """Get dictionary value with default fallback."""
    return d[key] if key in d else default


def load_config(path: Optional[str] = None) -> GeneratorConfig:
    """Load generator settings from a JSON file, or return defaults.

    Unknown keys are ignored; missing keys keep their default. A path that
    does not exist is logged and yields the defaults.
    """
    if path and os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        defaults = GeneratorConfig()
        return GeneratorConfig(**{
            f.name: safe_get(data, f.name, getattr(defaults, f.name)) for f in fields(GeneratorConfig)
        })
    if path:
        logger.warning(f"[CONFIG] Config file not found: {path}, using defaults")
    return GeneratorConfig()


# Expected type per field; None is accepted where the flag is optional
_FIELD_TYPES = {
    "levels": (int, False),
    "total_graphs": (int, False),
    "language": (str, False),
    "seed": (int, True),
    "percentage_sources": (float, False),
    "percentage_sinks": (float, False),
    "percentage_ifs": (float, False),
    "output": (str, True),
    "preamble": (str, True),
}


def _has_type(value: Any, kind: type, optional: bool) -> bool:
    if value is None:
        return optional
    if isinstance(value, bool):
        return False
    if kind is float:
        return isinstance(value, (int, float))
    return isinstance(value, kind)


def validate_request(config: GeneratorConfig) -> list[str]:
    """Check a request before generation.

    Values of the wrong type (e.g. from a JSON config file) are reported
    first and stop the range checks.

    Returns:
        list[str]: error messages, empty when the request is valid
    """
    errors = [
        f"Invalid value for {name}: {getattr(config, name)!r}"
        for name, (kind, optional) in _FIELD_TYPES.items()
        if not _has_type(getattr(config, name), kind, optional)
    ]
    if errors:
        return errors

    if config.levels < 0:
        errors.append("Negative level!")
    if config.total_graphs < 0:
        errors.append("Negative number of graphs!")
    try:
        Target.from_name(config.language)
    except ValueError:
        errors.append("Unrecognized language! (maybe not capitalized?)")
    if config.seed is not None and config.seed < 0 and config.seed != UNSPECIFIED_SEED:
        errors.append("Negative seed!")
    src, sink, ifs = config.percentage_sources, config.percentage_sinks, config.percentage_ifs
    if (not 0 <= src <= 1) or (not 0 <= sink <= 1) or (not 0 <= ifs <= 1) or src + sink > 1:
        errors.append("Percentages for node types must be between 0 and 1. Percentages for source "
                      "and sink must add to <= 1 (the rest is implicitly the percentage for compute nodes)")
    return errors
