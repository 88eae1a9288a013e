"""Assembly of several wrapped units into one benchmark suite."""
from __future__ import annotations
import logging
from typing import Sequence, Union

from ..core.types import CodeGraph
from .base import Emitter
from .targets import Target

logger = logging.getLogger(__name__)

UNIT_SEPARATOR = "\n\n"


def assemble_suite(target: Union[Target, Emitter], graphs: Sequence[CodeGraph]) -> str:
    """Concatenate the wrapped text of `graphs`, in order.

    Unit i is named emitter.unit_name(i) and all its identifiers carry
    emitter.unit_prefix(i), so no name is shared by two units.
    """
    emitter = target.emitter if isinstance(target, Target) else target
    units = [
        emitter.emit_wrapped(graph, name=emitter.unit_name(i), prefix=emitter.unit_prefix(i))
        for i, graph in enumerate(graphs)
    ]
    logger.debug(f"[SUITE] {len(units)} {emitter.selector} units, "
                 f"{sum(len(g) for g in graphs)} nodes total")
    return UNIT_SEPARATOR.join(units)
