from collections.abc import Iterable, Sequence
from typing import Any

from .effects import AnyEffect, Effect, InvariantError, batch, none


def flatten[T](nested: Iterable[Sequence[T]]) -> list[T]:
    """Concatenate a sequence of sequences into a single list, keeping order."""
    return [item for group in nested for item in group]


def throw_invariant(condition: Any, message: str, value: Any = None) -> None:
    """Raise InvariantError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise InvariantError(message, value)


def optimize_batch(effects: Sequence[Effect[Any]]) -> AnyEffect:
    """Combine effects into the smallest equivalent effect.

    An empty sequence becomes a no-op and a single effect is returned as is;
    anything longer is wrapped in a batch.
    """
    match len(effects):
        case 0:
            return none()
        case 1:
            return effects[0]  # type: ignore[return-value]
        case _:
            return batch(effects)
