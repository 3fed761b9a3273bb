"""Pairing of reducer results with the effect they want to run next."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TypeGuard

from .effects import Effect, is_effect, none
from .util import throw_invariant


@dataclass(frozen=True, slots=True)
class Loop[S]:
    """A new state together with the effect a reducer wants resolved.

    Unpacks like a pair: ``model, effect = loop(state, none())``.
    """

    model: S
    effect: Effect[Any]

    def __iter__(self) -> Iterator[Any]:
        yield self.model
        yield self.effect


def loop[S](model: S, effect: Effect[Any], *, debug: bool = False) -> Loop[S]:
    """Pair ``model`` with ``effect``.

    Args:
        model: The next state.
        effect: The effect to resolve after the state transition.
        debug: If True, raise InvariantError when ``effect`` is not an effect.
    """
    if debug:
        throw_invariant(is_effect(effect), "Given effect is not an effect instance.", effect)
    return Loop(model, effect)


def is_loop(value: object) -> TypeGuard[Loop[Any]]:
    return isinstance(value, Loop)


def lift_state[S](value: S | Loop[S]) -> Loop[S]:
    """Return ``value`` as a loop, pairing plain states with a no-op effect."""
    if is_loop(value):
        return value
    return Loop(value, none())  # type: ignore[arg-type]


def get_model[S](value: S | Loop[S]) -> S:
    if is_loop(value):
        return value.model
    return value  # type: ignore[return-value]


def get_effect(value: object) -> Effect[Any] | None:
    if is_loop(value):
        return value.effect
    return None
