from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar, TypeGuard


class EffectType(StrEnum):
    """Discriminant carried by every effect variant."""

    NONE = "NONE"
    CONSTANT = "CONSTANT"
    CALL = "CALL"
    PROMISE = "PROMISE"
    BATCH = "BATCH"
    BUILD = "BUILD"
    LIFT = "LIFT"


class Effect[A]:
    """Base class for all effects.

    Effects are inert descriptions of deferred work. They are only ever
    built through the constructor functions in this module and executed by
    an interpreter.
    """

    __slots__ = ()

    type: ClassVar[EffectType]


class InvariantError(Exception):
    """Exception raised when a value that is not an effect is used as one."""

    __match_args__ = ("value",)

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class UnknownEffectError(TypeError):
    """Exception raised when an interpreter is handed a value it cannot dispatch."""

    __match_args__ = ("value",)

    def __init__(self, value: Any):
        super().__init__(f"Unknown effect: {value!r}")
        self.value = value


@dataclass(frozen=True, slots=True)
class NoEffect(Effect[Any]):
    type: ClassVar[EffectType] = EffectType.NONE


@dataclass(frozen=True, slots=True)
class Constant[A](Effect[A]):
    type: ClassVar[EffectType] = EffectType.CONSTANT

    action: A


@dataclass(frozen=True, slots=True)
class Call[A](Effect[A]):
    type: ClassVar[EffectType] = EffectType.CALL

    factory: Callable[..., A]
    args: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class Promise[A](Effect[A]):
    type: ClassVar[EffectType] = EffectType.PROMISE

    factory: Callable[..., Awaitable[A]]
    args: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class Batch[A](Effect[A]):
    type: ClassVar[EffectType] = EffectType.BATCH

    effects: tuple[Effect[A], ...] = ()


@dataclass(frozen=True, slots=True)
class Build[A](Effect[A]):
    type: ClassVar[EffectType] = EffectType.BUILD

    factory: Callable[[Any], Effect[A]]


@dataclass(frozen=True, slots=True)
class Lift[A](Effect[A]):
    type: ClassVar[EffectType] = EffectType.LIFT

    effect: Effect[Any]
    factory: Callable[..., A]
    args: tuple[Any, ...] = ()


type AnyEffect = (
    NoEffect | Constant[Any] | Call[Any] | Promise[Any] | Batch[Any] | Build[Any] | Lift[Any]
)

_VARIANTS = (NoEffect, Constant, Call, Promise, Batch, Build, Lift)


def none() -> NoEffect:
    """Create a no-op effect that produces no actions."""
    return NoEffect()


def constant[T](action: T) -> Constant[T]:
    """Create an effect for an already available action.

    The action is stored as given; no copy is made.
    """
    return Constant(action)


def call[T](factory: Callable[..., T], *args: Any) -> Call[T]:
    """Create an effect that calls ``factory(*args)`` and produces its return value.

    Args:
        factory: Synchronous function returning an action.
        *args: Positional arguments passed to ``factory`` at resolution time.
    """
    return Call(factory, args)


def promise[T](factory: Callable[..., Awaitable[T]], *args: Any) -> Promise[T]:
    """Create an effect that awaits ``factory(*args)`` and produces the result.

    Args:
        factory: Function returning an awaitable (typically a coroutine function).
        *args: Positional arguments passed to ``factory`` at resolution time.
    """
    return Promise(factory, args)


def batch[T](effects: Iterable[Effect[T]]) -> Batch[T]:
    """Compose several effects into one whose actions are concatenated in order."""
    return Batch(tuple(effects))


def build[T](factory: Callable[[Any], Effect[T]]) -> Build[T]:
    """Create an effect that is only known once the store context is available.

    Args:
        factory: Called with the context passed to the interpreter; must return
                 another effect, not an action.
    """
    return Build(factory)


def lift[T](effect: Effect[Any], factory: Callable[..., T], *args: Any) -> Lift[T]:
    """Transform every action produced by ``effect``.

    Each action ``a`` is replaced by ``factory(*args, a)``. This is primarily
    useful for tagging actions so they are routed to the right reducer.
    """
    return Lift(effect, factory, args)


def is_effect(value: object) -> TypeGuard[AnyEffect]:
    """Determine whether ``value`` was created with an effect constructor."""
    return isinstance(value, _VARIANTS)


def is_none(value: object) -> TypeGuard[NoEffect]:
    return isinstance(value, NoEffect)
