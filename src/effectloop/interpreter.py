import asyncio
from typing import Any

from .effects import (
    Batch,
    Build,
    Call,
    Constant,
    Effect,
    Lift,
    NoEffect,
    Promise,
    UnknownEffectError,
    is_effect,
)
from .util import flatten, throw_invariant


class Interpreter:
    """Resolve effect trees into the actions they produce.

    Args:
        debug: If True, every effect reaching the interpreter is checked with
               ``is_effect`` first and an ``InvariantError`` is raised for
               anything else. The check is skipped when False.
    """

    def __init__(self, *, debug: bool = False):
        self._debug = debug

    @property
    def debug(self) -> bool:
        return self._debug

    def __repr__(self) -> str:
        return f"Interpreter(debug={self._debug})"

    async def resolve(self, effect: Effect[Any], context: Any = None) -> list[Any]:
        """Run an effect and return the actions it produces, in order.

        Args:
            effect: The effect to resolve.
            context: The store or other state handed to ``build`` factories. It
                     is passed unchanged to every nested level of the tree.

        Returns:
            The list of produced actions. Nested batch results are concatenated
            in declaration order, regardless of which branch finished first.

        Raises:
            InvariantError: In debug mode, if ``effect`` is not an effect.
            UnknownEffectError: If ``effect`` matches none of the known variants.
            Exception: Whatever a ``call``, ``promise`` or ``build`` factory raises
                       is propagated unchanged.
        """
        if self._debug:
            throw_invariant(is_effect(effect), "Given effect is not an effect instance.", effect)

        match effect:
            case NoEffect():
                return []
            case Constant(action):
                return [action]
            case Call(factory, args):
                return [factory(*args)]
            case Promise(factory, args):
                return [await factory(*args)]
            case Batch(effects):
                results = await asyncio.gather(*(self.resolve(e, context) for e in effects))
                return flatten(results)
            case Build(factory):
                return await self.resolve(factory(context), context)
            case Lift(inner, factory, args):
                actions = await self.resolve(inner, context)
                return [factory(*args, action) for action in actions]
            case _:
                raise UnknownEffectError(effect)


async def resolve(effect: Effect[Any], context: Any = None, *, debug: bool = False) -> list[Any]:
    """Resolve ``effect`` with a one-off interpreter. See ``Interpreter.resolve``."""
    return await Interpreter(debug=debug).resolve(effect, context)
