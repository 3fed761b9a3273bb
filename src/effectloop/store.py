"""A minimal host update loop that feeds resolved actions back into a reducer."""

import asyncio
import logging
import warnings
from collections.abc import Callable
from typing import Any

from .combine import Reducer
from .effects import Effect, none
from .interpreter import Interpreter
from .loop import get_effect, get_model

logger = logging.getLogger(__name__)

INIT_ACTION = {"type": "@@effectloop/INIT"}

type Listener = Callable[[], None]


def _action_name(action: Any) -> str:
    if isinstance(action, dict) and "type" in action:
        return str(action["type"])
    return type(action).__name__


class Store:
    """Hold the current state and run the effects returned by the reducer.

    The store is the context handed to ``build`` effects, so their factories
    can read ``store.state`` when deciding what to do.

    Args:
        reducer: ``reducer(state, action)`` returning a new state or a ``Loop``.
        initial_state: The starting state, optionally a ``Loop`` whose effect is
                       run by ``start`` (or ``install``).
        debug: Enable effect validation in the interpreter.
    """

    def __init__(self, reducer: Reducer, initial_state: Any, *, debug: bool = False):
        self._reducer = reducer
        self._interpreter = Interpreter(debug=debug)
        self._state = get_model(initial_state)
        effect = get_effect(initial_state)
        self._initial_effect = none() if effect is None else effect
        self._listeners: list[Listener] = []

    @property
    def state(self) -> Any:
        return self._state

    def get_state(self) -> Any:
        return self._state

    @property
    def interpreter(self) -> Interpreter:
        return self._interpreter

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` to be called after every state transition.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                warnings.warn(f"Listener {listener!r} is not subscribed.", RuntimeWarning)

        return unsubscribe

    def replace_reducer(self, reducer: Reducer) -> None:
        self._reducer = reducer

    async def start(self) -> None:
        """Run the effect carried by the initial state, once."""
        effect, self._initial_effect = self._initial_effect, none()
        await self.run_effect(INIT_ACTION, effect)

    async def dispatch(self, action: Any) -> None:
        """Apply ``action`` and run the resulting effect to completion.

        Every action produced by the effect is dispatched in turn, concurrently,
        and this coroutine finishes once all of them have.
        """
        logger.debug("Dispatching %s", _action_name(action))
        result = self._reducer(self._state, action)
        self._state = get_model(result)
        for listener in list(self._listeners):
            listener()
        effect = get_effect(result)
        await self.run_effect(action, none() if effect is None else effect)

    async def run_effect(self, origin: Any, effect: Effect[Any]) -> None:
        try:
            actions = await self._interpreter.resolve(effect, self)
        except Exception:
            logger.exception(
                "Effect returned for action %s failed; effects should not raise.",
                _action_name(origin),
            )
            raise
        await asyncio.gather(*(self.dispatch(action) for action in actions))


async def install(reducer: Reducer, initial_state: Any, *, debug: bool = False) -> Store:
    """Create a store for ``reducer`` and run the initial effect.

    Args:
        reducer: ``reducer(state, action)`` returning a new state or a ``Loop``.
        initial_state: A plain state, or a ``Loop`` whose effect should run on
                       startup.
        debug: Enable effect validation in the interpreter.

    Returns:
        The store, after the initial effect and every action it produced have
        been dispatched.
    """
    store = Store(reducer, initial_state, debug=debug)
    await store.start()
    return store
