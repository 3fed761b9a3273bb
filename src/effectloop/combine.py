from collections.abc import Callable, Mapping
from typing import Any

from .effects import Effect
from .loop import Loop, get_effect, get_model, is_loop, loop
from .util import optimize_batch

type Reducer = Callable[[Any, Any], Any]


def _get_item(state: Any, key: str) -> Any:
    return state.get(key)


def _set_item(state: Any, key: str, value: Any) -> Any:
    return {**state, key: value}


def combine_reducers(
    reducers: Mapping[str, Reducer],
    root_state: Any = None,
    accessor: Callable[[Any, str], Any] | None = None,
    modifier: Callable[[Any, str, Any], Any] | None = None,
) -> Callable[[Any, Any], Loop[Any]]:
    """Combine several reducers, each owning one key of the state, into one.

    Every child reducer receives its slice of the state and the action. The
    effects returned by children are gathered into a single effect of the
    combined loop, in the order the reducers were given.

    Args:
        reducers: Mapping from state key to the reducer that owns it.
        root_state: State used when the combined reducer receives ``None``.
                    Defaults to an empty dict.
        accessor: ``accessor(state, key)`` reads a child state. Defaults to
                  ``state.get(key)``.
        modifier: ``modifier(state, key, value)`` returns a new state with the
                  child replaced. Defaults to a shallow dict copy.

    Returns:
        A reducer that always returns a ``Loop``. Its model is the original
        state object when no child state changed (compared by identity).
    """
    get_child = accessor if accessor is not None else _get_item
    set_child = modifier if modifier is not None else _set_item

    def combined(state: Any, action: Any) -> Loop[Any]:
        if state is None:
            state = {} if root_state is None else root_state

        has_changed = False
        effects: list[Effect[Any]] = []
        model = {} if root_state is None else root_state
        for key, reducer in reducers.items():
            previous = get_child(state, key)
            result = reducer(previous, action)
            if is_loop(result):
                effects.append(get_effect(result))  # type: ignore[arg-type]
                result = get_model(result)
            has_changed = has_changed or result is not previous
            model = set_child(model, key, result)

        return loop(model if has_changed else state, optimize_batch(effects))

    return combined
