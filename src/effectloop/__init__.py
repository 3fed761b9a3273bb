"""A declarative effect algebra for asyncio state loops.

Effects describe work that should eventually happen (a call, an awaitable, a
batch of both) as immutable data. Reducers return them alongside the next
state, and an interpreter turns them into the actions to dispatch next.

Example:

>>> import asyncio
>>> import effectloop as fx
>>>
>>> async def fetch_user(user_id: int) -> dict:
...     return {"type": "user_loaded", "id": user_id}
>>>
>>> effect = fx.batch([
...     fx.promise(fetch_user, 1),
...     fx.lift(fx.constant("ready"), lambda tag, a: (tag, a), "ui"),
... ])
>>> asyncio.run(fx.resolve(effect))
[{'type': 'user_loaded', 'id': 1}, ('ui', 'ready')]
"""

from .__version__ import __version__
from .combine import combine_reducers
from .effects import (
    AnyEffect,
    Batch,
    Build,
    Call,
    Constant,
    Effect,
    EffectType,
    InvariantError,
    Lift,
    NoEffect,
    Promise,
    UnknownEffectError,
    batch,
    build,
    call,
    constant,
    is_effect,
    is_none,
    lift,
    none,
    promise,
)
from .interpreter import Interpreter, resolve
from .loop import Loop, get_effect, get_model, is_loop, lift_state, loop
from .store import Store, install

__all__ = [
    "AnyEffect",
    "Batch",
    "Build",
    "Call",
    "Constant",
    "Effect",
    "EffectType",
    "Interpreter",
    "InvariantError",
    "Lift",
    "Loop",
    "NoEffect",
    "Promise",
    "Store",
    "UnknownEffectError",
    "__version__",
    "batch",
    "build",
    "call",
    "combine_reducers",
    "constant",
    "get_effect",
    "get_model",
    "install",
    "is_effect",
    "is_loop",
    "is_none",
    "lift",
    "lift_state",
    "loop",
    "none",
    "promise",
    "resolve",
]
