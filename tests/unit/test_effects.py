"""Unit tests for effect constructors and predicates."""

import dataclasses

import pytest

from effectloop.effects import (
    Batch,
    Build,
    Call,
    Constant,
    Effect,
    EffectType,
    Lift,
    NoEffect,
    Promise,
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


async def fetch(x: int) -> int:
    return x


def test_constructors_tag_variants():
    """Test that every constructor stamps the matching discriminant."""
    effects = {
        EffectType.NONE: none(),
        EffectType.CONSTANT: constant("a"),
        EffectType.CALL: call(str, 1),
        EffectType.PROMISE: promise(fetch, 1),
        EffectType.BATCH: batch([]),
        EffectType.BUILD: build(lambda ctx: none()),
        EffectType.LIFT: lift(none(), str),
    }
    for effect_type, effect in effects.items():
        assert effect.type is effect_type
        assert is_effect(effect)


def test_constant_keeps_action_identity():
    """Test that constant wraps the action without copying it."""
    action = {"type": "ping"}
    effect = constant(action)
    assert isinstance(effect, Constant)
    assert effect.action is action


def test_call_and_promise_do_not_invoke_factory():
    """Test that factories are stored, not called, at construction time."""
    calls: list[int] = []

    def record(x: int) -> int:
        calls.append(x)
        return x

    async def record_async(x: int) -> int:
        calls.append(x)
        return x

    assert call(record, 1, 2) == Call(record, (1, 2))
    assert promise(record_async, 3) == Promise(record_async, (3,))
    assert calls == []


def test_batch_accepts_any_iterable():
    """Test that batch stores its children as an ordered tuple."""
    children = [constant(1), none(), constant(2)]
    effect = batch(iter(children))
    assert isinstance(effect, Batch)
    assert effect.effects == tuple(children)
    assert batch([]) == Batch(())


def test_build_and_lift_payloads():
    """Test that build and lift store their payloads verbatim."""

    def factory(ctx):
        return constant(ctx)

    inner = constant("x")
    assert build(factory) == Build(factory)
    assert lift(inner, str.format, "{}-{}", "tag") == Lift(inner, str.format, ("{}-{}", "tag"))


def test_effects_are_immutable():
    """Test that effects cannot be modified after construction."""
    effect = constant("a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        effect.action = "b"  # type: ignore[misc]


def test_structural_equality():
    """Test that equal descriptions compare equal and can be hashed."""
    assert none() == none()
    assert constant(1) == constant(1)
    assert constant(1) != constant(2)
    assert batch([constant(1), none()]) == batch((constant(1), none()))
    assert len({none(), none(), constant(1)}) == 2


@pytest.mark.parametrize("value", [None, 0, False, {}, [], "", "NONE", object(), Effect()])
def test_is_effect_rejects_non_effects(value):
    """Test that is_effect reports False instead of raising for arbitrary values."""
    assert is_effect(value) is False
    assert is_none(value) is False


def test_is_none():
    """Test that is_none is only true for the no-op variant."""
    assert is_none(none())
    assert isinstance(none(), NoEffect)
    assert not is_none(constant(None))
    assert not is_none(batch([]))
