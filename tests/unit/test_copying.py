from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from corekit.common.copying import With, with_


@dataclass
class Point(With):
    x: int = 0
    y: int = 0


@dataclass
class Frame(With):
    origin: Point = field(default_factory=Point)
    tags: list[str] = field(default_factory=list)


class Settings(With, BaseModel):
    name: str = "default"
    retries: int = 1
    hosts: list[str] = Field(default_factory=lambda: ["primary"])


class LockedSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "default"


def test_with_returns_mutated_copy_and_keeps_original():
    original = Point(x=0, y=0)
    result = with_(original, lambda p: setattr(p, "x", 10))
    assert result == Point(x=10, y=0)
    assert original == Point(x=0, y=0)
    assert result is not original


def test_with_mixin_method():
    p = Point().with_(lambda p: setattr(p, "y", 5))
    assert p == Point(x=0, y=5)


def test_block_with_multiple_statements():
    def configure(p: Point) -> None:
        p.x = 10
        p.y = 100

    assert Point().with_(configure) == Point(10, 100)


def test_nested_field_mutation_leaves_original_untouched():
    frame = Frame()
    result = frame.with_(lambda f: setattr(f.origin, "x", 10))
    assert result.origin == Point(x=10, y=0)
    assert frame.origin == Point(x=0, y=0)
    assert result.origin is not frame.origin


def test_nested_container_mutation_leaves_original_untouched():
    frame = Frame(tags=["a"])
    result = frame.with_(lambda f: f.tags.append("b"))
    assert result.tags == ["a", "b"]
    assert frame.tags == ["a"]


def test_nested_failure_leaves_original_untouched():
    frame = Frame(tags=["a"])

    def half_then_fail(f: Frame) -> None:
        f.origin.x = 99
        f.tags.clear()
        raise ValueError("bad mutation")

    with pytest.raises(ValueError, match="bad mutation"):
        frame.with_(half_then_fail)
    assert frame == Frame(origin=Point(0, 0), tags=["a"])


def test_failure_propagates_and_original_untouched():
    original = Point(1, 2)

    def half_then_fail(p: Point) -> None:
        p.x = 99
        raise ValueError("bad mutation")

    with pytest.raises(ValueError, match="bad mutation"):
        with_(original, half_then_fail)
    assert original == Point(1, 2)


def test_pydantic_models_are_copied_with_model_copy():
    s = Settings()
    result = s.with_(lambda m: setattr(m, "retries", 3))
    assert result.retries == 3
    assert s.retries == 1


def test_frozen_models_surface_their_own_error():
    with pytest.raises(ValidationError):
        with_(LockedSettings(), lambda m: setattr(m, "name", "x"))


def test_pydantic_nested_fields_are_deep_copied():
    s = Settings()
    result = s.with_(lambda m: m.hosts.append("replica"))
    assert result.hosts == ["primary", "replica"]
    assert s.hosts == ["primary"]
