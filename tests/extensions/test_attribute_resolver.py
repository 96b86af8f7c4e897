from dataclasses import dataclass
from enum import Enum
from typing import Annotated, ClassVar

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from attrmeta import (
    Annotation,
    Attribute,
    resolve_member_attribute,
    resolve_subject_attribute,
    resolve_type_attribute,
)


class Label(Attribute):
    allow_multiple = False

    def __init__(self, text: str) -> None:
        self.text = text


@Label("widget")
class Widget:
    size: Annotated[int, Label("size")] = 0
    _secret: Annotated[str, Label("secret")] = ""
    registry: ClassVar[Annotated[dict, Label("registry")]] = {}
    unlabelled: int = 0

    @property
    @Label("area")
    def area(self) -> int:
        return self.size * self.size

    @Label("reset")
    def reset(self) -> None:
        self.size = 0

    @Label("create")
    @staticmethod
    def create() -> "Widget":
        return Widget()


class Gadget(Widget):
    pass


@Label("point")
@dataclass(frozen=True)
class Point:
    x: Annotated[int, Label("x")] = 0


@Label("status")
class Status(Enum):
    ACTIVE: Annotated[str, Label("active")] = "active"
    RETIRED = "retired"


class Twins:
    Value: Annotated[int, Annotation("upper")] = 0
    value: Annotated[int, Annotation("lower")] = 1


def test_type_level_reads_the_class_declaration() -> None:
    assert resolve_type_attribute(Widget, Label).text == "widget"
    assert resolve_type_attribute(Point, Label).text == "point"
    assert resolve_type_attribute(Status, Label).text == "status"


def test_type_level_absence() -> None:
    assert resolve_type_attribute(None, Label) is None
    assert resolve_type_attribute(Gadget, Label) is None
    assert resolve_type_attribute(Widget, Annotation) is None


def test_subject_level_uses_class_for_instances_and_value_types() -> None:
    assert resolve_subject_attribute(Widget(), Label).text == "widget"
    assert resolve_subject_attribute(Widget, Label).text == "widget"
    assert resolve_subject_attribute(Point(3), Label).text == "point"
    assert resolve_subject_attribute(42, Label) is None


def test_subject_level_falls_back_to_declared_type() -> None:
    assert resolve_subject_attribute(None, Label, declared=Widget).text == "widget"
    assert resolve_subject_attribute(None, Label) is None


def test_subject_level_enum_value_resolves_its_constant() -> None:
    assert resolve_subject_attribute(Status.ACTIVE, Label).text == "active"
    assert resolve_subject_attribute(Status.RETIRED, Label) is None


def test_subject_level_enum_without_value_is_absent() -> None:
    assert resolve_subject_attribute(Status, Label) is None
    assert resolve_subject_attribute(None, Label, declared=Status) is None


@pytest.mark.parametrize(
    ("member", "text"),
    [
        ("size", "size"),
        ("_secret", "secret"),
        ("registry", "registry"),
        ("area", "area"),
        ("reset", "reset"),
        ("create", "create"),
        ("SIZE", "size"),
        ("_SECRET", "secret"),
        ("Area", "area"),
    ],
)
def test_member_level_searches_every_binding_category(member, text) -> None:
    assert resolve_member_attribute(Widget(), member, Label).text == text
    assert resolve_member_attribute(Widget, member, Label).text == text
    assert resolve_member_attribute(None, member, Label, declared=Widget).text == text


@pytest.mark.parametrize("member", [None, "", " ", "\t\n"])
@pytest.mark.parametrize("source", [Widget(), Widget, Point(), Status.ACTIVE, Status])
def test_blank_member_names_are_absent(source, member) -> None:
    assert resolve_member_attribute(source, member, Label) is None


def test_member_level_absence() -> None:
    assert resolve_member_attribute(Widget, "missing", Label) is None
    assert resolve_member_attribute(Widget, "unlabelled", Label) is None
    assert resolve_member_attribute(Widget, "size", Annotation) is None
    assert resolve_member_attribute(Gadget, "size", Label) is None
    assert resolve_member_attribute(None, "size", Label) is None
    assert resolve_member_attribute(Widget, " size", Label) is None


def test_member_level_on_enum_value_addresses_any_constant() -> None:
    assert resolve_member_attribute(Status.RETIRED, "active", Label).text == "active"
    assert resolve_member_attribute(Status, "ACTIVE", Label).text == "active"


def test_enum_subject_matches_member_lookup() -> None:
    for value in Status:
        assert _text(resolve_subject_attribute(value, Label)) == _text(
            resolve_member_attribute(Status, value.name, Label)
        )


def test_case_variant_members_resolve_to_one_of_them() -> None:
    found = resolve_member_attribute(Twins, "VALUE", Annotation)

    assert found in (Annotation("upper"), Annotation("lower"))


def test_kind_must_be_a_class() -> None:
    with pytest.raises(BeartypeCallHintParamViolation):
        resolve_type_attribute(Widget, "Label")


def _text(label: Label | None) -> str | None:
    return label.text if label is not None else None
