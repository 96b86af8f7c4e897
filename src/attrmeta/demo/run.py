from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import Any, Literal

import yaml
from beartype import beartype
from rich import box
from rich.console import Console
from rich.table import Table

from attrmeta.attributes.annotation import Annotation
from attrmeta.extensions.annotation import get_annotation
from attrmeta.utils.errors import InputValidationError

from .samples import MyClass, MyEnum, MyRecord

DemoSection = Literal["class", "record", "enum", "enum_by_name", "enum_by_value"]

_DEMO_DIR = Path(__file__).resolve().parent
_DEFAULTS_CONFIG = _DEMO_DIR / "defaults.yaml"
_SECTIONS: tuple[str, ...] = ("class", "record", "enum", "enum_by_name", "enum_by_value")
_CONSOLE = Console()


@beartype
@dataclass(frozen=True)
class DemoConfig:
    """Runtime settings for the demo harness.

    Attributes:
        title (str): Heading printed above the report.
        sections (tuple[DemoSection, ...]): Sections to render, in order.
        show_missing (bool): Whether rows resolving to no annotation are shown.
    """

    title: str
    sections: tuple[DemoSection, ...]
    show_missing: bool = True


@beartype
@dataclass(frozen=True)
class DemoRow:
    """One resolved lookup.

    Attributes:
        call (str): Readable form of the lookup that was made.
        annotation (Annotation | None): Lookup result.
    """

    call: str
    annotation: Annotation | None


@beartype
def load_demo_config(config_path: Path = _DEFAULTS_CONFIG) -> DemoConfig:
    """Load demo settings from a YAML file.

    Args:
        config_path (Path): YAML file with `title`, `sections` and
            `show_missing` keys.

    Returns:
        DemoConfig: Validated settings.
    """

    raw = _load_yaml_config(config_path)

    title = raw.get("title", "Annotation resolution demo")
    if not isinstance(title, str) or not title.strip():
        raise InputValidationError("Demo config `title` must be a non-empty string.")

    sections = raw.get("sections", list(_SECTIONS))
    if not isinstance(sections, list) or not sections:
        raise InputValidationError("Demo config `sections` must be a non-empty list.")
    for section in sections:
        if section not in _SECTIONS:
            raise InputValidationError(
                f"Unsupported demo section `{section}`. "
                f"Supported sections: {', '.join(_SECTIONS)}."
            )

    show_missing = raw.get("show_missing", True)
    if not isinstance(show_missing, bool):
        raise InputValidationError("Demo config `show_missing` must be a boolean.")

    return DemoConfig(
        title=title.strip(),
        sections=tuple(sections),
        show_missing=show_missing,
    )


@beartype
def build_section(section: DemoSection) -> tuple[DemoRow, ...]:
    """Resolve every lookup that belongs to one demo section."""

    return tuple(DemoRow(call=call, annotation=lookup()) for call, lookup in _LOOKUPS[section]())


@beartype
def render(config: DemoConfig, *, console: Console | None = None) -> None:
    """Print the configured sections as Rich tables."""

    out = console if console is not None else _CONSOLE
    out.rule(config.title)
    for section in config.sections:
        rows = build_section(section)
        table = Table(
            title=section,
            box=box.SIMPLE_HEAD,
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Lookup", overflow="fold")
        table.add_column("Result", overflow="fold")
        for row in rows:
            if row.annotation is None and not config.show_missing:
                continue
            table.add_row(
                row.call,
                str(row.annotation) if row.annotation is not None else "null",
            )
        out.print(table)


def main(argv: list[str] | None = None) -> int:
    """Render the demo report; an optional argument names a YAML config."""

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = load_demo_config(Path(args[0])) if args else load_demo_config()
    except InputValidationError as exc:
        _CONSOLE.print(f"[red]{exc}[/red]")
        return 2
    render(config)
    return 0


Lookup = tuple[str, Callable[[], Annotation | None]]


def _class_lookups() -> list[Lookup]:
    instance = MyClass("demo")
    lookups: list[Lookup] = [
        ("get_annotation(None, declared=MyClass)", lambda: get_annotation(None, declared=MyClass)),
    ]
    for member in ("my_string", "_my_field", "MY_CONST", "my_static", "describe"):
        lookups.append(
            (
                f"get_annotation(None, {member!r}, declared=MyClass)",
                _member_lookup(None, member, MyClass),
            )
        )
    lookups.append(("get_annotation(MyClass())", lambda: get_annotation(instance)))
    for member in ("MY_STRING", "_My_Field", "my_const", "My_Static"):
        lookups.append(
            (f"get_annotation(MyClass(), {member!r})", _member_lookup(instance, member))
        )
    lookups.extend(
        [
            ("get_annotation(MyClass)", lambda: get_annotation(MyClass)),
            ("get_annotation(type(MyClass()))", lambda: get_annotation(type(instance))),
            ("get_annotation(MyClass, 'my_string')", _member_lookup(MyClass, "my_string")),
        ]
    )
    return lookups


def _record_lookups() -> list[Lookup]:
    record = MyRecord()
    return [
        ("get_annotation(MyRecord())", lambda: get_annotation(record)),
        ("get_annotation(MyRecord(), 'my_string')", _member_lookup(record, "my_string")),
        ("get_annotation(MyRecord(), '_MY_FIELD')", _member_lookup(record, "_MY_FIELD")),
        ("get_annotation(MyRecord, 'my_static')", _member_lookup(MyRecord, "my_static")),
        ("get_annotation(MyRecord)", lambda: get_annotation(MyRecord)),
    ]


def _enum_lookups() -> list[Lookup]:
    value = MyEnum.VALUE_1
    return [
        ("get_annotation(MyEnum.VALUE_1)", lambda: get_annotation(value)),
        ("get_annotation(MyEnum.VALUE_1, 'VALUE_2')", _member_lookup(value, "VALUE_2")),
        ("get_annotation(MyEnum)", lambda: get_annotation(MyEnum)),
        ("get_annotation(MyEnum, 'value_3')", _member_lookup(MyEnum, "value_3")),
    ]


def _enum_by_name_lookups() -> list[Lookup]:
    return [
        (f"get_annotation(MyEnum, {name!r})", _member_lookup(MyEnum, name))
        for name in MyEnum.__members__
    ]


def _enum_by_value_lookups() -> list[Lookup]:
    return [(f"get_annotation({value})", _subject_lookup(value)) for value in MyEnum]


def _member_lookup(
    source: Any, member: str, declared: type | None = None
) -> Callable[[], Annotation | None]:
    return lambda: get_annotation(source, member, declared=declared)


def _subject_lookup(source: Any) -> Callable[[], Annotation | None]:
    return lambda: get_annotation(source)


_LOOKUPS: dict[str, Callable[[], list[Lookup]]] = {
    "class": _class_lookups,
    "record": _record_lookups,
    "enum": _enum_lookups,
    "enum_by_name": _enum_by_name_lookups,
    "enum_by_value": _enum_by_value_lookups,
}


@beartype
@cache
def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load one YAML config file and validate mapping root."""

    if not config_path.exists() or not config_path.is_file():
        raise InputValidationError(f"Missing config file: {config_path.resolve()}")

    with config_path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise InputValidationError(
            f"Config file `{config_path.name}` must contain a YAML mapping."
        )
    return loaded


if __name__ == "__main__":
    raise SystemExit(main())
