from pathlib import Path

import pytest
from rich.console import Console

from attrmeta import InputValidationError
from attrmeta.demo.run import DemoConfig, build_section, load_demo_config, main, render


def test_default_config_runs_every_section() -> None:
    config = load_demo_config()

    assert config.title == "Annotation resolution demo"
    assert config.sections == ("class", "record", "enum", "enum_by_name", "enum_by_value")
    assert config.show_missing is True


def test_custom_config(tmp_path: Path) -> None:
    config_path = tmp_path / "demo.yaml"
    config_path.write_text("title: Enums\nsections: [enum_by_value]\nshow_missing: false\n")

    assert load_demo_config(config_path) == DemoConfig(
        title="Enums", sections=("enum_by_value",), show_missing=False
    )


@pytest.mark.parametrize(
    "content",
    [
        "- not a mapping\n",
        "sections: [unknown]\n",
        "sections: []\n",
        "title: ''\n",
        "show_missing: sometimes\n",
    ],
)
def test_invalid_config(tmp_path: Path, content: str) -> None:
    config_path = tmp_path / "demo.yaml"
    config_path.write_text(content)

    with pytest.raises(InputValidationError):
        load_demo_config(config_path)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(InputValidationError):
        load_demo_config(tmp_path / "absent.yaml")


def test_class_section_resolves_every_member_shape() -> None:
    rows = build_section("class")
    displays = {
        row.call: row.annotation.display if row.annotation is not None else None for row in rows
    }

    assert displays["get_annotation(None, declared=MyClass)"] == "my-class"
    assert displays["get_annotation(None, '_my_field', declared=MyClass)"] == "my-field"
    assert displays["get_annotation(MyClass(), 'MY_STRING')"] == "my-string"
    assert displays["get_annotation(MyClass(), 'my_const')"] == "my-const"
    assert displays["get_annotation(MyClass(), 'My_Static')"] == "my-static"
    assert displays["get_annotation(type(MyClass()))"] == "my-class"


def test_enum_loops_agree() -> None:
    by_name = [row.annotation for row in build_section("enum_by_name")]
    by_value = [row.annotation for row in build_section("enum_by_value")]

    assert by_name == by_value
    assert [annotation.utilize for annotation in by_value] == [1, 2, 3]


def test_render_prints_tables() -> None:
    console = Console(record=True, width=200)
    render(
        DemoConfig(title="Demo", sections=("record", "enum"), show_missing=True),
        console=console,
    )

    text = console.export_text()
    assert "Demo" in text
    assert "my-record" in text
    assert "Display: my-value-1, Visible: true, Utilize: 1, Remarks: my-enum-remarks" in text


def test_main_reports_invalid_config(tmp_path: Path) -> None:
    assert main([str(tmp_path / "absent.yaml")]) == 2
