from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, ClassVar, Final

from attrmeta.attributes.annotation import Annotation


@Annotation("my-class", "my-class-remarks")
class MyClass:
    """Reference type annotated on the class and on each kind of member."""

    _my_field: Annotated[str, Annotation("my-field", "my-field-remarks")]
    MY_CONST: Final[Annotated[str, Annotation("my-const", "my-const-remarks")]] = "my-const"
    my_static: ClassVar[Annotated[str, Annotation("my-static", "my-static-remarks")]] = (
        "my-static"
    )

    def __init__(self, my_string: str = "") -> None:
        self._my_field = ""
        self._my_string = my_string

    @property
    @Annotation("my-string", "my-string-remarks")
    def my_string(self) -> str:
        return self._my_string

    @Annotation("my-method", "my-method-remarks", visible=False)
    def describe(self) -> str:
        return f"{type(self).__name__}({self._my_string!r})"


@Annotation("my-record", "my-record-remarks")
@dataclass(frozen=True)
class MyRecord:
    """Immutable value type annotated like ``MyClass``."""

    my_string: Annotated[str, Annotation("my-string", "my-string-remarks")] = ""
    _my_field: Annotated[str, Annotation("my-field", "my-field-remarks")] = ""
    my_static: ClassVar[Annotated[str, Annotation("my-static", "my-static-remarks")]] = (
        "my-static"
    )


@Annotation("my-enum", "my-enum-remarks")
class MyEnum(Enum):
    """Enumeration whose constants carry their own annotations."""

    VALUE_1: Annotated[int, Annotation("my-value-1", "my-enum-remarks", 1)] = 1
    VALUE_2: Annotated[int, Annotation("my-value-2", "my-enum-remarks", 2)] = 2
    VALUE_3: Annotated[int, Annotation("my-value-3", "my-enum-remarks", 3)] = 3
