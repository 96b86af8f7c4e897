from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from beartype import beartype

from .base import Attribute

_MISSING: Any = object()


@beartype
@dataclass(frozen=True, init=False)
class Annotation(Attribute):
    """Human-readable description of a class, member or enum constant.

    Construction mirrors eight positional shapes that all funnel into
    ``(display, remarks, utilize, visible)``:

    - ``Annotation()``: empty texts, ``visible=False``.
    - ``Annotation(display)``: ``visible=True``.
    - ``Annotation(display, remarks)`` when the second value is a ``str``.
    - ``Annotation(display, visible)`` when the second value is a ``bool``.
    - ``Annotation(display, utilize)`` for any other second value.
    - ``Annotation(display, remarks, visible)`` when the third value is a
      ``bool``, ``Annotation(display, remarks, utilize)`` otherwise.
    - ``Annotation(display, remarks, utilize, visible)``.

    Only the argument-less form hides the element; every form that supplies a
    display defaults ``visible`` to ``True``. ``remarks``, ``utilize`` and
    ``visible`` may also be given as keywords once a display is supplied.

    Attributes:
        display (str): Label shown for the element. Never ``None``.
        remarks (str): Longer description. Never ``None``.
        utilize (Any | None): Opaque payload, often the enum value itself.
        visible (bool): Whether UI code should show the element.
    """

    allow_multiple: ClassVar[bool] = False

    display: str
    remarks: str
    utilize: Any
    visible: bool

    def __init__(
        self,
        display: Any = _MISSING,
        *args: Any,
        remarks: Any = _MISSING,
        utilize: Any = _MISSING,
        visible: Any = _MISSING,
    ) -> None:
        keywords = {
            key: value
            for key, value in (
                ("remarks", remarks),
                ("utilize", utilize),
                ("visible", visible),
            )
            if value is not _MISSING
        }
        if display is _MISSING:
            if args or keywords:
                raise TypeError("Annotation() requires `display` before other values.")
            self._assign(display=None, remarks=None, utilize=None, visible=False)
            return

        supplied = _positional_values(args)
        for key, value in keywords.items():
            if key in supplied:
                raise TypeError(f"Annotation() got multiple values for `{key}`.")
            supplied[key] = value

        self._assign(
            display=display,
            remarks=supplied.get("remarks"),
            utilize=supplied.get("utilize"),
            visible=supplied.get("visible", True),
        )

    def _assign(
        self,
        *,
        display: str | None,
        remarks: str | None,
        utilize: Any,
        visible: bool,
    ) -> None:
        object.__setattr__(self, "display", display if display is not None else "")
        object.__setattr__(self, "remarks", remarks if remarks is not None else "")
        object.__setattr__(self, "utilize", utilize)
        object.__setattr__(self, "visible", visible)

    def __hash__(self) -> int:
        return hash((type(self), self.display, self.remarks, self.visible))

    def __str__(self) -> str:
        return (
            f"Display: {_render(self.display)}, "
            f"Visible: {str(self.visible).lower()}, "
            f"Utilize: {_render(self.utilize)}, "
            f"Remarks: {_render(self.remarks)}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the four annotation fields as a plain mapping."""

        return {
            "display": self.display,
            "remarks": self.remarks,
            "utilize": self.utilize,
            "visible": self.visible,
        }


def _positional_values(args: tuple[Any, ...]) -> dict[str, Any]:
    if len(args) > 3:
        raise TypeError(
            f"Annotation() takes at most 4 positional arguments ({len(args) + 1} given)."
        )
    if not args:
        return {}
    if len(args) == 1:
        (value,) = args
        if value is None or isinstance(value, str):
            return {"remarks": value}
        if isinstance(value, bool):
            return {"visible": value}
        return {"utilize": value}
    if len(args) == 2:
        remarks, value = args
        if isinstance(value, bool):
            return {"remarks": remarks, "visible": value}
        return {"remarks": remarks, "utilize": value}
    remarks, utilize, visible = args
    return {"remarks": remarks, "utilize": utilize, "visible": visible}


def _render(value: Any) -> str:
    return "null" if value is None else str(value)
