import pytest

from attrmeta import Annotation


class _Payload:
    def __str__(self) -> str:
        return "payload"


PAYLOAD = _Payload()


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((), ("", "", None, False)),
        (("d",), ("d", "", None, True)),
        (("d", "r"), ("d", "r", None, True)),
        (("d", PAYLOAD), ("d", "", PAYLOAD, True)),
        (("d", False), ("d", "", None, False)),
        (("d", "r", PAYLOAD), ("d", "r", PAYLOAD, True)),
        (("d", "r", False), ("d", "r", None, False)),
        (("d", "r", PAYLOAD, False), ("d", "r", PAYLOAD, False)),
    ],
)
def test_positional_constructor_shapes(args, expected) -> None:
    annotation = Annotation(*args)

    assert (
        annotation.display,
        annotation.remarks,
        annotation.utilize,
        annotation.visible,
    ) == expected


def test_none_texts_normalise_to_empty_strings() -> None:
    annotation = Annotation(None, None)

    assert annotation.display == ""
    assert annotation.remarks == ""
    assert annotation.visible is True


def test_integer_second_value_is_utilize_not_visible() -> None:
    annotation = Annotation("d", 1)

    assert annotation.utilize == 1
    assert annotation.visible is True


def test_string_third_value_is_utilize() -> None:
    annotation = Annotation("d", "r", "extra")

    assert annotation.utilize == "extra"
    assert annotation.visible is True


def test_keyword_values_follow_display_defaults() -> None:
    annotation = Annotation("d", utilize=3, visible=False)

    assert annotation == Annotation("d", "", 3, False)


def test_keywords_without_display_are_rejected() -> None:
    with pytest.raises(TypeError):
        Annotation(remarks="r")


def test_duplicate_positional_and_keyword_value_is_rejected() -> None:
    with pytest.raises(TypeError):
        Annotation("d", "r", remarks="again")


def test_too_many_positionals_are_rejected() -> None:
    with pytest.raises(TypeError):
        Annotation("d", "r", None, True, "extra")


def test_str_lists_fields_in_fixed_order() -> None:
    assert str(Annotation("s", "sr")) == "Display: s, Visible: true, Utilize: null, Remarks: sr"
    assert str(Annotation()) == "Display: , Visible: false, Utilize: null, Remarks: "
    assert (
        str(Annotation("d", "r", PAYLOAD, False))
        == "Display: d, Visible: false, Utilize: payload, Remarks: r"
    )


def test_equality_and_hash_with_unhashable_payload() -> None:
    first = Annotation("d", ["a"])
    second = Annotation("d", ["a"])

    assert first == second
    assert hash(first) == hash(second)
    assert first != Annotation("d", ["b"])


def test_to_dict_returns_the_four_fields() -> None:
    assert Annotation("d", "r").to_dict() == {
        "display": "d",
        "remarks": "r",
        "utilize": None,
        "visible": True,
    }


def test_annotation_is_immutable() -> None:
    annotation = Annotation("d")

    with pytest.raises(AttributeError):
        annotation.display = "other"  # type: ignore[misc]
