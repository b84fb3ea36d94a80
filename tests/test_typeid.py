import typing
from typing import Callable, Optional

import pytest

from entropycore.hashing import string_hash
from entropycore.strong_alias import StrongAlias
from entropycore.typeid import (
    INVALID_TYPE_ID,
    TypeId,
    make_type_id_from_type_name,
    make_type_name,
    make_type_name_from_raw_name,
    make_type_name_no_template_params,
    type_id_of,
    type_name_of,
)


class Widget:
    pass


def test_raw_name_normalisation():
    assert make_type_name_from_raw_name("ns::__2::pair<int, float>") == "ns::pair<int,float>"


def test_raw_name_without_markers_unchanged():
    assert make_type_name_from_raw_name("plain") == "plain"


def test_no_template_params_strips_from_first_bracket():
    assert make_type_name_no_template_params("Foo<Bar<int>>") == "Foo"


def test_no_template_params_without_bracket():
    assert make_type_name_no_template_params("Foo") == "Foo"


def test_type_id_is_strong_alias_over_int():
    tid = TypeId(7)
    assert isinstance(tid, StrongAlias)
    assert tid == 7
    assert tid.value == 7


def test_invalid_type_id_is_zero():
    assert INVALID_TYPE_ID == 0
    assert INVALID_TYPE_ID == TypeId(0)


def test_type_id_from_name_matches_hash():
    assert make_type_id_from_type_name("Widget") == string_hash("Widget")


def test_empty_name_yields_invalid_id():
    assert make_type_id_from_type_name("") == INVALID_TYPE_ID


def test_builtin_name():
    assert make_type_name(int) == "int"


def test_user_class_name_includes_module():
    assert make_type_name(Widget) == f"{Widget.__module__}.Widget"


def test_generic_name():
    assert make_type_name(list[int]) == "list<int>"


def test_generic_params_joined_with_comma_space():
    assert make_type_name(dict[str, int]) == "dict<str, int>"


def test_nested_generic():
    assert make_type_name(list[dict[str, int]]) == "list<dict<str, int>>"


def test_none_type_name():
    assert make_type_name(None) == make_type_name(type(None))
    assert make_type_name(None) == "None"


def test_callable_name():
    assert make_type_name(Callable[[int, str], bool]) == "bool (int, str)"


def test_optional_and_union_pipe_agree():
    assert make_type_name(Optional[int]) == make_type_name(int | None)
    assert make_type_name(int | None).startswith("Union<")


def test_string_argument_treated_as_raw_name():
    assert make_type_name("a::__2::b") == make_type_name_from_raw_name("a::__2::b")


def test_annotated_uses_inner_type():
    assert make_type_name(typing.Annotated[int, "meta"]) == make_type_name(int)


def test_non_type_raises():
    with pytest.raises(TypeError):
        make_type_name(5)


def test_type_name_of_matches_make_type_name():
    for tp in (int, Widget, list[int], Callable[..., str]):
        assert type_name_of(tp) == make_type_name(tp)


def test_type_name_of_repeated_calls_agree():
    expected = f"{Widget.__module__}.Widget"
    names = [type_name_of(Widget) for _ in range(3)]
    assert names == [expected] * 3


def test_type_id_of_consistent_with_name():
    for tp in (int, str, Widget, dict[str, int]):
        assert type_id_of(tp) == make_type_id_from_type_name(make_type_name(tp))


def test_type_ids_distinguish_types():
    ids = {type_id_of(tp) for tp in (int, str, float, Widget, list[int], list[str])}
    assert len(ids) == 6


def test_type_id_of_is_hash_of_name():
    assert type_id_of(list[int]) == string_hash("list<int>")
    assert type_id_of(int) == string_hash("int")