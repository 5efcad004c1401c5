#
# Blockdisp - Kinds Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import collections
import functools
from dataclasses import dataclass

# Third party ----------------------------------------------------------------------------------------------------------
import numpy as np
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from blockdisp.errors import ClassificationError, DimensionalityError, SingletonError
from blockdisp.kinds import (
    Callable,
    Container,
    Kind,
    Numeric,
    Opaque,
    Record,
    Text,
    as_value,
    classify,
    shape_of,
)


# Tests ----------------------------------------------------------------------------------------------------------------

@dataclass
class Point:
    y: float = 2.0
    x: float = 1.0


class TestClassify:
    @pytest.mark.parametrize(
        "obj, kind",
        [
            pytest.param(42, Kind.NUMERIC, id="int"),
            pytest.param(3.14, Kind.NUMERIC, id="float"),
            pytest.param(True, Kind.NUMERIC, id="bool"),
            pytest.param(np.float32(1.5), Kind.NUMERIC, id="np-float"),
            pytest.param(np.bool_(False), Kind.NUMERIC, id="np-bool"),
            pytest.param([1, 2, 3], Kind.NUMERIC, id="list-numbers"),
            pytest.param([[1, 2], [3, 4]], Kind.NUMERIC, id="list-rows"),
            pytest.param([], Kind.NUMERIC, id="list-empty"),
            pytest.param(range(4), Kind.NUMERIC, id="range"),
            pytest.param(np.eye(3), Kind.NUMERIC, id="ndarray"),
            pytest.param("abc", Kind.TEXT, id="str"),
            pytest.param(np.str_("abc"), Kind.TEXT, id="np-str"),
            pytest.param([1, "a"], Kind.CONTAINER, id="list-mixed"),
            pytest.param([[1, 2], [3]], Kind.CONTAINER, id="list-ragged"),
            pytest.param(("a", "b"), Kind.CONTAINER, id="tuple-strings"),
            pytest.param(np.array(["a", "b"]), Kind.CONTAINER, id="ndarray-str"),
            pytest.param(np.array([1 + 2j]), Kind.CONTAINER, id="ndarray-complex"),
            pytest.param({"a": 1}, Kind.RECORD, id="dict"),
            pytest.param(collections.OrderedDict(a=1), Kind.RECORD, id="ordered-dict"),
            pytest.param(Point(), Kind.RECORD, id="dataclass"),
            pytest.param(abs, Kind.CALLABLE, id="builtin"),
            pytest.param(lambda x: x, Kind.CALLABLE, id="lambda"),
            pytest.param(int, Kind.CALLABLE, id="class"),
            pytest.param(None, Kind.OPAQUE, id="none"),
            pytest.param(1 + 2j, Kind.OPAQUE, id="complex"),
            pytest.param(b"abc", Kind.OPAQUE, id="bytes"),
            pytest.param(2 ** 100, Kind.OPAQUE, id="huge-int"),
            pytest.param(object(), Kind.OPAQUE, id="object"),
        ],
    )
    def test_kind(self, obj, kind):
        assert classify(obj) is kind

    def test_value_instances_pass_through(self):
        value = Text("abc")
        assert as_value(value) is value

    def test_numeric_list_shapes(self):
        assert shape_of([1, 2, 3]) == (1, 3)
        assert shape_of([[1, 2, 3], [4, 5, 6]]) == (2, 3)
        assert shape_of([]) == (0, 0)
        assert shape_of(7) == (1, 1)

    def test_nested_lists_stay_nested(self):
        value = as_value([["hello"]])
        assert value.kind is Kind.CONTAINER
        assert value.shape == (1, 1)
        assert value.cells[0][0] == ["hello"]

    def test_mixed_rows_are_a_row_of_cells(self):
        value = as_value([[1, "a"], [2, "b"]])
        assert value.shape == (1, 2)

    def test_huge_ints_in_list_form_a_container(self):
        assert classify([1, 2 ** 100]) is Kind.CONTAINER

    def test_object_array_grid(self):
        arr = np.empty((2, 3), dtype=object)
        arr[:] = "x"
        value = as_value(arr)
        assert value.kind is Kind.CONTAINER
        assert value.shape == (2, 3)

    def test_mapping_keys_stringified_in_order(self):
        value = as_value({2: "b", 1: "a"})
        assert value.names == ("2", "1")

    def test_mapping_keys_colliding_as_str_use_repr(self):
        value = as_value({1: "a", "1": "b", "x": "c"})
        assert value.names == ("1", "'1'", "x")
        assert [v for _, v in value.fields] == ["a", "b", "c"]

    def test_mapping_keys_colliding_as_str_and_repr(self):
        class Key:
            def __repr__(self):
                return "key"

        with pytest.raises(ClassificationError, match="share the name 'key'"):
            as_value({Key(): 1, Key(): 2})

    def test_dataclass_fields_in_declaration_order(self):
        assert as_value(Point()).names == ("y", "x")

    def test_structured_array_singleton(self):
        arr = np.array([(1, 2.5)], dtype=[("a", "i4"), ("b", "f8")])
        value = as_value(arr)
        assert value.kind is Kind.RECORD
        assert value.names == ("a", "b")

    def test_structured_array_element(self):
        arr = np.array([(1, 2.5), (3, 4.5)], dtype=[("a", "i4"), ("b", "f8")])
        value = as_value(arr[1])
        assert value.kind is Kind.RECORD
        assert value.names == ("a", "b")
        assert [float(v) for _, v in value.fields] == [3.0, 4.5]

    def test_unstructured_void_is_opaque(self):
        assert classify(np.void(b"\x00\x01")) is Kind.OPAQUE

    @pytest.mark.parametrize("size", [0, 2])
    def test_structured_array_not_singleton(self, size):
        arr = np.zeros(size, dtype=[("a", "i4")])
        with pytest.raises(SingletonError, match=f"found {size} values"):
            classify(arr)

    @pytest.mark.parametrize(
        "obj",
        [
            pytest.param(np.zeros((2, 2, 2)), id="numeric-3d"),
            pytest.param(np.empty((1, 1, 1), dtype=object), id="object-3d"),
        ],
    )
    def test_more_than_two_dimensions(self, obj):
        with pytest.raises(DimensionalityError, match="3 dimensions"):
            classify(obj)

    def test_strict(self):
        with pytest.raises(ClassificationError, match="Cannot classify <NoneType>"):
            classify(None, strict=True)
        assert classify("abc", strict=True) is Kind.TEXT


class TestValues:
    def test_numeric_reshapes_low_dimensions(self):
        assert Numeric(np.float64(1.0)).shape == (1, 1)
        assert Numeric(np.arange(4)).shape == (1, 4)

    def test_numeric_rejects_non_real(self):
        with pytest.raises(TypeError, match="real or boolean dtype"):
            Numeric(np.array(["a"]))

    def test_text_escapes_line_breaks(self):
        assert Text("a\nb\tc").text == "a\\nb\\tc"
        assert Text("a\nb").shape == (1, 4)

    def test_text_requires_str(self):
        with pytest.raises(TypeError):
            Text(5)

    def test_container_rows(self):
        value = Container([[1, 2], (3, 4)])
        assert value.cells == ((1, 2), (3, 4))
        assert value.shape == (2, 2)
        assert Container([]).shape == (0, 0)

    def test_container_ragged_rows(self):
        with pytest.raises(DimensionalityError, match="equal lengths"):
            Container([[1, 2], [3]])

    def test_container_rows_must_be_sequences(self):
        with pytest.raises(TypeError, match="rows must be sequences"):
            Container(["ab"])

    def test_record_duplicate_names(self):
        with pytest.raises(ValueError, match="'a' is repeated"):
            Record((("a", 1), ("a", 2)))

    def test_record_names_must_be_str(self):
        with pytest.raises(TypeError, match="field names must be str"):
            Record(((1, "a"),))

    def test_callable_source(self):
        assert Callable(abs).source == "abs"
        assert Callable(functools.partial(max, 1)).source == "partial(max)"

    def test_callable_requires_callable(self):
        with pytest.raises(TypeError):
            Callable(3)

    def test_opaque_type_name(self):
        assert Opaque(None).type_name == "NoneType"
        assert Opaque(None).shape == (1, 1)
