from diffpack.core import Number, Object, String, from_python
from diffpack.diff import Added, Changed, LocatedDifference, Removed, calculate, locate


def test_locate_pairs_records_with_json_pointers() -> None:
    left = from_python({"service": {"port": 8080}, "hosts": ["a", "b"], "owner": "ops"})
    right = from_python({"service": {"port": 9090}, "hosts": ["a", "b", "c"], "region": "eu"})

    located = locate(left, right)

    assert located == [
        LocatedDifference("/hosts/2", Added(String("c"))),
        LocatedDifference("/owner", Removed(Object({"owner": String("ops")}))),
        LocatedDifference("/region", Added(Object({"region": String("eu")}))),
        LocatedDifference("/service/port", Changed(Number(8080), Number(9090))),
    ]


def test_locate_returns_the_same_records_as_calculate() -> None:
    left = from_python({"a": [1, 2, 3], "b": {"c": None}, "d": True})
    right = from_python({"a": [1, 9], "b": {"c": 0}, "e": False})

    assert [entry.difference for entry in locate(left, right)] == calculate(left, right)


def test_root_change_has_empty_pointer() -> None:
    assert locate(from_python(1), from_python("1")) == [
        LocatedDifference("", Changed(Number(1), String("1")))
    ]


def test_pointer_tokens_are_escaped() -> None:
    located = locate(from_python({"a/b": {"m~n": 1}}), from_python({"a/b": {"m~n": 2}}))

    assert [entry.path for entry in located] == ["/a~1b/m~0n"]


def test_located_difference_serializes_path_and_record() -> None:
    entry = LocatedDifference("/x", Removed(Object({"x": Number(1)})))

    assert entry.to_dict() == {"path": "/x", "kind": "removed", "value": {"x": 1}}
