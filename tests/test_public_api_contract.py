import inspect
from pathlib import Path

import diffkit


def test_public_api_symbol_list_is_explicit_and_stable() -> None:
    assert diffkit.__all__ == [
        "__version__",
        "Value",
        "Null",
        "Bool",
        "Number",
        "String",
        "Array",
        "Object",
        "Difference",
        "Changed",
        "Added",
        "Removed",
        "LocatedDifference",
        "DocumentDiffResult",
        "DocumentError",
        "DocumentReadError",
        "DocumentParseError",
        "calculate",
        "locate",
        "compare",
        "diff",
        "load",
        "parse_json",
        "from_python",
        "to_python",
        "stringify",
    ]


def test_public_api_function_signatures_and_annotations() -> None:
    expected_parameter_order = {
        "calculate": ("left", "right"),
        "locate": ("left", "right"),
        "compare": ("left", "right"),
        "diff": ("left", "right"),
        "load": ("path",),
    }

    for name, parameters in expected_parameter_order.items():
        function = getattr(diffkit, name)
        signature = inspect.signature(function)
        assert tuple(signature.parameters.keys()) == parameters
        assert "return" in function.__annotations__
        assert function.__doc__ is not None
        assert function.__doc__.strip() != ""


def test_core_workflow_works_via_public_api_only(tmp_path: Path) -> None:
    left_path = tmp_path / "left.json"
    right_path = tmp_path / "right.json"
    left_path.write_text('{"a": "foo", "b": "bar"}', encoding="utf-8")
    right_path.write_text('{"a": "foo"}', encoding="utf-8")

    result = diffkit.diff(left_path, right_path)
    assert result.differences == [diffkit.Removed(diffkit.Object({"b": diffkit.String("bar")}))]

    left = diffkit.load(left_path)
    assert diffkit.calculate(left, left) == []
    assert diffkit.stringify(left) == '{"a":"foo""b":"bar"}'

    assert diffkit.compare([1, 2, 3], [1, 9, 2, 3]) == [
        diffkit.Changed(diffkit.Number(2), diffkit.Number(9)),
        diffkit.Changed(diffkit.Number(3), diffkit.Number(2)),
        diffkit.Added(diffkit.Number(3)),
    ]
