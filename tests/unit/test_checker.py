"""Tests for the tag-check traversal engine."""

from __future__ import annotations

from tagcheck.checker.engine import check, check_file
from tagcheck.models.diagnostics import DiagnosticList
from tagcheck.parser.loader import GoSourceLoader
from tests.conftest import SAMPLE_GO, SINGLE_STRUCT_GO


def _fields(diags: DiagnosticList) -> list[str]:
    return [d.field_name for d in diags]


def _positions(diags: DiagnosticList) -> list[tuple[str, int, int]]:
    return [(d.field_name, d.line, d.column) for d in diags]


class TestScenarios:
    def test_untagged_field_reported(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(SINGLE_STRUCT_GO, "foo.go")
        diags = check(source, frozenset())
        assert len(diags) == 1
        assert str(diags[0]) == "foo.go:Name:3:19"

    def test_exempted_struct(self, loader: GoSourceLoader) -> None:
        source = loader.load_string("package sample\n\n// notagcheck:Foo\ntype Foo struct { Name string }\n")
        assert len(check_file(source)) == 0

    def test_blank_identifier_is_a_named_field(self, loader: GoSourceLoader) -> None:
        source = loader.load_string("package p\n\ntype Bar struct {\n\t_ int\n}\n")
        assert _positions(check(source, frozenset())) == [("_", 4, 2)]

    def test_tagged_field_with_struct_type(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(
            "package p\n"
            "\n"
            "type Baz struct {\n"
            '\tInner OtherStruct `json:"inner"`\n'
            "}\n"
            "\n"
            "type OtherStruct struct {\n"
            "\tValue int\n"
            "}\n"
        )
        # OtherStruct is its own declaration and is checked on its own
        assert _positions(check(source, frozenset())) == [("Value", 8, 2)]

    def test_file_without_structs(self, loader: GoSourceLoader) -> None:
        source = loader.load_string("package p\n\nfunc main() {}\n")
        diags = check(source, frozenset())
        assert isinstance(diags, DiagnosticList)
        assert len(diags) == 0

    def test_sample_file(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(SAMPLE_GO, "account.go")
        diags = check_file(source)
        assert [str(d) for d in diags] == ["account.go:Owner:9:2", "account.go:Created:23:2"]


class TestFieldRules:
    def test_embedded_fields_never_flagged(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(
            "package p\n"
            "\n"
            'import "io"\n'
            "\n"
            "type T struct {\n"
            "\tBase\n"
            "\t*Other\n"
            "\tio.Reader\n"
            '\tTagged `json:",inline"`\n'
            "}\n"
        )
        assert len(check(source, frozenset())) == 0

    def test_tag_forms(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(
            "package p\n"
            "\n"
            "type T struct {\n"
            '\tA int `json:"a"`\n'
            '\tB int "json:\\"b\\""\n'
            "\tC int ``\n"
            "}\n"
        )
        assert len(check(source, frozenset())) == 0

    def test_multi_name_field_reports_first_name(self, loader: GoSourceLoader) -> None:
        source = loader.load_string("package p\n\ntype P struct {\n\tX, Y int\n\tZ int\n}\n")
        assert _positions(check(source, frozenset())) == [("X", 4, 2), ("Z", 5, 2)]


class TestTraversal:
    def test_nested_struct_in_exempt_struct_is_pruned(self, loader: GoSourceLoader) -> None:
        src = (
            "package p\n"
            "\n"
            "type Outer struct {\n"
            "\tInner struct {\n"
            "\t\tDeep int\n"
            "\t}\n"
            "}\n"
        )
        source = loader.load_string(src)
        assert len(check(source, frozenset({"Outer"}))) == 0
        assert _positions(check(source, frozenset())) == [("Inner", 4, 2), ("Deep", 5, 3)]

    def test_preorder_order_not_position_order(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(
            "package p\n"
            "\n"
            "type Outer struct {\n"
            "\tA struct {\n"
            "\t\tB int\n"
            "\t}\n"
            "\tC int\n"
            "}\n"
        )
        assert _fields(check(source, frozenset())) == ["A", "C", "B"]

    def test_struct_in_function_body(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(
            "package p\n"
            "\n"
            "func f() {\n"
            "\ttype local struct {\n"
            "\t\ta int\n"
            "\t}\n"
            "\t_ = local{}\n"
            "}\n"
        )
        assert _positions(check(source, frozenset())) == [("a", 5, 3)]
        assert len(check(source, frozenset({"local"}))) == 0

    def test_local_struct_with_exempt_name_is_exempt(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(
            "package p\n"
            "\n"
            "// notagcheck:Foo\n"
            "type Foo struct {\n"
            '\tA int `json:"a"`\n'
            "}\n"
            "\n"
            "func f() {\n"
            "\ttype Foo struct {\n"
            "\t\tb int\n"
            "\t}\n"
            "}\n"
        )
        assert len(check_file(source)) == 0

    def test_anonymous_structs(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(
            "package p\n"
            "\n"
            "var cfg struct { Port int }\n"
            "\n"
            "func g(opts struct{ Debug bool }) {}\n"
        )
        assert _positions(check(source, frozenset())) == [("Port", 3, 18), ("Debug", 5, 21)]

    def test_grouped_type_declarations(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(
            "package p\n"
            "\n"
            "type (\n"
            "\tA struct{ X int }\n"
            "\tB struct{ Y int }\n"
            ")\n"
        )
        assert _fields(check(source, frozenset())) == ["X", "Y"]
        assert _fields(check(source, frozenset({"A"}))) == ["Y"]

    def test_alias_and_generic_declarations(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(
            "package p\n"
            "\n"
            "type Box[T any] struct {\n"
            "\tValue T\n"
            "}\n"
            "\n"
            "type Pair = struct {\n"
            "\tLeft int\n"
            "}\n"
        )
        assert _fields(check(source, frozenset())) == ["Value", "Left"]
        assert _fields(check(source, frozenset({"Box", "Pair"}))) == []

    def test_exemption_of_non_struct_name_prunes_nothing(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(
            "package p\n"
            "\n"
            "type ID int\n"
            "\n"
            "type Row struct {\n"
            "\tKey ID\n"
            "}\n"
        )
        assert _fields(check(source, frozenset({"ID", "Missing"}))) == ["Key"]


class TestIdempotence:
    def test_repeat_check_is_identical(self, loader: GoSourceLoader) -> None:
        source = loader.load_string(SAMPLE_GO)
        first = check_file(source)
        second = check_file(source)
        assert first == second
        assert len(first) == 2

    def test_custom_marker(self, loader: GoSourceLoader) -> None:
        source = loader.load_string("package p\n\n// skiptags:Foo\ntype Foo struct { Name string }\n")
        assert len(check_file(source, marker="skiptags")) == 0
        assert len(check_file(source)) == 1
