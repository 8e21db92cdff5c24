# -*- coding: utf-8 -*-
"""Go 签名提取测试（需要 tree-sitter-go）"""

import pytest

pytest.importorskip("tree_sitter_go")

from glee.glee_signature.languages.go_language import GoLanguageSupport  # noqa: E402


@pytest.fixture(scope="module")
def extractor():
    extractor = GoLanguageSupport().create_extractor()
    assert extractor is not None
    return extractor


class TestGoExtraction:
    """测试 Go 函数与方法的签名提取"""

    def test_declaration_order(self, extractor, go_source):
        records = extractor.extract(go_source, "sample.go")
        assert [r.name for r in records] == ["Foo", "NoArgs", "Single", "Bytes", "Load"]

    def test_parenthesized_results(self, extractor, go_source):
        foo = extractor.extract(go_source, "sample.go")[0]
        assert foo.path == "sample.go"
        assert foo.location == (4, 0)
        assert foo.args == ("int", "string")
        assert foo.rets == ("bool", "error")

    def test_no_params_no_results(self, extractor, go_source):
        no_args = extractor.extract(go_source, "sample.go")[1]
        assert no_args.args == ()
        assert no_args.rets == ()

    def test_single_pointer_result(self, extractor, go_source):
        single = extractor.extract(go_source, "sample.go")[2]
        assert single.args == ("Path",)
        assert single.rets == ("*DrivePath",)

    def test_slice_types_are_opaque(self, extractor, go_source):
        data = extractor.extract(go_source, "sample.go")[3]
        assert data.args == ("[]byte",)
        assert data.rets == ("[]byte",)

    def test_method_receiver_excluded(self, extractor, go_source):
        load = extractor.extract(go_source, "sample.go")[4]
        assert load.location == (20, 0)
        assert load.args == ("int",)
        assert load.rets == ("Item", "error")

    def test_grouped_parameters_share_one_type(self, extractor):
        source = b"package p\n\nfunc Add(a, b int) int { return a + b }\n"
        (record,) = extractor.extract(source, "add.go")
        assert record.args == ("int",)
        assert record.rets == ("int",)

    def test_named_results(self, extractor):
        source = b"package p\n\nfunc Div(a float64, b float64) (q float64, err error) { return }\n"
        (record,) = extractor.extract(source, "div.go")
        assert record.args == ("float64", "float64")
        assert record.rets == ("float64", "error")

    def test_composite_single_results(self, extractor):
        source = (
            b"package p\n\n"
            b"func M() map[string]int { return nil }\n"
            b"func Q() pkg.Type { return pkg.Type{} }\n"
        )
        records = extractor.extract(source, "c.go")
        assert records[0].rets == ("map[string]int",)
        assert records[1].rets == ("pkg.Type",)

    def test_empty_source(self, extractor):
        assert extractor.extract(b"", "empty.go") == []
        assert extractor.extract(b"  \n\t", "empty.go") == []

    def test_syntax_error_does_not_hide_other_functions(self, extractor):
        source = (
            b"package p\n\n"
            b"func Good(a int) bool { return true }\n\n"
            b"func Broken(a int {\n"
            b"  x := \n"
            b"}\n\n"
            b"func Also(s string) error { return nil }\n"
        )
        records = extractor.extract(source, "broken.go")
        assert isinstance(records, list)
        names = [r.name for r in records]
        assert "Good" in names
        good = records[names.index("Good")]
        assert good.args == ("int",)
        assert good.rets == ("bool",)

    def test_str_source_accepted(self, extractor):
        (record,) = extractor.extract("package p\nfunc F(x int) {}\n", "f.go")
        assert record.name == "F"
        assert record.location == (1, 0)
