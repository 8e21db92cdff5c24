# -*- coding: utf-8 -*-
"""语言注册表测试"""

import pytest

from glee.glee_signature.errors import UnsupportedLanguageError
from glee.glee_signature.language_registry import LanguageRegistry
from glee.glee_signature.language_registry import extract_functions
from glee.glee_utils.output import OutputType


class TestLanguageRegistry:
    """测试注册、注销与语言检测"""

    def test_register_and_detect(self, fake_support):
        registry = LanguageRegistry()
        registry.register(fake_support("fake", {".fk", ".fake"}))
        assert registry.detect_language("src/a.fk") == "fake"
        assert registry.detect_language("b.fake") == "fake"
        assert registry.detect_language("c.txt") is None
        assert registry.is_supported("a.fk")
        assert registry.get_supported_languages() == {"fake"}
        assert registry.get_extensions("fake") == [".fake", ".fk"]

    def test_unregister_removes_extensions(self, fake_support):
        registry = LanguageRegistry()
        registry.register(fake_support("fake", {".fk"}))
        registry.unregister("fake")
        assert registry.detect_language("a.fk") is None
        assert registry.get_language_support("fake") is None
        # 注销未注册的语言不报错
        registry.unregister("missing")

    def test_extension_conflict_keeps_first(self, fake_support, recording_sink):
        registry = LanguageRegistry()
        registry.register(fake_support("first", {".x"}))
        registry.register(fake_support("second", {".x", ".y"}))
        assert registry.detect_language("a.x") == "first"
        assert registry.detect_language("a.y") == "second"
        warnings = [
            e for e in recording_sink.events if e.output_type == OutputType.WARNING
        ]
        assert len(warnings) == 1
        assert ".x" in warnings[0].text

    def test_unknown_language_raises(self):
        registry = LanguageRegistry()
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            registry.get_extractor("cobol")
        assert exc_info.value.language == "cobol"
        assert str(exc_info.value) == "language cobol not supported"

    def test_missing_grammar_raises(self, fake_support):
        registry = LanguageRegistry()
        registry.register(fake_support("fake", {".fk"}))
        with pytest.raises(UnsupportedLanguageError):
            registry.get_extractor("fake")

    def test_extract_functions_unsupported(self):
        registry = LanguageRegistry()
        with pytest.raises(UnsupportedLanguageError):
            extract_functions(b"fn main() {}", "brainfuck", "a.bf", registry)


class TestBuiltinRegistry:
    """测试内置语言"""

    def test_go_registered(self, go_source):
        pytest.importorskip("tree_sitter_go")
        from glee.glee_signature.language_registry import get_registry

        registry = get_registry()
        assert registry.detect_language("main.go") == "go"
        records = extract_functions(go_source, "go", "x.go")
        assert records[0].name == "Foo"

    def test_base_support_detection(self, fake_support):
        support = fake_support("fake", {".fk"})
        assert support.detect_language("a.fk") == "fake"
        assert support.detect_language("a.go") is None
        assert support.is_available() is False
        assert support.create_extractor() is None
