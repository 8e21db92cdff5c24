# -*- coding: utf-8 -*-
"""pytest 配置文件"""
import os
import sys

import pytest

# 将 src 目录添加到 Python 路径
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from typing import Optional  # noqa: E402
from typing import Set  # noqa: E402

from glee.glee_signature.base_language import BaseLanguageSupport  # noqa: E402
from glee.glee_signature.function_record import FunctionRecord  # noqa: E402
from glee.glee_utils.output import OutputEvent  # noqa: E402
from glee.glee_utils.output import OutputSink  # noqa: E402
from glee.glee_utils.output import PrettyOutput  # noqa: E402
from glee.glee_utils import config as glee_config  # noqa: E402


GO_SAMPLE = b"""package sample

import "errors"

func Foo(a int, b string) (bool, error) {
	return a > 0 && b != "", nil
}

func NoArgs() {}

func Single(p Path) *DrivePath {
	return nil
}

func Bytes(data []byte) []byte {
	return data
}

type Repo struct{}

func (r *Repo) Load(id int, opts ...string) (Item, error) {
	return Item{}, errors.New("x")
}
"""


@pytest.fixture
def temp_dir(tmp_path):
    """临时目录 fixture，每个测试函数都会获得一个新的临时目录"""
    return tmp_path


@pytest.fixture
def go_source():
    return GO_SAMPLE


@pytest.fixture
def make_record():
    """按参数构造 FunctionRecord 的工厂"""

    def _make(args=(), rets=(), name="f", path="a.go", location=(0, 0)):
        return FunctionRecord(
            path=path,
            location=location,
            name=name,
            args=tuple(args),
            rets=tuple(rets),
        )

    return _make


@pytest.fixture(autouse=True)
def reset_config():
    """自动重置全局配置，防止测试之间的干扰"""
    original_data = dict(glee_config.GLOBAL_CONFIG_DATA)
    yield
    glee_config.set_global_env_data(original_data)


class FakeLanguageSupport(BaseLanguageSupport):
    """没有可用语法的语言支持，只用于注册与遍历测试"""

    def __init__(self, name: str, extensions: Set[str]) -> None:
        self._name = name
        self._extensions = extensions

    @property
    def language_name(self) -> str:
        return self._name

    @property
    def file_extensions(self) -> Set[str]:
        return self._extensions

    @property
    def tree_sitter_language(self) -> Optional[object]:
        return None

    @property
    def declaration_query(self) -> str:
        return ""

    @property
    def input_query(self) -> str:
        return ""

    @property
    def output_query(self) -> str:
        return ""


class RecordingSink(OutputSink):
    """记录所有输出事件的后端"""

    def __init__(self):
        self.events = []

    def emit(self, event: OutputEvent) -> None:
        self.events.append(event)

    def texts(self, output_type=None):
        return [
            e.text
            for e in self.events
            if output_type is None or e.output_type == output_type
        ]


@pytest.fixture
def fake_support():
    return FakeLanguageSupport


@pytest.fixture
def recording_sink():
    sink = RecordingSink()
    PrettyOutput.add_sink(sink)
    yield sink
    PrettyOutput.clear_sinks(keep_default=True)
