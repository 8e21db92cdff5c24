# -*- coding: utf-8 -*-
"""
输出格式化模块
该模块为glee提供诊断信息的格式化和显示工具。
包含：
- 用于分类不同输出类型的OutputType枚举
- 输出事件与可插拔的输出后端（Sink）
- 用于格式化和显示样式化输出的PrettyOutput类
"""
from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from rich.panel import Panel
from rich.style import Style as RichStyle
from rich.text import Text

from glee.glee_utils.config import get_pretty_output
from glee.glee_utils.config import is_print_error_traceback
from glee.glee_utils.globals import console


class OutputType(Enum):
    """
    输出类型枚举，用于分类和样式化不同类型的消息。

    属性：
        RESULT: 搜索结果摘要
        ERROR: 错误信息
        INFO: 系统提示
        PROGRESS: 执行进度
        SUCCESS: 成功信息
        WARNING: 警告信息
        DEBUG: 调试信息
    """

    RESULT = "RESULT"
    ERROR = "ERROR"
    INFO = "INFO"
    PROGRESS = "PROGRESS"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    DEBUG = "DEBUG"


@dataclass
class OutputEvent:
    """
    输出事件的通用结构，供不同输出后端（Sink）消费。
    - text: 文本内容
    - output_type: 输出类型
    - timestamp: 是否显示时间戳
    - traceback: 是否显示异常堆栈
    - section: 若为章节标题输出，填入标题文本；否则为None
    - context: 额外上下文（预留给日志等）
    """

    text: str
    output_type: OutputType
    timestamp: bool = True
    traceback: bool = False
    section: Optional[str] = None
    context: Optional[Dict[str, Any]] = None


class OutputSink(ABC):
    """输出后端抽象接口，不同前端（控制台/日志）实现该接口以消费输出事件。"""

    @abstractmethod
    def emit(self, event: OutputEvent) -> None:  # pragma: no cover - 抽象方法
        raise NotImplementedError


class ConsoleOutputSink(OutputSink):
    """默认控制台输出实现，写入标准错误。"""

    _header_styles: Dict[OutputType, RichStyle] = {
        OutputType.RESULT: RichStyle(color="bright_blue"),
        OutputType.ERROR: RichStyle(color="red", bold=True),
        OutputType.INFO: RichStyle(color="bright_cyan"),
        OutputType.PROGRESS: RichStyle(color="white"),
        OutputType.SUCCESS: RichStyle(color="bright_green", bold=True),
        OutputType.WARNING: RichStyle(color="yellow", bold=True),
        OutputType.DEBUG: RichStyle(color="grey58", dim=True),
    }

    def emit(self, event: OutputEvent) -> None:
        # 章节输出
        if event.section is not None:
            text = Text(event.section, style=event.output_type.value, justify="center")
            if get_pretty_output():
                console.print(Panel(text, border_style=event.output_type.value))
            else:
                console.print(text)
            return

        header = Text(
            PrettyOutput._format(event.output_type, event.timestamp),
            style=self._header_styles[event.output_type],
        )
        line = Text.assemble(header, " ", event.text)
        console.print(line)
        if event.traceback or (
            event.output_type == OutputType.ERROR and is_print_error_traceback()
        ):
            try:
                console.print_exception()
            except Exception as e:
                console.print(f"Error: {e}")


# 模块级输出分发器（默认注册控制台后端）
_output_sinks: List[OutputSink] = [ConsoleOutputSink()]


def emit_output(event: OutputEvent) -> None:
    """向所有已注册的输出后端广播事件。"""
    for sink in list(_output_sinks):
        try:
            sink.emit(event)
        except Exception as e:
            # 后端故障不影响其他后端
            console.print(f"[输出后端错误] {sink.__class__.__name__}: {e}")


class PrettyOutput:
    """
    使用rich库格式化和显示诊断输出的类。

    提供以下方法：
    - 使用适当的样式格式化不同类型的输出
    - 章节标题的面板显示
    - 根据消息前缀自动推断输出类型
    """

    # 不同输出类型的图标
    _ICONS = {
        OutputType.RESULT: "✨",
        OutputType.ERROR: "❌",
        OutputType.INFO: "ℹ️",
        OutputType.PROGRESS: "⏳",
        OutputType.SUCCESS: "✅",
        OutputType.WARNING: "⚠️",
        OutputType.DEBUG: "🔍",
    }

    @staticmethod
    def _format(output_type: OutputType, timestamp: bool = True) -> str:
        """
        使用时间戳和图标格式化输出头。

        参数：
            output_type: 输出类型
            timestamp: 是否包含时间戳

        返回：
            str: 格式化后的输出头
        """
        icon = PrettyOutput._ICONS.get(output_type, "")
        formatted = f"{icon}  "
        if timestamp:
            formatted += f"[{datetime.now().strftime('%H:%M:%S')}][{output_type.value}]"
        return formatted

    @staticmethod
    def print(
        text: str,
        output_type: OutputType,
        timestamp: bool = True,
        traceback: bool = False,
    ) -> None:
        """打印格式化输出（通过事件 + Sink 机制分发）。"""
        event = OutputEvent(
            text=text,
            output_type=output_type,
            timestamp=timestamp,
            traceback=traceback,
        )
        emit_output(event)

    @staticmethod
    def auto_print(text: str, timestamp: bool = False) -> None:
        """根据消息开头的图标推断输出类型后打印。"""
        output_type = OutputType.INFO
        for candidate, icon in PrettyOutput._ICONS.items():
            if text.startswith(icon):
                output_type = candidate
                text = text[len(icon) :].lstrip()
                break
        PrettyOutput.print(text, output_type, timestamp=timestamp)

    @staticmethod
    def section(title: str, output_type: OutputType = OutputType.INFO) -> None:
        """在样式化面板中打印章节标题。"""
        event = OutputEvent(
            text="",
            output_type=output_type,
            section=title,
        )
        emit_output(event)

    # Sink管理（为外部注册自定义后端预留）
    @staticmethod
    def add_sink(sink: OutputSink) -> None:
        """注册一个新的输出后端。"""
        _output_sinks.append(sink)

    @staticmethod
    def clear_sinks(keep_default: bool = True) -> None:
        """清空已注册的输出后端；可选择保留默认控制台后端。"""
        if keep_default:
            globals()["_output_sinks"] = [
                s for s in _output_sinks if isinstance(s, ConsoleOutputSink)
            ]
        else:
            _output_sinks.clear()

    @staticmethod
    def get_sinks() -> List[OutputSink]:
        """获取当前已注册的输出后端列表（副本）。"""
        return list(_output_sinks)
