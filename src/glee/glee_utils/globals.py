# -*- coding: utf-8 -*-
"""
全局控制台模块
该模块管理glee的全局控制台配置。
诊断信息统一写入标准错误，标准输出只用于搜索结果。
"""

from rich.console import Console
from rich.theme import Theme

# 使用自定义主题配置rich控制台
custom_theme = Theme(
    {
        "INFO": "yellow",
        "WARNING": "yellow",
        "ERROR": "red",
        "SUCCESS": "green",
        "PROGRESS": "white",
        "DEBUG": "blue",
        "RESULT": "blue",
    }
)
console = Console(theme=custom_theme, stderr=True)
