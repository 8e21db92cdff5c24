# -*- coding: utf-8 -*-
from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from typing import cast

# 全局配置数据存储

GLOBAL_CONFIG_DATA: Dict[str, Any] = {}


def set_global_env_data(env_data: Dict[str, Any]) -> None:
    """设置全局配置数据"""
    global GLOBAL_CONFIG_DATA
    GLOBAL_CONFIG_DATA = dict(env_data)


def set_config(key: str, value: Any) -> None:
    """设置配置"""
    GLOBAL_CONFIG_DATA[key] = value


"""配置管理模块。

该模块提供了获取glee各种配置设置的函数。
所有配置都从配置文件中读取，带有回退默认值。
"""

# 默认配置文件位置
DEFAULT_CONFIG_FILE = "~/.glee/config.yaml"


def get_match_mode() -> str:
    """
    获取默认匹配模式。

    返回:
        str: 匹配模式名称（default或includes），默认为default
    """
    return str(GLOBAL_CONFIG_DATA.get("match", "default"))


def get_max_workers() -> Optional[int]:
    """
    获取文件提取的最大并发线程数。

    返回:
        Optional[int]: 线程数；未配置时返回None，由线程池自行决定
    """
    value = GLOBAL_CONFIG_DATA.get("max_workers")
    if value is None:
        return None
    return max(1, int(value))


def is_show_progress() -> bool:
    """
    获取是否显示文件处理进度条。

    返回：
        bool: 默认为True
    """
    return cast(bool, GLOBAL_CONFIG_DATA.get("show_progress", True))


def get_pretty_output() -> bool:
    """
    获取是否启用PrettyOutput。

    返回：
        bool: 如果启用PrettyOutput则返回True，默认为True
    """
    import platform

    # Windows系统强制设置为False
    if platform.system() == "Windows":
        return False

    return cast(bool, GLOBAL_CONFIG_DATA.get("pretty_output", True))


def is_print_error_traceback() -> bool:
    """
    获取是否在错误输出时打印回溯调用链。

    返回：
        bool: 如果打印回溯则返回True，默认为False
    """
    return cast(bool, GLOBAL_CONFIG_DATA.get("print_error_traceback", False))


def get_ignore_dirs() -> List[str]:
    """
    获取额外需要忽略的目录名列表。

    返回:
        List[str]: 目录名或通配模式列表，默认为空
    """
    value = GLOBAL_CONFIG_DATA.get("ignore_dirs", [])
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value or []]
