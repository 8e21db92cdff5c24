# -*- coding: utf-8 -*-
import os
from pathlib import Path
from typing import Any
from typing import Dict
from typing import Optional
from typing import Tuple

import yaml

from glee.glee_utils.config import DEFAULT_CONFIG_FILE
from glee.glee_utils.config import set_global_env_data
from glee.glee_utils.output import OutputType
from glee.glee_utils.output import PrettyOutput


def init_env(config_file: Optional[str] = None) -> None:
    """初始化环境变量与全局配置

    参数:
        config_file: 配置文件路径，默认为None(使用~/.glee/config.yaml)

    功能:
        1. 读取YAML配置文件（不存在时使用默认配置）
        2. 将配置中的ENV映射导出到环境变量
        3. 写入全局配置数据
    """
    config_file_path = Path(os.path.expanduser(config_file or DEFAULT_CONFIG_FILE))
    if not config_file_path.exists():
        if config_file is not None:
            PrettyOutput.print(
                f"配置文件不存在: {config_file_path}，使用默认配置",
                OutputType.WARNING,
            )
        set_global_env_data({})
        return

    try:
        _, config_data = _load_config_file(str(config_file_path))
    except yaml.YAMLError as e:
        PrettyOutput.print(
            f"配置文件解析失败: {config_file_path}: {e}，使用默认配置",
            OutputType.WARNING,
        )
        set_global_env_data({})
        return

    if not isinstance(config_data, dict):
        PrettyOutput.print(
            f"配置文件格式错误（顶层必须是映射）: {config_file_path}",
            OutputType.WARNING,
        )
        config_data = {}

    _process_env_variables(config_data)
    set_global_env_data(config_data)


def _load_config_file(config_file: str) -> Tuple[str, Dict[str, Any]]:
    """读取并解析YAML格式的配置文件

    参数:
        config_file: 配置文件路径

    返回:
        Tuple[str, dict]: (文件原始内容, 解析后的配置字典)
    """
    with open(config_file, "r", encoding="utf-8") as f:
        content = f.read()
        config_data = yaml.safe_load(content) or {}
        return content, config_data


def _process_env_variables(config_data: Dict[str, Any]) -> None:
    """处理配置中的环境变量

    参数:
        config_data: 解析后的配置字典
    """
    if "ENV" in config_data and isinstance(config_data["ENV"], dict):
        os.environ.update(
            {str(k): str(v) for k, v in config_data["ENV"].items() if v is not None}
        )
