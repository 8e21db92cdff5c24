"""
glee工具模块
该模块提供了glee中使用的配置管理、输出格式化和环境初始化。
该模块组织为以下几个子模块：
- config: 配置管理
- globals: 全局控制台
- output: 输出格式化
- utils: 环境初始化
"""
import colorama

# 初始化colorama以支持跨平台的彩色文本
colorama.init()
