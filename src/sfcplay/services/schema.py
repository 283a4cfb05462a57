"""
模块名称：服务类型枚举

本模块定义所有服务类型枚举，用于注册与依赖注入。
注意事项：新增服务需在此枚举中注册，枚举值即工厂注入依赖时使用的参数名。
"""

from enum import Enum


class ServiceType(str, Enum):
    """服务类型枚举。"""

    SETTINGS_SERVICE = "settings_service"
    COMPILER_SERVICE = "compiler_service"
