"""
模块名称：服务依赖注入

本模块提供获取共享服务实例的便捷函数。
设计背景：统一服务访问入口，调用方只持有返回的引用，不依赖管理器细节。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sfcplay.services.schema import ServiceType

if TYPE_CHECKING:
    from sfcplay.compiler.component_compiler import ComponentCompiler
    from sfcplay.services.compiler.service import CompilerService
    from sfcplay.services.settings.service import SettingsService


def get_service(service_type: ServiceType, default=None):
    """获取指定类型的服务实例，必要时懒加载创建。"""
    from sfcplay.services.manager import get_service_manager

    return get_service_manager().get(service_type, default)


def get_settings_service() -> SettingsService:
    """获取设置服务实例。"""
    return get_service(ServiceType.SETTINGS_SERVICE)


def get_compiler_service() -> CompilerService:
    """获取编译器服务实例。"""
    return get_service(ServiceType.COMPILER_SERVICE)


def get_compiler() -> ComponentCompiler:
    """获取进程内共享的编译器。

    契约：首次调用时创建，之后返回同一实例直到服务被销毁。
    """
    return get_compiler_service().compiler
