"""
模块名称：compiler.service

本模块把编译器包装为可共享的服务。
关键组件：
- CompilerService：持有一个 ComponentCompiler 实例

设计背景：编译器不持有跨调用状态，多个调用方共享一个实例即可；
共享关系由服务层表达，编译器类本身不提供全局访问点。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sfcplay.compiler.component_compiler import ComponentCompiler
from sfcplay.services.base import Service

if TYPE_CHECKING:
    from sfcplay.services.settings.service import SettingsService


class CompilerService(Service):
    """编译器服务。"""

    name = "compiler_service"

    def __init__(self, settings_service: SettingsService):
        super().__init__()
        self.settings_service = settings_service
        self.compiler = ComponentCompiler(settings=settings_service.settings)

    async def teardown(self):
        pass
