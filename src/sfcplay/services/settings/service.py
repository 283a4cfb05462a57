"""
模块名称：settings.service

本模块提供设置服务的运行时封装。
关键组件：
- SettingsService：持有 CompilerSettings 的服务实例
"""

from __future__ import annotations

from sfcplay.services.base import Service
from sfcplay.services.settings.base import CompilerSettings


class SettingsService(Service):
    """设置服务。

    契约：
    - 输入：CompilerSettings
    - 输出：可读写的设置服务实例
    - 失败语义：非法配置在构造 CompilerSettings 时抛出 ValidationError
    """

    name = "settings_service"

    def __init__(self, settings: CompilerSettings):
        super().__init__()
        self.settings: CompilerSettings = settings

    @classmethod
    def initialize(cls) -> SettingsService:
        """从环境变量构建设置服务。"""
        return cls(CompilerSettings())

    def set(self, key, value):
        """按键更新设置项并返回当前 CompilerSettings。"""
        setattr(self.settings, key, value)
        return self.settings

    async def teardown(self):
        pass
