"""
模块名称：settings.factory

本模块提供设置服务的工厂实现。
注意事项：工厂本身为进程内单例，服务实例由服务管理器缓存。
"""

from typing_extensions import override

from sfcplay.services.factory import ServiceFactory
from sfcplay.services.settings.service import SettingsService


class SettingsServiceFactory(ServiceFactory):
    """设置服务工厂（进程内单例）。"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        super().__init__()
        self.service_class = SettingsService

    @override
    def create(self):
        """创建并初始化设置服务实例。"""
        return SettingsService.initialize()
