"""
模块名称：compiler.factory

本模块提供编译器服务的工厂实现，依赖设置服务。
"""

from typing_extensions import override

from sfcplay.services.compiler.service import CompilerService
from sfcplay.services.factory import ServiceFactory
from sfcplay.services.schema import ServiceType


class CompilerServiceFactory(ServiceFactory):
    """编译器服务工厂。"""

    def __init__(self) -> None:
        super().__init__()
        self.service_class = CompilerService
        self.dependencies = [ServiceType.SETTINGS_SERVICE]

    @override
    def create(self, settings_service):
        return CompilerService(settings_service)
