"""
模块名称：服务管理器

本模块提供服务的懒加载创建与进程内复用。
主要功能包括：
- 通过工厂注册服务
- 按依赖顺序创建服务并缓存实例
- 统一销毁已创建的服务

设计背景：编译器本身是普通对象，只有“共享同一个编译器”这一需求由管理器承担。
注意事项：创建过程由可重入锁保护；编译调用本身不经过锁。
"""

from __future__ import annotations

import asyncio
import threading
from typing import TYPE_CHECKING

from sfcplay.log.logger import logger
from sfcplay.services.schema import ServiceType

if TYPE_CHECKING:
    from sfcplay.services.base import Service
    from sfcplay.services.factory import ServiceFactory


class NoFactoryRegisteredError(Exception):
    """当服务类型未注册工厂时抛出。"""


class ServiceManager:
    """服务管理器。"""

    def __init__(self) -> None:
        """初始化服务与工厂注册表。"""
        self.services: dict[ServiceType, Service] = {}
        self.factories: dict[ServiceType, ServiceFactory] = {}
        self._lock = threading.RLock()
        self.register_factories(self.get_factories())

    def register_factories(self, factories: list[ServiceFactory] | None = None) -> None:
        """注册一组服务工厂。"""
        if factories is None:
            return
        for factory in factories:
            self.register_factory(factory)

    def register_factory(self, service_factory: ServiceFactory) -> None:
        """注册服务工厂，同名服务后注册者覆盖先注册者。"""
        service_type = ServiceType(service_factory.service_class.name)
        self.factories[service_type] = service_factory
        logger.debug(f"Registered factory for {service_type.value}")

    def get(self, service_type: ServiceType, default: ServiceFactory | None = None) -> Service:
        """获取或创建指定服务实例。"""
        with self._lock:
            if service_type not in self.services:
                self._create_service(service_type, default)
            return self.services[service_type]

    def _create_service(self, service_type: ServiceType, default: ServiceFactory | None = None) -> None:
        """创建服务实例并处理依赖。"""
        logger.debug(f"Create service {service_type.value}")
        factory = self.factories.get(service_type)
        if factory is None and default is not None:
            self.register_factory(default)
            factory = default
        if factory is None:
            msg = f"No factory registered for the service class '{service_type.name}'"
            raise NoFactoryRegisteredError(msg)

        # 实现：先创建依赖服务。
        for dependency in factory.dependencies:
            if dependency not in self.services:
                self._create_service(dependency)

        dependent_services = {dep.value: self.services[dep] for dep in factory.dependencies}
        service = factory.create(**dependent_services)
        service.set_ready()
        self.services[service_type] = service

    def update(self, service_type: ServiceType) -> None:
        """重建指定服务实例。"""
        with self._lock:
            if service_type in self.services:
                logger.debug(f"Update service {service_type.value}")
                self.services.pop(service_type, None)
                self.get(service_type)

    async def teardown(self) -> None:
        """销毁所有已创建服务，工厂注册保持不变。"""
        for service in list(self.services.values()):
            logger.debug(f"Teardown service {service.name}")
            try:
                teardown_result = service.teardown()
                if asyncio.iscoroutine(teardown_result):
                    await teardown_result
            except Exception as exc:  # noqa: BLE001
                logger.debug(f"Error in teardown of {service.name}", exc_info=exc)
        self.services = {}

    @staticmethod
    def get_factories() -> list[ServiceFactory]:
        """返回内置服务工厂。"""
        from sfcplay.services.compiler.factory import CompilerServiceFactory
        from sfcplay.services.settings.factory import SettingsServiceFactory

        return [SettingsServiceFactory(), CompilerServiceFactory()]


_service_manager: ServiceManager | None = None
_service_manager_lock = threading.Lock()


def get_service_manager() -> ServiceManager:
    """获取服务管理器单例（线程安全懒加载）。"""
    global _service_manager  # noqa: PLW0603
    if _service_manager is None:
        with _service_manager_lock:
            if _service_manager is None:
                _service_manager = ServiceManager()
    return _service_manager
