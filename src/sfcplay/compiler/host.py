"""
模块名称：宿主组件模型适配

本模块定义合成器与宿主渲染运行时之间的边界。
关键组件：
- `ComponentHost`：宿主需实现的组件构造协议
- `DescriptorHost`：默认实现，构造 `ComponentDescriptor`

设计背景：描述符的具体形状由宿主组件模型决定，合成器只依赖该协议。
注意事项：宿主负责脚本的执行与隔离，构造失败时抛出的异常会被合成器转为编译错误。
"""

from typing import Protocol

from sfcplay.schema.descriptor import ComponentDescriptor, ScriptFunction


class ComponentHost(Protocol):
    """宿主组件构造协议。"""

    def define_component(
        self,
        *,
        template: str,
        setup: ScriptFunction | None = None,
        data: ScriptFunction | None = None,
        methods: dict[str, ScriptFunction] | None = None,
    ) -> ComponentDescriptor: ...


class DescriptorHost:
    """默认宿主：直接构造冻结的 `ComponentDescriptor`。"""

    def define_component(
        self,
        *,
        template: str,
        setup: ScriptFunction | None = None,
        data: ScriptFunction | None = None,
        methods: dict[str, ScriptFunction] | None = None,
    ) -> ComponentDescriptor:
        return ComponentDescriptor(template=template, setup=setup, data=data, methods=methods or None)
