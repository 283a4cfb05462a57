"""
模块名称：组件描述符模型

本模块定义编译产物：宿主可直接消费的组件描述符与其携带的脚本函数。
主要功能包括：
- `ScriptFunction`：不透明、由宿主执行的脚本函数，带信任级别标记
- `ComponentDescriptor`：模板文本 + 可选初始化函数 + 可选方法表

设计背景：引擎只负责从文本构造函数，不执行也不隔离脚本；执行与隔离由宿主运行时负责。
注意事项：所有模型均为冻结对象，每次编译新建，引擎不保留引用。
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from sfcplay.compiler.source_check import is_identifier, is_parameter


class TrustLevel(str, Enum):
    """脚本来源的信任级别。"""

    UNTRUSTED = "untrusted"
    TRUSTED = "trusted"


class FunctionKind(str, Enum):
    """脚本函数在组件中的角色。"""

    SETUP = "setup"
    DATA = "data"
    METHOD = "method"


class ScriptFunction(BaseModel):
    """由宿主执行的脚本函数。

    契约：
    - 输入：函数名、参数名、函数体原文与信任级别
    - 输出：`to_source()` 渲染出宿主可求值的函数源码
    - 失败语义：函数名/参数名不是合法标识符时抛 `ValidationError`
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: FunctionKind
    params: tuple[str, ...] = ()
    body: str
    trust: TrustLevel = TrustLevel.UNTRUSTED

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not is_identifier(value):
            msg = f"Invalid function name: {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("params")
    @classmethod
    def validate_params(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        invalid = [param for param in value if not is_parameter(param)]
        if invalid:
            msg = f"Invalid parameter names: {', '.join(map(repr, invalid))}"
            raise ValueError(msg)
        return value

    def to_source(self) -> str:
        """渲染为宿主可求值的函数源码。"""
        params = ", ".join(self.params)
        body = self.body.strip()
        lines = [f"function {self.name}({params}) {{"]
        if body:
            lines.append(body)
        if self.kind is FunctionKind.SETUP:
            # 注意：setup 恒返回空能力对象，函数体内计算的绑定不对外暴露
            lines.append("return {};")
        lines.append("}")
        return "\n".join(lines)


class ComponentDescriptor(BaseModel):
    """编译产物：宿主可挂载的组件描述符。

    契约：`setup` 与 `data` 至多存在一个；`methods` 为空时记为 None。
    """

    model_config = ConfigDict(frozen=True)

    template: str
    setup: ScriptFunction | None = None
    data: ScriptFunction | None = None
    methods: dict[str, ScriptFunction] | None = None

    @model_validator(mode="after")
    def validate_single_initializer(self) -> "ComponentDescriptor":
        if self.setup is not None and self.data is not None:
            msg = "A component cannot declare both setup() and data() initializers"
            raise ValueError(msg)
        return self

    @property
    def initializer(self) -> ScriptFunction | None:
        return self.setup if self.setup is not None else self.data

    @property
    def has_methods(self) -> bool:
        return bool(self.methods)

    def to_definition(self) -> dict[str, Any]:
        """导出宿主组件定义（函数以源码形式给出）。"""
        definition: dict[str, Any] = {"template": self.template}
        if self.setup is not None:
            definition["setup"] = self.setup.to_source()
        if self.data is not None:
            definition["data"] = self.data.to_source()
        if self.methods:
            definition["methods"] = {name: function.to_source() for name, function in self.methods.items()}
        trust_levels = {function.trust for function in self._functions()}
        if trust_levels:
            # 注意：任一函数不可信则整体标记为不可信
            trusted = trust_levels == {TrustLevel.TRUSTED}
            definition["trust"] = (TrustLevel.TRUSTED if trusted else TrustLevel.UNTRUSTED).value
        return definition

    def _functions(self) -> list[ScriptFunction]:
        functions = [function for function in (self.setup, self.data) if function is not None]
        if self.methods:
            functions.extend(self.methods.values())
        return functions
