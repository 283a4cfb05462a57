"""
模块名称：组件描述符合成

本模块把提取出的脚本片段构造为脚本函数，并交由宿主组装为组件描述符。
主要功能包括：
- setup 片段 -> 注入宿主响应式原语的 `setup` 函数（恒返回空对象）
- data 片段 -> 零参 `data` 函数，函数体即捕获的对象内部原文
- 方法片段 -> 每个条目一个独立的 `method` 函数

设计背景：运行时从文本构造可执行代码本身不安全；引擎只负责构造并标记信任级别，
执行与隔离由宿主承担。
注意事项：构造阶段会拒绝结构残缺的源码（括号不配平、字面量未闭合、非法形参），
失败统一抛 `ScriptSynthesisError`。
"""

from pydantic import ValidationError

from sfcplay.compiler.host import ComponentHost, DescriptorHost
from sfcplay.compiler.source_check import MalformedSourceError, check_source, split_params
from sfcplay.exceptions.compiler import ScriptSynthesisError
from sfcplay.log.logger import logger
from sfcplay.schema.compile import ScriptFragments
from sfcplay.schema.descriptor import ComponentDescriptor, FunctionKind, ScriptFunction
from sfcplay.services.settings.base import CompilerSettings


def _validation_message(error: ValidationError) -> str:
    # 注意：pydantic 的 "Value error, " 前缀对学习者没有意义
    messages = [detail["msg"].removeprefix("Value error, ") for detail in error.errors()]
    return "; ".join(messages)


class DescriptorSynthesizer:
    """组件描述符合成器。

    契约：
    - 输入：模板文本与 `ScriptFragments`
    - 输出：宿主构造的 `ComponentDescriptor`（模板已去除首尾空白）
    - 失败语义：任一函数或组件构造失败抛 `ScriptSynthesisError`
    """

    def __init__(self, settings: CompilerSettings | None = None, host: ComponentHost | None = None):
        self.settings = settings or CompilerSettings()
        self.host: ComponentHost = host or DescriptorHost()

    def synthesize(self, template: str, fragments: ScriptFragments) -> ComponentDescriptor:
        """合成组件描述符。

        关键路径（三步）：
        1) 按 setup > data 选择初始化函数；
        2) 为方法表中的每个条目构造独立函数；
        3) 交由宿主组装描述符。
        """
        setup = None
        data = None
        if fragments.setup_body is not None:
            setup = self.build_function(
                "setup", FunctionKind.SETUP, tuple(self.settings.setup_bindings), fragments.setup_body
            )
        elif fragments.data_body is not None:
            data = self.build_function("data", FunctionKind.DATA, (), fragments.data_body)

        methods = None
        if fragments.methods:
            methods = {
                name: self.build_function(name, FunctionKind.METHOD, split_params(fragment.params), fragment.body)
                for name, fragment in fragments.methods.items()
            }

        try:
            return self.host.define_component(template=template.strip(), setup=setup, data=data, methods=methods)
        except ValidationError as e:
            raise ScriptSynthesisError(_validation_message(e)) from e
        except Exception as e:
            logger.debug("Host rejected component definition", exc_info=True)
            msg = f"Error creating component. {type(e).__name__}({e!s})."
            raise ScriptSynthesisError(msg) from e

    def build_function(
        self, name: str, kind: FunctionKind, params: tuple[str, ...], body: str
    ) -> ScriptFunction:
        """从原文构造单个脚本函数，源码残缺时拒绝。"""
        label = f"{name}()" if kind is not FunctionKind.METHOD else f"method {name}()"
        try:
            check_source(body)
            return ScriptFunction(name=name, kind=kind, params=params, body=body, trust=self.settings.trust_level)
        except MalformedSourceError as e:
            raise ScriptSynthesisError(str(e), fragment=label) from e
        except ValidationError as e:
            raise ScriptSynthesisError(_validation_message(e), fragment=label) from e
