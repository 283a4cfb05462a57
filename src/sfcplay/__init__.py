"""sfcplay：单文件组件练习场的编译引擎。

本包把学习者输入的模板、脚本与样式文本编译为宿主可挂载的组件描述符，
并以结构化的错误/警告代替异常。
"""

from sfcplay.compiler.component_compiler import ComponentCompiler
from sfcplay.schema import CompileResult, ComponentDescriptor, ScriptFunction, TrustLevel, ValidationResult
from sfcplay.services.deps import get_compiler
from sfcplay.services.settings.base import CompilerSettings

__all__ = [
    "CompileResult",
    "CompilerSettings",
    "ComponentCompiler",
    "ComponentDescriptor",
    "ScriptFunction",
    "TrustLevel",
    "ValidationResult",
    "get_compiler",
]
