"""Schema 模块入口。

本模块集中导出编译引擎的数据模型。
"""

from sfcplay.schema.compile import CompileResult, MethodFragment, ScriptFragments, ValidationResult
from sfcplay.schema.descriptor import ComponentDescriptor, FunctionKind, ScriptFunction, TrustLevel

__all__ = [
    "CompileResult",
    "ComponentDescriptor",
    "FunctionKind",
    "MethodFragment",
    "ScriptFragments",
    "ScriptFunction",
    "TrustLevel",
    "ValidationResult",
]
