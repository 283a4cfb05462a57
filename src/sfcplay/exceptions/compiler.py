"""
模块名称：编译引擎异常

本模块定义模板校验、脚本片段提取与描述符合成过程中使用的异常类型。
主要功能包括：
- 编译错误的统一基类
- 按阶段区分的异常，便于编排层决定“致命错误”或“警告”

关键组件：
- `CompilerError`：基类
- `TemplateValidationError`：校验器内部失败
- `ScriptExtractionError`：片段提取失败（编排层降级为警告）
- `ScriptSynthesisError`：合成失败（编排层转为错误）

注意事项：这些异常均不会越过 `ComponentCompiler` 的边界。
"""


class CompilerError(Exception):
    """编译引擎异常基类。"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TemplateValidationError(CompilerError):
    """模板校验过程内部失败。"""


class ScriptExtractionError(CompilerError):
    """脚本片段提取失败。

    失败语义：非致命，编排层将其记录为 warning 并继续编译。
    """


class ScriptSynthesisError(CompilerError):
    """脚本函数或组件描述符构造失败。

    契约：携带可选的 `fragment` 名称，指明是哪一段脚本被拒绝。
    失败语义：致命，编排层返回 error 且不产出组件。
    """

    def __init__(self, message: str, fragment: str | None = None):
        self.fragment = fragment
        if fragment:
            message = f"{fragment}: {message}"
        super().__init__(message)
