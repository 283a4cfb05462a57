"""
模块名称：编译引擎包入口

本模块按需暴露编译器及其组成部分，避免 schema 与编译器之间的导入循环。
注意事项：访问未导出的名称抛 `AttributeError`。
"""

__all__ = [
    "ComponentCompiler",
    "ComponentHost",
    "DescriptorHost",
    "DescriptorSynthesizer",
    "ScriptExtractor",
    "TemplateValidator",
]

_EXPORTS = {
    "ComponentCompiler": "sfcplay.compiler.component_compiler",
    "ComponentHost": "sfcplay.compiler.host",
    "DescriptorHost": "sfcplay.compiler.host",
    "DescriptorSynthesizer": "sfcplay.compiler.synthesizer",
    "ScriptExtractor": "sfcplay.compiler.extractor",
    "TemplateValidator": "sfcplay.compiler.template_validator",
}


def __getattr__(name: str):
    """按需导入并返回导出对象。"""
    if name in _EXPORTS:
        import importlib

        return getattr(importlib.import_module(_EXPORTS[name]), name)
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
