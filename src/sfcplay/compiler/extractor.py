"""
模块名称：脚本片段提取

本模块用模式匹配（而非语法解析）从脚本文本中识别三种常见形状并提取原文。
主要功能包括：
- `match_setup_block`：`setup() { ... }` 函数体
- `match_data_block`：`data() { return { ... } }` 返回对象的内部文本
- `match_methods_block` / `match_method_entries`：`methods: { name(params) { body } }` 方法表

关键组件：
- `ScriptExtractor`：按固定优先级组合上述识别函数
- 识别顺序：setup 优先于 data（命中即止）；方法表独立识别

设计背景：沙箱演示场景只需覆盖常见写法，识别失败退化为警告而非错误。
注意事项（已知且接受的局限）：
- setup 与方法体以第一个 `}` 结束，嵌套花括号会截断函数体；
- 存在多个 setup 块时只取第一个；
- 字符串中的花括号同样参与方法表的花括号计数。
"""

import re

from sfcplay.exceptions.compiler import ScriptExtractionError
from sfcplay.log.logger import logger
from sfcplay.schema.compile import MethodFragment, ScriptFragments

UNRECOGNIZED_SCRIPT_WARNING = "Script parsing warning: no setup(), data() or methods block recognized"

SETUP_BLOCK_PATTERN = re.compile(r"setup\s*\(\s*\)\s*{([\s\S]*?)}")
DATA_BLOCK_PATTERN = re.compile(r"data\s*\(\s*\)\s*{[\s\S]*?return\s*{([\s\S]*?)}\s*}")
METHODS_KEY_PATTERN = re.compile(r"methods\s*:\s*{")
METHOD_ENTRY_PATTERN = re.compile(r"(\w+)\s*\(([^)]*)\)\s*{([\s\S]*?)}")


def match_setup_block(script: str) -> str | None:
    """返回第一个 `setup()` 的函数体原文（非贪婪，止于第一个 `}`）。"""
    match = SETUP_BLOCK_PATTERN.search(script)
    return match.group(1) if match else None


def match_data_block(script: str) -> str | None:
    """返回 `data()` 中 `return { ... }` 对象的内部原文。"""
    match = DATA_BLOCK_PATTERN.search(script)
    return match.group(1) if match else None


def match_methods_block(script: str) -> str | None:
    """返回 `methods: { ... }` 的内部原文。

    关键路径：定位 `methods: {` 后按花括号深度找到与之配平的 `}`。
    失败语义：未闭合时视为未识别，返回 None。
    """
    match = METHODS_KEY_PATTERN.search(script)
    if match is None:
        return None

    depth = 1
    for index in range(match.end(), len(script)):
        char = script[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return script[match.end() : index]
    return None


def match_method_entries(methods_block: str) -> dict[str, MethodFragment]:
    """从方法表内部原文中逐个匹配 `name(params) { body }` 条目。

    契约：不合形状的条目静默跳过；同名条目后者覆盖前者。
    """
    entries: dict[str, MethodFragment] = {}
    for match in METHOD_ENTRY_PATTERN.finditer(methods_block):
        name, params, body = match.groups()
        entries[name] = MethodFragment(name=name, params=params, body=body, source=match.group(0))
    return entries


class ScriptExtractor:
    """脚本片段提取器。

    契约：
    - 输入：任意脚本文本，空文本返回全空片段
    - 输出：`ScriptFragments`，setup 与 data 至多一个
    - 失败语义：内部异常包装为 `ScriptExtractionError`，由编排层降级为警告
    """

    def extract(self, script: str) -> ScriptFragments:
        if not isinstance(script, str):
            msg = f"expected script text, got {type(script).__name__}"
            raise ScriptExtractionError(msg)
        if not script.strip():
            return ScriptFragments()

        try:
            setup_body = match_setup_block(script)
            # 注意：setup 命中后不再识别 data，保证初始化形状唯一
            data_body = match_data_block(script) if setup_body is None else None
            methods_block = match_methods_block(script)
            methods = match_method_entries(methods_block) if methods_block is not None else {}
        except Exception as e:
            logger.debug("Error extracting script fragments", exc_info=True)
            raise ScriptExtractionError(str(e) or type(e).__name__) from e

        logger.debug(
            "Extracted script fragments",
            setup=setup_body is not None,
            data=data_body is not None,
            methods=sorted(methods),
        )
        return ScriptFragments(setup_body=setup_body, data_body=data_body, methods=methods or None)
