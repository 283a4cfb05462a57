"""模块名称：脚本源码结构检查

模块目的：在构造脚本函数前拒绝明显残缺的源码文本。
主要功能：
- 校验标识符（函数名、参数名）
- 扫描括号配对、字符串/模板字面量与块注释是否闭合
使用场景：合成器把捕获的片段包装成 `ScriptFunction` 之前。
设计背景：引擎不解析脚本语言，只做与宿主 `new Function` 相同量级的“能否构造”判断。
注意事项：不识别正则字面量，其中的括号会参与配对计数。
"""

import re

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][\w$]*$")

RESERVED_WORDS = frozenset(
    {
        "break", "case", "catch", "class", "const", "continue", "debugger", "default", "delete",
        "do", "else", "export", "extends", "false", "finally", "for", "function", "if", "import",
        "in", "instanceof", "new", "null", "return", "super", "switch", "this", "throw", "true",
        "try", "typeof", "var", "void", "while", "with", "yield", "let", "static", "enum", "await",
    }
)

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {")": "(", "]": "[", "}": "{"}


class MalformedSourceError(ValueError):
    """源码结构残缺，无法构造为函数。"""

    def __init__(self, message: str, line: int):
        self.line = line
        super().__init__(f"{message} (line {line})")


def is_identifier(name: str) -> bool:
    """判断是否为可用作函数名/参数名的标识符。"""
    return bool(IDENTIFIER_PATTERN.match(name)) and name not in RESERVED_WORDS


def is_parameter(param: str) -> bool:
    """判断单个形参文本是否可用，允许 `...rest` 与 `name = default` 形式。"""
    name = param.strip()
    if name.startswith("..."):
        name = name[3:]
    name = name.split("=", 1)[0].strip()
    return is_identifier(name)


def split_params(params: str) -> tuple[str, ...]:
    """把形参列表原文按逗号拆分，去掉空项。"""
    return tuple(param.strip() for param in params.split(",") if param.strip())


def _line_of(source: str, index: int) -> int:
    return source.count("\n", 0, index) + 1


def _skip_quoted(source: str, start: int, quote: str) -> int:
    """跳过字符串字面量，返回闭合引号之后的位置。"""
    i = start + 1
    while i < len(source):
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        # 注意：普通字符串不能跨行，模板字面量可以
        if ch == "\n" and quote != "`":
            break
        i += 1
    kind = "template literal" if quote == "`" else "string literal"
    raise MalformedSourceError(f"Unterminated {kind}", _line_of(source, start))


def check_source(source: str) -> None:
    """检查源码的括号、字面量与注释是否完整。

    契约：结构完整时返回 None；否则抛 `MalformedSourceError`，消息带行号。
    关键路径：单遍扫描，跳过字符串与注释，用栈匹配括号。
    """
    stack: list[tuple[str, int]] = []
    i = 0
    length = len(source)
    while i < length:
        ch = source[i]
        if ch in "'\"`":
            i = _skip_quoted(source, i, ch)
            continue
        if source.startswith("//", i):
            newline = source.find("\n", i)
            i = length if newline == -1 else newline + 1
            continue
        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            if end == -1:
                raise MalformedSourceError("Unterminated comment", _line_of(source, i))
            i = end + 2
            continue
        if ch in _OPENERS:
            stack.append((ch, i))
        elif ch in _CLOSERS:
            if not stack or stack[-1][0] != _CLOSERS[ch]:
                raise MalformedSourceError(f"Unexpected token '{ch}'", _line_of(source, i))
            stack.pop()
        i += 1

    if stack:
        opener, index = stack[-1]
        raise MalformedSourceError(
            f"Missing closing '{_OPENERS[opener]}' for '{opener}'",
            _line_of(source, index),
        )
