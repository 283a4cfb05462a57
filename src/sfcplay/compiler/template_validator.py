"""模块名称：模板静态校验

模块目的：在编译前对学习者输入的模板文本做轻量静态检查。
主要功能：
- 空模板拦截
- 标签数量配平（计数启发式，不做栈匹配）
- 指令语法合理性检查（指令必须带 `=` 赋值，少数无值指令除外）
使用场景：编排层编译前的第一步，也可单独供编辑器调用。
关键组件：`TemplateValidator`、`count_tag_imbalance`、`find_invalid_directives`
注意事项：计数与顺序无关，交叉嵌套的标签无法被发现；校验从不抛异常。
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from sfcplay.exceptions.compiler import TemplateValidationError
from sfcplay.log.logger import logger
from sfcplay.schema.compile import ValidationResult
from sfcplay.services.settings.base import CompilerSettings

EMPTY_TEMPLATE_ERROR = "Template cannot be empty"
UNMATCHED_TAGS_ERROR = "Unmatched HTML tags detected"

OPEN_TAG_PATTERN = re.compile(r"<[^/][^>]*>")
CLOSE_TAG_PATTERN = re.compile(r"</[^>]+>")
SELF_CLOSING_TAG_PATTERN = re.compile(r"<[^>]*/>")


def count_tag_imbalance(template: str) -> int:
    """返回 (开标签 - 自闭合标签) - 闭标签，配平时为 0。

    注意：开标签计数包含自闭合标签，因此需要减去。
    """
    opened = len(OPEN_TAG_PATTERN.findall(template))
    closed = len(CLOSE_TAG_PATTERN.findall(template))
    self_closing = len(SELF_CLOSING_TAG_PATTERN.findall(template))
    return opened - self_closing - closed


@lru_cache(maxsize=16)
def build_directive_pattern(prefix: str) -> re.Pattern[str]:
    """构造指令识别正则（按前缀缓存）。

    形如 `v-name`、`v-on:click.prevent`、`v-bind:[key]`；前缀前不能紧跟单词字符或 `-`。
    """
    return re.compile(
        rf"(?<![\w-])(?P<directive>(?P<name>{re.escape(prefix)}[A-Za-z][A-Za-z0-9-]*)"
        r"(?:[:.][\w\-\[\]]+)*)"
        r"(?P<assign>\s*=)?"
    )


def find_invalid_directives(template: str, pattern: re.Pattern[str], valueless: Iterable[str] = ()) -> list[str]:
    """返回未紧跟 `=` 的指令，按出现顺序。"""
    allowed = set(valueless)
    return [
        match.group("directive")
        for match in pattern.finditer(template)
        if match.group("assign") is None and match.group("name") not in allowed
    ]


class TemplateValidator:
    """模板校验器。

    契约：
    - 输入：任意模板文本
    - 输出：`ValidationResult`，`is_valid` 当且仅当无错误
    - 失败语义：内部异常转为单条 `Template validation error: ...`，从不抛出
    """

    def __init__(self, settings: CompilerSettings | None = None):
        self.settings = settings or CompilerSettings()

    def validate(self, template: str) -> ValidationResult:
        try:
            return ValidationResult(errors=self._collect_errors(template))
        except Exception as e:  # noqa: BLE001
            logger.debug("Error validating template", exc_info=True)
            return ValidationResult(errors=[f"Template validation error: {e}"])

    def _collect_errors(self, template: str) -> list[str]:
        if not isinstance(template, str):
            msg = f"expected template text, got {type(template).__name__}"
            raise TemplateValidationError(msg)

        # 注意：空模板直接返回，不再做后续检查
        if not template.strip():
            return [EMPTY_TEMPLATE_ERROR]

        errors = []
        if count_tag_imbalance(template) != 0:
            errors.append(UNMATCHED_TAGS_ERROR)

        # 注意：每次按当前前缀取正则，运行期修改 directive_prefix 立即生效
        directive_pattern = build_directive_pattern(self.settings.directive_prefix)
        invalid_directives = find_invalid_directives(
            template, directive_pattern, self.settings.valueless_directives
        )
        if invalid_directives:
            errors.append(f"Invalid directive syntax: {', '.join(invalid_directives)}")

        return errors
