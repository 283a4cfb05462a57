"""
模块名称：组件编译编排

本模块是编译引擎的公共入口，按“校验 -> 提取 -> 合成 -> 样式提示”的顺序编排一次编译。
主要功能包括：
- `compile_sfc`：编译模板、脚本与样式三段文本
- `compile_from_template`：仅编译模板与脚本（不处理样式）
- `validate_template`：单独校验模板

设计背景：编辑器状态层只需要结构化结果，任何内部失败都必须在此边界内转为 `CompileResult`。
注意事项：编译器不持有跨调用状态；一次编译同步执行到底，不产生 I/O。
"""

from sfcplay.compiler.extractor import UNRECOGNIZED_SCRIPT_WARNING, ScriptExtractor
from sfcplay.compiler.host import ComponentHost
from sfcplay.compiler.synthesizer import DescriptorSynthesizer
from sfcplay.compiler.template_validator import TemplateValidator
from sfcplay.exceptions.compiler import ScriptExtractionError, ScriptSynthesisError
from sfcplay.log.logger import logger
from sfcplay.schema.compile import CompileResult, ScriptFragments, ValidationResult
from sfcplay.services.settings.base import STYLES_NOT_SUPPORTED_WARNING, CompilerSettings


class ComponentCompiler:
    """组件编译器。

    契约：
    - 输入：模板、脚本、样式文本（均可为任意文本）
    - 输出：`CompileResult`，组件与错误二选一
    - 失败语义：从不抛异常；模板错误与合成错误为致命错误，提取问题与样式仅产生警告
    """

    def __init__(self, settings: CompilerSettings | None = None, host: ComponentHost | None = None):
        self.settings = settings or CompilerSettings()
        self.validator = TemplateValidator(self.settings)
        self.extractor = ScriptExtractor()
        self.synthesizer = DescriptorSynthesizer(self.settings, host)

    def validate_template(self, template: str) -> ValidationResult:
        """校验模板文本。"""
        return self.validator.validate(template)

    def compile_from_template(self, template: str, script: str = "") -> CompileResult:
        """编译模板与脚本。"""
        try:
            return self._compile(template, script)
        except Exception as e:  # noqa: BLE001
            logger.debug("Unexpected compilation failure", exc_info=True)
            return CompileResult.failure(f"Compilation error: {e}")

    def compile_sfc(self, template: str, script: str = "", style: str = "") -> CompileResult:
        """编译单文件组件的三段文本。

        关键路径：
        1) 模板校验失败直接返回第一条错误；
        2) 提取与合成脚本片段；
        3) 成功时若样式非空，追加一条固定的“不支持样式”警告。
        """
        try:
            result = self._compile(template, script)
            if result.ok and style and style.strip():
                # 注意：样式文本从不解析，也不会成为错误来源
                result.warnings.append(STYLES_NOT_SUPPORTED_WARNING)
        except Exception as e:  # noqa: BLE001
            logger.debug("Unexpected SFC compilation failure", exc_info=True)
            return CompileResult.failure(f"SFC compilation error: {e}")
        return result

    def _compile(self, template: str, script: str) -> CompileResult:
        validation = self.validator.validate(template)
        if not validation.is_valid:
            logger.debug("Template rejected", errors=validation.errors)
            return CompileResult.failure(validation.errors[0])

        warnings: list[str] = []
        fragments = self._extract(script or "", warnings)

        try:
            component = self.synthesizer.synthesize(template, fragments)
        except ScriptSynthesisError as e:
            logger.debug("Synthesis failed", error=str(e))
            return CompileResult.failure(f"Compilation error: {e}", warnings)

        return CompileResult.success(component, warnings)

    def _extract(self, script: str, warnings: list[str]) -> ScriptFragments:
        try:
            fragments = self.extractor.extract(script)
        except ScriptExtractionError as e:
            warnings.append(f"Script parsing warning: {e}")
            return ScriptFragments()

        if fragments.is_empty and script.strip() and self.settings.warn_on_unrecognized_script:
            warnings.append(UNRECOGNIZED_SCRIPT_WARNING)
        return fragments
