"""
模块名称：编译过程数据模型

本模块定义编译引擎对外与对内传递的数据结构。
主要功能包括：
- `CompileResult`：编译结果（组件或错误二选一，附带警告）
- `ValidationResult`：模板校验结果
- `ScriptFragments` / `MethodFragment`：从脚本文本中识别出的原始片段

设计背景：编辑器状态层只消费结构化结果，不应接收异常。
注意事项：`CompileResult` 永远不会部分填充，构造时即校验。
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from sfcplay.schema.descriptor import ComponentDescriptor


class CompileResult(BaseModel):
    """编译结果。

    契约：
    - `component` 与 `error` 恰好一个非空
    - `warnings` 可在成功或失败时非空，顺序即产生顺序
    """

    component: ComponentDescriptor | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_exclusive(self) -> "CompileResult":
        if (self.component is None) == (self.error is None):
            msg = "CompileResult must carry exactly one of component or error"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, component: ComponentDescriptor, warnings: list[str] | None = None) -> "CompileResult":
        return cls(component=component, warnings=list(warnings or []))

    @classmethod
    def failure(cls, error: str, warnings: list[str] | None = None) -> "CompileResult":
        return cls(error=error, warnings=list(warnings or []))

    @property
    def ok(self) -> bool:
        return self.component is not None


class ValidationResult(BaseModel):
    """模板校验结果，`is_valid` 当且仅当错误列表为空。"""

    errors: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.errors


class MethodFragment(BaseModel):
    """方法表中的单个条目原文。"""

    model_config = ConfigDict(frozen=True)

    name: str
    params: str
    body: str
    source: str


class ScriptFragments(BaseModel):
    """脚本片段集合（内部使用，随即交给合成器）。

    契约：`setup_body` 与 `data_body` 至多一个非空；方法表独立存在。
    """

    model_config = ConfigDict(frozen=True)

    setup_body: str | None = None
    data_body: str | None = None
    methods: dict[str, MethodFragment] | None = None

    @model_validator(mode="after")
    def validate_single_initializer(self) -> "ScriptFragments":
        if self.setup_body is not None and self.data_body is not None:
            msg = "At most one initializer shape can be extracted"
            raise ValueError(msg)
        return self

    @property
    def is_empty(self) -> bool:
        return self.setup_body is None and self.data_body is None and not self.methods
