"""
模块名称：settings.base

本模块定义编译引擎的运行配置，集中处理环境变量与默认值。
主要功能包括：
- CompilerSettings：指令前缀、响应式绑定名、信任级别等配置
- CustomSource：环境变量解析扩展（支持逗号分隔列表）

设计背景：编辑器宿主不同，指令前缀与可注入的响应式原语也不同，需要可配置。
注意事项：所有配置项以 `SFCPLAY_` 前缀读取环境变量。
"""

from typing import Any

from pydantic import field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, EnvSettingsSource, PydanticBaseSettingsSource, SettingsConfigDict
from typing_extensions import override

from sfcplay.schema.descriptor import TrustLevel

STYLES_NOT_SUPPORTED_WARNING = "Custom styles are not fully supported in this demo"


def is_list_of_any(field: FieldInfo) -> bool:
    """判断字段类型是否为列表或可选列表。

    失败语义：类型解析失败时返回 False。
    """
    if field.annotation is None:
        return False
    try:
        union_args = field.annotation.__args__ if hasattr(field.annotation, "__args__") else []

        return field.annotation.__origin__ is list or any(
            arg.__origin__ is list for arg in union_args if hasattr(arg, "__origin__")
        )
    except AttributeError:
        return False


class CustomSource(EnvSettingsSource):
    """环境变量解析扩展。

    契约：列表字段允许 `a,b,c` 形式；其余交给父类解析。
    """

    @override
    def prepare_field_value(self, field_name: str, field: FieldInfo, value: Any, value_is_complex: bool) -> Any:  # type: ignore[misc]
        # 注意：允许逗号分隔的列表形式，降低配置门槛
        if is_list_of_any(field):
            if isinstance(value, str):
                value = [item.strip() for item in value.split(",") if item.strip()]
            if isinstance(value, list):
                return value

        return super().prepare_field_value(field_name, field, value, value_is_complex)


class CompilerSettings(BaseSettings):
    """编译引擎配置。

    契约：
    - 输入：环境变量 `SFCPLAY_*` 与构造参数
    - 输出：只在构造编译器时读取一次的配置对象
    - 失败语义：非法前缀或绑定名抛出 ValidationError
    """

    directive_prefix: str = "v-"
    """模板中指令属性的前缀。"""

    valueless_directives: list[str] = ["v-else", "v-cloak", "v-pre", "v-once", "v-slot"]
    """允许不带 `=` 出现的指令。"""

    setup_bindings: list[str] = ["ref", "computed", "watch", "onMounted"]
    """注入 setup() 函数的宿主响应式原语名称。"""

    trust_level: TrustLevel = TrustLevel.UNTRUSTED
    """合成脚本函数携带的信任级别。"""

    warn_on_unrecognized_script: bool = True
    """脚本非空但未识别出任何片段时是否给出警告。"""

    model_config = SettingsConfigDict(validate_assignment=True, extra="ignore", env_prefix="SFCPLAY_")

    @field_validator("directive_prefix")
    @classmethod
    def validate_directive_prefix(cls, value: str) -> str:
        if not value or any(ch.isspace() for ch in value):
            msg = "directive_prefix must be a non-empty token without whitespace"
            raise ValueError(msg)
        return value

    @field_validator("setup_bindings")
    @classmethod
    def validate_setup_bindings(cls, value: list[str]) -> list[str]:
        from sfcplay.compiler.source_check import is_identifier

        invalid = [name for name in value if not is_identifier(name)]
        if invalid:
            msg = f"Invalid setup binding names: {', '.join(invalid)}"
            raise ValueError(msg)
        # 注意：保持顺序去重，重复参数名会被宿主拒绝
        return list(dict.fromkeys(value))

    @classmethod
    @override
    def settings_customise_sources(  # type: ignore[misc]
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, CustomSource(settings_cls))
