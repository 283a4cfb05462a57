"""日志配置模块。

本模块基于 structlog 构建编译引擎的日志体系，支持控制台/JSON 输出与文件轮转。
主要功能包括：
- 动态配置日志级别与输出格式
- 按需挂载轮转文件日志
- 开发模式下记录调用位置
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import TypedDict

import structlog
from platformdirs import user_cache_dir
from typing_extensions import NotRequired

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# 日志级别名称映射
LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEV = os.getenv("SFCPLAY_DEV", "false").lower() == "true"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024


class LogConfig(TypedDict):
    """Configuration for logging."""

    log_level: NotRequired[str]
    log_file: NotRequired[Path]
    disable: NotRequired[bool]
    log_env: NotRequired[str]


def _parse_rotation(log_rotation: str | None) -> int:
    """解析 `"<n> MB"` 形式的轮转配置，失败时回退默认 10MB。"""
    if not log_rotation:
        return DEFAULT_MAX_BYTES
    parts = log_rotation.split()
    expected_parts = 2
    if len(parts) >= expected_parts and parts[1].upper() == "MB":
        try:
            mb = int(parts[0])
        except ValueError:
            return DEFAULT_MAX_BYTES
        if mb > 0:
            return mb * 1024 * 1024
    return DEFAULT_MAX_BYTES


def configure(
    *,
    log_level: str | None = None,
    log_file: Path | None = None,
    disable: bool | None = False,
    log_env: str | None = None,
    log_rotation: str | None = None,
    cache: bool | None = None,
    output_file=None,
) -> None:
    """配置日志系统。

    关键路径（三步）：
    1) 解析环境变量与参数优先级；
    2) 组装 structlog 处理器与输出格式；
    3) 初始化 logger 并按需挂载文件日志。
    """
    # 注意：若已配置且最小级别一致则直接返回
    cfg = structlog.get_config() if structlog.is_configured() else {}
    wrapper_class = cfg.get("wrapper_class")
    current_min_level = getattr(wrapper_class, "min_level", None)
    if os.getenv("SFCPLAY_LOG_LEVEL", "").upper() in VALID_LOG_LEVELS and log_level is None:
        log_level = os.getenv("SFCPLAY_LOG_LEVEL")

    if log_level is None:
        log_level = "ERROR"

    requested_min_level = LOG_LEVEL_MAP.get(log_level.upper(), logging.ERROR)
    if current_min_level == requested_min_level and not disable:
        return

    if log_file is None:
        env_log_file = os.getenv("SFCPLAY_LOG_FILE", "")
        log_file = Path(env_log_file) if env_log_file else None

    if log_env is None:
        log_env = os.getenv("SFCPLAY_LOG_ENV", "")

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    # 仅在 DEV 模式记录调用位置
    if DEV:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            )
        )

    if log_env.lower() in {"container", "container_json"}:
        processors.append(structlog.processors.JSONRenderer())
    elif log_env.lower() == "container_csv":
        key_order = ["timestamp", "level", "event"]
        if DEV:
            key_order += ["filename", "func_name", "lineno"]
        processors.append(structlog.processors.KeyValueRenderer(key_order=key_order, drop_missing=True))
    elif os.getenv("SFCPLAY_PRETTY_LOGS", "true").lower() == "true":
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    wrapper_class = structlog.make_filtering_bound_logger(requested_min_level)
    wrapper_class.min_level = requested_min_level

    # 注意：默认输出到 stderr，避免污染 CLI 的 stdout 结果
    log_output_file = output_file if output_file is not None else sys.stderr

    structlog.configure(
        processors=processors,
        wrapper_class=wrapper_class,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=log_output_file)
        if not log_file
        else structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache if cache is not None else True,
    )

    if log_file:
        if not log_file.parent.exists():
            log_file = Path(user_cache_dir("sfcplay")) / "sfcplay.log"
            log_file.parent.mkdir(parents=True, exist_ok=True)

        # 注意：structlog 无内建轮转，使用 stdlib 处理
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_parse_rotation(log_rotation),
            backupCount=5,
        )
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.root.addHandler(file_handler)
        logging.root.setLevel(requested_min_level)

    global logger  # noqa: PLW0603
    logger = structlog.get_logger()

    if disable:
        # 通过设置极高日志级别来禁用输出
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
        )

    logger.debug("Logger set up with log level: %s", log_level)


# 初始化 logger（后续会在 configure 中重新配置）
logger: structlog.BoundLogger = structlog.get_logger()
configure(log_level="CRITICAL", cache=False)
