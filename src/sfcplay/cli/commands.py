"""
模块名称：sfcplay CLI 命令实现

本模块提供命令行入口，便于在编辑器之外直接编译或校验组件文件。主要功能包括：
- `compile`：编译模板/脚本/样式文件并输出结果
- `validate`：只校验模板文件

关键组件：
- `app`：typer 应用，对应 `sfcplay` 控制台脚本

注意事项：结果输出到 stdout，日志输出到 stderr；编译失败或模板无效时退出码为 1。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson
import typer
from rich.console import Console
from rich.markup import escape

from sfcplay.log.logger import configure
from sfcplay.schema.compile import CompileResult
from sfcplay.services.deps import get_compiler

app = typer.Typer(name="sfcplay", help="Compile single-file component playground sources.", no_args_is_help=True)

console = Console()

OUTPUT_FORMATS = ("json", "text")


def _read_text(path: Path | None, param_hint: str) -> str:
    if path is None:
        return ""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"{path} is not valid UTF-8 text ({e.reason} at byte {e.start})"
        raise typer.BadParameter(msg, param_hint=param_hint) from e


def _check_format(output_format: str) -> str:
    if output_format not in OUTPUT_FORMATS:
        msg = f"Output format must be one of: {', '.join(OUTPUT_FORMATS)}"
        raise typer.BadParameter(msg, param_hint="--format")
    return output_format


def result_payload(result: CompileResult) -> dict[str, Any]:
    """把编译结果转为可序列化字典，组件以宿主定义（函数源码）给出。"""
    return {
        "success": result.ok,
        "error": result.error,
        "warnings": result.warnings,
        "component": result.component.to_definition() if result.component is not None else None,
    }


def _echo_json(payload: dict[str, Any]) -> None:
    typer.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8"))


@app.command("compile")
def compile_command(
    template_path: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, readable=True, help="Path to the template markup file"
    ),
    script_path: Path | None = typer.Option(  # noqa: B008
        None, "--script", "-s", exists=True, dir_okay=False, readable=True, help="Path to the component script"
    ),
    style_path: Path | None = typer.Option(  # noqa: B008
        None, "--style", exists=True, dir_okay=False, readable=True, help="Path to the component style sheet"
    ),
    output_format: str = typer.Option("json", "--format", "-f", help="Output format: json or text"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log compilation steps to stderr"),  # noqa: FBT001, FBT003
) -> None:
    """编译组件文件并输出结果。

    契约：输出 `success/error/warnings/component`；失败时退出码为 1。
    """
    output_format = _check_format(output_format)
    if verbose:
        configure(log_level="DEBUG")

    result = get_compiler().compile_sfc(
        _read_text(template_path, "TEMPLATE"), _read_text(script_path, "--script"), _read_text(style_path, "--style")
    )

    if output_format == "json":
        _echo_json(result_payload(result))
    else:
        if result.error:
            console.print(f"[bold red]error:[/bold red] {escape(result.error)}", markup=True, highlight=False)
        for warning in result.warnings:
            console.print(f"[yellow]warning:[/yellow] {escape(warning)}", markup=True, highlight=False)
        if result.component is not None:
            definition = result.component.to_definition()
            console.print(definition["template"], markup=False, highlight=False)
            for key in ("setup", "data"):
                if key in definition:
                    console.print(definition[key], markup=False, highlight=False)
            for source in definition.get("methods", {}).values():
                console.print(source, markup=False, highlight=False)

    if not result.ok:
        raise typer.Exit(1)


@app.command("validate")
def validate_command(
    template_path: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, readable=True, help="Path to the template markup file"
    ),
    output_format: str = typer.Option("json", "--format", "-f", help="Output format: json or text"),
) -> None:
    """校验模板文件；模板无效时退出码为 1。"""
    output_format = _check_format(output_format)
    validation = get_compiler().validate_template(_read_text(template_path, "TEMPLATE"))

    if output_format == "json":
        _echo_json(validation.model_dump())
    elif validation.is_valid:
        console.print("[green]Template is valid[/green]", markup=True, highlight=False)
    else:
        for error in validation.errors:
            console.print(f"[bold red]error:[/bold red] {escape(error)}", markup=True, highlight=False)

    if not validation.is_valid:
        raise typer.Exit(1)
