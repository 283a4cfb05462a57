"""
模块名称：CLI 包入口

本模块按需暴露 CLI 应用，避免导入包时加载 typer。
"""

__all__ = ["app"]


def __getattr__(name: str):
    """按需返回 CLI 应用。"""
    if name == "app":
        from sfcplay.cli.commands import app

        return app
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
