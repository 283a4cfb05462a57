from sfcplay.services.settings.base import STYLES_NOT_SUPPORTED_WARNING, CompilerSettings

__all__ = ["STYLES_NOT_SUPPORTED_WARNING", "CompilerSettings"]
