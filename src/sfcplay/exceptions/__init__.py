from sfcplay.exceptions.compiler import (
    CompilerError,
    ScriptExtractionError,
    ScriptSynthesisError,
    TemplateValidationError,
)

__all__ = [
    "CompilerError",
    "ScriptExtractionError",
    "ScriptSynthesisError",
    "TemplateValidationError",
]
