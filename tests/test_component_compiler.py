import pytest

from sfcplay.compiler.component_compiler import ComponentCompiler
from sfcplay.compiler.extractor import UNRECOGNIZED_SCRIPT_WARNING
from sfcplay.compiler.template_validator import EMPTY_TEMPLATE_ERROR, UNMATCHED_TAGS_ERROR
from sfcplay.exceptions.compiler import ScriptExtractionError
from sfcplay.schema.compile import CompileResult
from sfcplay.services.settings.base import STYLES_NOT_SUPPORTED_WARNING, CompilerSettings


@pytest.mark.parametrize("script", ["", "setup() { const a = ref(1) }", "garbage {{"])
@pytest.mark.parametrize("style", ["", ".card { color: red }"])
def test_empty_template_always_fails(compiler, script, style):
    result = compiler.compile_sfc("  ", script, style)

    assert result.component is None
    assert result.error == EMPTY_TEMPLATE_ERROR
    assert result.warnings == []


def test_single_setup_block_compiles(compiler, counter_template, setup_script):
    result = compiler.compile_sfc(counter_template, setup_script)

    assert result.error is None
    assert result.ok
    assert result.component.initializer is not None
    assert result.component.setup.body.strip().startswith("const count = ref(0)")
    assert result.component.methods is None
    assert result.warnings == []


def test_imbalanced_template_is_reported_regardless_of_tag_names(compiler):
    for template in ("<div><span><br/></span>", "<ul><li><input/></li>"):
        validation = compiler.validate_template(template)

        assert validation.is_valid is False
        assert UNMATCHED_TAGS_ERROR in validation.errors

        result = compiler.compile_sfc(template)
        assert result.component is None
        assert result.error == UNMATCHED_TAGS_ERROR


def test_first_validation_error_is_returned(compiler):
    result = compiler.compile_sfc("<div v-if><span></div>", "setup() { go() }")

    assert result.error == UNMATCHED_TAGS_ERROR
    assert result.warnings == []


def test_setup_takes_precedence_over_data(compiler):
    script = "export default {\n  setup() { const a = ref(1) },\n  data() { return { b: 2 } }\n}"

    result = compiler.compile_sfc("<p>{{ a }}</p>", script)

    assert result.error is None
    assert result.component.setup is not None
    assert "ref(1)" in result.component.setup.body
    assert result.component.data is None
    assert result.warnings == []


def test_options_api_data_and_methods(compiler, counter_template):
    script = """export default {
  data() {
    return { count: 0 }
  },
  methods: {
    increment() { this.count++ },
    reset() { this.count = 0 }
  }
}"""

    result = compiler.compile_sfc(counter_template, script)

    assert result.error is None
    assert result.component.setup is None
    assert result.component.data.body.strip() == "count: 0"
    assert set(result.component.methods) == {"increment", "reset"}


def test_malformed_method_entry_is_skipped_without_error(compiler, counter_template, methods_script):
    result = compiler.compile_sfc(counter_template, methods_script)

    assert result.error is None
    assert set(result.component.methods) == {"increment", "reset"}
    assert result.warnings == []


@pytest.mark.parametrize("style", [".card { color: red }", "not css at all {{{", "x"])
def test_non_empty_style_adds_exactly_one_warning(compiler, counter_template, setup_script, style):
    result = compiler.compile_sfc(counter_template, setup_script, style)

    assert result.ok
    assert result.warnings == [STYLES_NOT_SUPPORTED_WARNING]


def test_blank_style_adds_no_warning(compiler, counter_template):
    assert compiler.compile_sfc(counter_template, "", " \n ").warnings == []


def test_compile_from_template_ignores_style_handling(compiler, counter_template, setup_script):
    result = compiler.compile_from_template(counter_template, setup_script)

    assert result.ok
    assert result.warnings == []


def test_compilation_is_idempotent(compiler, counter_template, methods_script):
    first = compiler.compile_sfc(counter_template, methods_script, ".a {}")
    second = compiler.compile_sfc(counter_template, methods_script, ".a {}")

    assert first.error == second.error
    assert first.warnings == second.warnings
    assert first.component == second.component
    assert first.component is not second.component
    assert first.component.template == second.component.template
    assert (first.component.initializer is None) == (second.component.initializer is None)
    assert first.component.has_methods == second.component.has_methods


def test_template_text_is_trimmed(compiler):
    result = compiler.compile_sfc("\n  <p>hi</p>  \n")

    assert result.component.template == "<p>hi</p>"


def test_unrecognized_script_is_a_warning(compiler):
    result = compiler.compile_sfc("<p>{{ title }}</p>", "const title = ref('Hello Nuxt!')", ".p {}")

    assert result.ok
    assert result.component.initializer is None
    assert result.warnings == [UNRECOGNIZED_SCRIPT_WARNING, STYLES_NOT_SUPPORTED_WARNING]


def test_unrecognized_script_warning_can_be_disabled():
    compiler = ComponentCompiler(CompilerSettings(warn_on_unrecognized_script=False))

    assert compiler.compile_sfc("<p></p>", "const a = 1").warnings == []


def test_extraction_failure_is_not_fatal(compiler, monkeypatch):
    def broken_extract(script):
        msg = "pattern engine exploded"
        raise ScriptExtractionError(msg)

    monkeypatch.setattr(compiler.extractor, "extract", broken_extract)

    result = compiler.compile_sfc("<p></p>", "setup() { go() }")

    assert result.ok
    assert result.warnings == ["Script parsing warning: pattern engine exploded"]


def test_synthesis_failure_is_an_error(compiler, counter_template):
    # Nested braces truncate the setup body, which the construction step rejects.
    result = compiler.compile_sfc(counter_template, "setup() { watch(a, () => { log() }) }", ".a {}")

    assert result.component is None
    assert result.error == "Compilation error: setup(): Missing closing '}' for '{' (line 1)"
    assert result.warnings == []


def test_synthesis_failure_keeps_accumulated_warnings(settings):
    class RejectingHost:
        def define_component(self, **kwargs):
            msg = "host refused"
            raise ValueError(msg)

    compiler = ComponentCompiler(settings, host=RejectingHost())

    result = compiler.compile_sfc("<p></p>", "let x = 1")

    assert result.error == "Compilation error: Error creating component. ValueError(host refused)."
    assert result.warnings == [UNRECOGNIZED_SCRIPT_WARNING]


def test_unexpected_failure_never_escapes(compiler, monkeypatch):
    def explode(template, fragments):
        msg = "kaboom"
        raise RuntimeError(msg)

    monkeypatch.setattr(compiler.synthesizer, "synthesize", explode)

    sfc_result = compiler.compile_sfc("<p></p>", "", ".a {}")
    template_result = compiler.compile_from_template("<p></p>")

    assert sfc_result.error == "SFC compilation error: kaboom"
    assert sfc_result.warnings == []
    assert template_result.error == "Compilation error: kaboom"


@pytest.mark.parametrize("template", [None, 7])
def test_non_text_template_is_reported(compiler, template):
    result = compiler.compile_sfc(template, "setup() {}")

    assert result.component is None
    assert result.error.startswith("Template validation error:")


def test_none_script_is_treated_as_empty(compiler):
    result = compiler.compile_sfc("<p></p>", None, None)

    assert result.ok
    assert result.warnings == []


def test_compile_result_is_never_partially_populated():
    with pytest.raises(ValueError, match="exactly one of component or error"):
        CompileResult(warnings=["dangling"])
