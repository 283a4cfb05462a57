import pytest

from sfcplay.compiler.component_compiler import ComponentCompiler
from sfcplay.services import manager
from sfcplay.services.settings.base import CompilerSettings

SFCPLAY_ENV_VARS = (
    "SFCPLAY_DIRECTIVE_PREFIX",
    "SFCPLAY_VALUELESS_DIRECTIVES",
    "SFCPLAY_SETUP_BINDINGS",
    "SFCPLAY_TRUST_LEVEL",
    "SFCPLAY_WARN_ON_UNRECOGNIZED_SCRIPT",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    for name in SFCPLAY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Every test starts without a shared compiler
    monkeypatch.setattr(manager, "_service_manager", None)


@pytest.fixture
def settings():
    return CompilerSettings()


@pytest.fixture
def compiler(settings):
    return ComponentCompiler(settings=settings)


@pytest.fixture
def counter_template():
    return """
<div class="counter">
  <h3>Counter: {{ count }}</h3>
  <button @click="increment">+</button>
  <button @click="reset" class="reset">Reset</button>
  <p v-if="count > 10" class="warning">Count is getting high!</p>
  <p v-else>Keep clicking</p>
</div>
"""


@pytest.fixture
def setup_script():
    return """export default {
  setup() {
    const count = ref(0)
    const doubled = computed(() => count.value * 2)
  }
}"""


@pytest.fixture
def methods_script():
    return """export default {
  methods: {
    increment() {
      this.count++
    },
    label: 'not a method',
    broken() return 1,
    reset(value) { this.count = value }
  }
}"""
