import pytest

from snipkeep.domain.entities.language import Language
from snipkeep.domain.services.language_registry import LanguageRegistry
from snipkeep.errors import LanguageNotFound


def test_builtin_registry_knows_common_languages():
    registry = LanguageRegistry.builtin()
    assert "python" in registry
    assert "Go" in registry
    assert registry.get("rust").extension == ".rs"
    assert len(registry) == len(list(registry))


def test_resolve_falls_back_to_default_on_miss():
    registry = LanguageRegistry.builtin()
    assert registry.resolve("brainfuck") == Language.default()
    assert registry.resolve("") == Language.default()


def test_require_raises_language_not_found_with_key():
    registry = LanguageRegistry.builtin()
    with pytest.raises(LanguageNotFound) as exc:
        registry.require("brainfuck")
    assert exc.value.language == "brainfuck"
    assert "brainfuck" in str(exc.value)


def test_custom_default_and_register():
    fallback = Language(name="plain", extension="", color="#000000")
    registry = LanguageRegistry(default=fallback)
    assert registry.resolve("python") is fallback
    registry.register(Language(name="Python", extension=".py", color="#3572a5"))
    assert registry.resolve("python").extension == ".py"
