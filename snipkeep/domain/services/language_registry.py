"""
Domain service: registry of known languages.

Pure Python only. Lookups are case-insensitive. ``resolve`` never fails: a
missing or renamed language falls back to ``Language.default()`` so that a
snippet referencing it stays searchable.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

from snipkeep.domain.entities.language import Language
from snipkeep.errors import LanguageNotFound

# name -> (extension, linguist color)
_BUILTIN_LANGUAGES = {
    "bash": (".sh", "#89e051"),
    "c": (".c", "#555555"),
    "cpp": (".cpp", "#f34b7d"),
    "csharp": (".cs", "#178600"),
    "css": (".css", "#563d7c"),
    "dockerfile": ("", "#384d54"),
    "go": (".go", "#00add8"),
    "haskell": (".hs", "#5e5086"),
    "html": (".html", "#e34c26"),
    "java": (".java", "#b07219"),
    "javascript": (".js", "#f1e05a"),
    "json": (".json", "#292929"),
    "kotlin": (".kt", "#a97bff"),
    "lua": (".lua", "#000080"),
    "makefile": ("", "#427819"),
    "markdown": (".md", "#083fa1"),
    "php": (".php", "#4f5d95"),
    "python": (".py", "#3572a5"),
    "r": (".r", "#198ce7"),
    "ruby": (".rb", "#701516"),
    "rust": (".rs", "#dea584"),
    "scala": (".scala", "#c22d40"),
    "sql": (".sql", "#e38c00"),
    "swift": (".swift", "#f05138"),
    "text": (".txt", "#ffffff"),
    "toml": (".toml", "#9c4221"),
    "typescript": (".ts", "#3178c6"),
    "xml": (".xml", "#0060ac"),
    "yaml": (".yaml", "#cb171e"),
}


class LanguageRegistry:
    """Mapping language name -> Language with a default fallback profile."""

    def __init__(self, languages: Iterable[Language] = (), default: Optional[Language] = None) -> None:
        self._languages: Dict[str, Language] = {}
        self.default = default or Language.default()
        for language in languages:
            self.register(language)

    @classmethod
    def builtin(cls) -> "LanguageRegistry":
        return cls(
            Language(name=name, extension=ext, color=color)
            for name, (ext, color) in _BUILTIN_LANGUAGES.items()
        )

    @staticmethod
    def _key(name: str) -> str:
        return (name or "").strip().lower()

    def register(self, language: Language) -> None:
        self._languages[self._key(language.name)] = language

    def get(self, name: str) -> Optional[Language]:
        return self._languages.get(self._key(name))

    def resolve(self, name: str) -> Language:
        return self.get(name) or self.default

    def require(self, name: str) -> Language:
        language = self.get(name)
        if language is None:
            raise LanguageNotFound(name)
        return language

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    def __iter__(self) -> Iterator[Language]:
        return iter(self._languages.values())
