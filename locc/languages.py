"""Registry of known languages and their file extensions."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models import Language

# name, display name, description, website, extensions
_BUILTIN_LANGUAGES: Tuple[Tuple[str, str, Optional[str], Optional[str], Tuple[str, ...]], ...] = (
    ("Asm", "Assembly", "Assembly language", None, ("asm", "s")),
    ("Batch", "Batch", "Windows batch script", None, ("bat", "cmd")),
    ("C", "C", "C programming language", "https://www.iso.org/standard/74528.html", ("c", "h")),
    ("CMake", "CMake", "CMake build scripts", "https://cmake.org/", ("cmake",)),
    ("Cpp", "C++", "C++ programming language", "https://isocpp.org/", ("cpp", "cc", "cxx", "hpp", "hh", "hxx")),
    ("CSharp", "C#", "C# programming language", "https://learn.microsoft.com/dotnet/csharp/", ("cs",)),
    ("Css", "CSS", "Cascading Style Sheets", "https://www.w3.org/Style/CSS/", ("css",)),
    ("Dart", "Dart", "Dart programming language", "https://dart.dev/", ("dart",)),
    ("Dockerfile", "Dockerfile", "Docker image build file", "https://docs.docker.com/reference/dockerfile/", ()),
    ("Go", "Go", "Go programming language", "https://go.dev/", ("go",)),
    ("Gradle", "Gradle", "Gradle build scripts (Groovy)", "https://gradle.org/", ("gradle",)),
    ("Groovy", "Groovy", "Apache Groovy programming language", "https://groovy-lang.org/", ("groovy",)),
    ("Haskell", "Haskell", "Haskell programming language", "https://www.haskell.org/", ("hs",)),
    ("Html", "HTML", "HyperText Markup Language", "https://html.spec.whatwg.org/", ("html", "htm")),
    ("Ini", "INI", "INI configuration file", None, ("ini", "cfg")),
    ("Java", "Java", "Java programming language", "https://www.java.com/", ("java",)),
    ("JavaScript", "JavaScript", "JavaScript programming language", "https://tc39.es/", ("js", "mjs", "cjs")),
    ("Json", "JSON", "JavaScript Object Notation", "https://www.json.org/", ("json",)),
    ("Jsx", "JSX", "JavaScript XML", None, ("jsx",)),
    ("Julia", "Julia", "Julia programming language", "https://julialang.org/", ("jl",)),
    ("Kotlin", "Kotlin", "Kotlin programming language", "https://kotlinlang.org/", ("kt", "kts")),
    ("Lua", "Lua", "Lua scripting language", "https://www.lua.org/", ("lua",)),
    ("Makefile", "Makefile", "Make build file", "https://www.gnu.org/software/make/", ("mk", "mak")),
    ("Markdown", "Markdown", "Markdown text format", "https://commonmark.org/", ("md", "markdown")),
    ("ObjectiveC", "Objective-C", "Objective-C programming language", None, ("m",)),
    ("ObjectiveCpp", "Objective-C++", "Objective-C++ programming language", None, ("mm",)),
    ("Perl", "Perl", "Perl programming language", "https://www.perl.org/", ("pl", "pm")),
    ("Php", "PHP", "PHP: Hypertext Preprocessor", "https://www.php.net/", ("php",)),
    ("PowerShell", "PowerShell", "PowerShell scripting language", None, ("ps1", "psm1")),
    ("Properties", "Properties", "Java properties file", None, ("properties",)),
    ("Python", "Python", "Python programming language", "https://www.python.org/", ("py", "pyi", "pyw")),
    ("R", "R", "R statistical language", "https://www.r-project.org/", ("r",)),
    ("Ruby", "Ruby", "Ruby programming language", "https://www.ruby-lang.org/", ("rb",)),
    ("Rust", "Rust", "Rust programming language", "https://www.rust-lang.org/", ("rs",)),
    ("Scala", "Scala", "Scala programming language", "https://www.scala-lang.org/", ("scala", "sc")),
    ("Sh", "Shell", "POSIX shell script", None, ("sh", "bash", "zsh")),
    ("Sql", "SQL", "Structured Query Language", None, ("sql",)),
    ("Swift", "Swift", "Swift programming language", "https://www.swift.org/", ("swift",)),
    ("Text", "Plain Text", "Plain text", None, ("txt",)),
    ("Toml", "TOML", "Tom's Obvious Minimal Language", "https://toml.io/", ("toml",)),
    ("TypeScript", "TypeScript", "TypeScript programming language", "https://www.typescriptlang.org/", ("ts", "mts", "cts")),
    ("Tsx", "TSX", "TypeScript JSX", None, ("tsx",)),
    ("Xml", "XML", "Extensible Markup Language", "https://www.w3.org/XML/", ("xml", "xsd", "xsl")),
    ("Yaml", "YAML", "YAML Ain't Markup Language", "https://yaml.org/", ("yaml", "yml")),
)

_BUILTIN_FILENAMES: Dict[str, str] = {
    "dockerfile": "Dockerfile",
    "makefile": "Makefile",
    "gnumakefile": "Makefile",
    "cmakelists.txt": "CMake",
}


class LanguageRegistry:
    """Known languages and the file extensions that map to them.

    A registry is created per run and handed to the counting engine, so
    extension changes made for one run never leak into another.
    """

    def __init__(self, languages: Iterable[Language] = ()) -> None:
        self._languages: Dict[str, Language] = {}
        self._display_names: Dict[str, str] = {}
        self._extensions: Dict[str, Language] = {}
        self._filenames: Dict[str, Language] = {}
        for language in languages:
            self.register(language)

    @classmethod
    def default(cls) -> "LanguageRegistry":
        """Return a registry populated with the built-in languages."""
        registry = cls()
        for name, display_name, description, website, extensions in _BUILTIN_LANGUAGES:
            language = Language(
                name=name,
                display_name=display_name,
                description=description,
                website=website,
            )
            registry.register(language)
            for extension in extensions:
                registry.add_extension(extension, language)
        for filename, name in _BUILTIN_FILENAMES.items():
            registry._filenames[filename] = registry.get(name)
        return registry

    def register(self, language: Language) -> Language:
        """Add a language, rejecting a display name already used by another one.

        Registering a name again replaces the earlier entry; its display name is
        released and its extension and filename mappings follow the new entry.
        """
        existing = self._display_names.get(language.display_name)
        if existing is not None and existing != language.name:
            raise ValueError(
                f"Display name '{language.display_name}' already registered for {existing}"
            )
        previous = self._languages.get(language.name)
        if previous is not None and previous != language:
            self._display_names.pop(previous.display_name, None)
            for mapping in (self._extensions, self._filenames):
                for key, mapped in mapping.items():
                    if mapped == previous:
                        mapping[key] = language
        self._languages[language.name] = language
        self._display_names[language.display_name] = language.name
        return language

    def get(self, name: str) -> Language:
        try:
            return self._languages[name]
        except KeyError:
            raise KeyError(f"Unknown language: {name}") from None

    def find(self, name: str) -> Optional[Language]:
        """Look a language up by name, falling back to its display name."""
        language = self._languages.get(name)
        if language is not None:
            return language
        by_display = self._display_names.get(name)
        return self._languages.get(by_display) if by_display else None

    def add_extension(self, extension: str, language: Language | str) -> None:
        """Map an extension (without the leading period) to a language, replacing any previous mapping."""
        if isinstance(language, str):
            language = self.get(language)
        elif language.name not in self._languages:
            self.register(language)
        self._extensions[_normalise_extension(extension)] = language

    def remove_extension(self, extension: str) -> None:
        """Forget an extension. Unknown extensions are ignored."""
        self._extensions.pop(_normalise_extension(extension), None)

    def extensions_for(self, language: Language) -> List[str]:
        return sorted(ext for ext, lang in self._extensions.items() if lang == language)

    def detect(self, path: Path) -> Optional[Language]:
        """Return the language for a file based on its name or extension."""
        by_name = self._filenames.get(path.name.lower())
        if by_name is not None:
            return by_name
        suffix = path.suffix
        if not suffix:
            return None
        return self._extensions.get(_normalise_extension(suffix))

    def __iter__(self) -> Iterator[Language]:
        return iter(sorted(self._languages.values(), key=lambda lang: lang.sort_key))

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, name: object) -> bool:
        return name in self._languages


def _normalise_extension(extension: str) -> str:
    return extension.lstrip(".").lower()


__all__ = ["LanguageRegistry"]
