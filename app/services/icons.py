"""
Language name -> devicon slug / icon URL resolution.
"""

ICON_URL_TEMPLATE = "https://cdn.jsdelivr.net/gh/devicons/devicon/icons/{slug}/{slug}-original.svg"
FALLBACK_ICON_URL = "https://cdn.jsdelivr.net/gh/devicons/devicon/icons/devicon/devicon-original.svg"

# Normalized (lower-cased, stripped) language name -> devicon slug
LANGUAGE_ALIASES: dict[str, str] = {
    "js": "javascript",
    "javascript": "javascript",
    "jsx": "react",
    "ts": "typescript",
    "typescript": "typescript",
    "tsx": "react",
    "py": "python",
    "python": "python",
    "java": "java",
    "kotlin": "kotlin",
    "c": "c",
    "cpp": "cplusplus",
    "c++": "cplusplus",
    "cs": "csharp",
    "c#": "csharp",
    "go": "go",
    "golang": "go",
    "rust": "rust",
    "rs": "rust",
    "ruby": "ruby",
    "rb": "ruby",
    "php": "php",
    "swift": "swift",
    "dart": "dart",
    "lua": "lua",
    "r": "r",
    "scala": "scala",
    "haskell": "haskell",
    "elixir": "elixir",
    "html": "html5",
    "css": "css3",
    "scss": "sass",
    "sass": "sass",
    "vue": "vuejs",
    "vue.js": "vuejs",
    "svelte": "svelte",
    "sh": "bash",
    "shell": "bash",
    "bash": "bash",
    "zsh": "bash",
    "powershell": "powershell",
    "sql": "azuresqldatabase",
    "json": "json",
    "yaml": "yaml",
    "markdown": "markdown",
    "docker": "docker",
    "dockerfile": "docker",
    "nix": "nixos",
    "zig": "zig",
    "gdscript": "godot",
    "julia": "julia",
    "perl": "perl",
}


def normalize_language(language_name: str | None) -> str:
    return (language_name or "").strip().lower()


def resolve_language(language_name: str | None) -> tuple[str, str]:
    """
    Resolve a free-text language name to ``(canonical_name, icon_url)``.

    Unknown languages keep their normalized name and get the fallback icon.
    """
    normalized = normalize_language(language_name)
    slug = LANGUAGE_ALIASES.get(normalized)
    if slug is None:
        return normalized, FALLBACK_ICON_URL
    return slug, ICON_URL_TEMPLATE.format(slug=slug)


def resolve_icon(language_name: str | None) -> str:
    return resolve_language(language_name)[1]
