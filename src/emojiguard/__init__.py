"""emojiguard package.

Modules:
- emojiguard.cli: CLI entry point package (emojiguard)
- emojiguard.lib.emoji: Classification, glyph oracle, priority table, pipeline
- emojiguard.lib.messages: Message store reader and batch feed
- emojiguard.lib.core: Configuration, paths, version
- emojiguard.lib.util: Logging, terminal colors, cell widths
"""

__all__ = ["cli", "lib"]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("emojiguard")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
