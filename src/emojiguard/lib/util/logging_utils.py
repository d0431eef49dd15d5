"""Utility functions for logging."""


def _log_debug(message: str) -> None:
    """Append a simple debug line to the emojiguard library log.

    This is intentionally very small and best-effort so it never interferes
    with sanitization. Loaders record skipped glyph entries here and the
    pipeline reports a missing glyph set through it by default.

    Writes timestamped lines to ``state_root()/emojiguard.log``. Fully
    exception-safe: any IO error is silently ignored so this function never
    raises or affects callers.
    """
    try:
        import time

        from ..core.config import state_root

        log_path = state_root() / "emojiguard.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass


def _log_warning(message: str) -> None:
    """Record *message* in the library log and echo it to stderr.

    Used as the CLI's warning hook for non-fatal configuration problems
    such as an empty glyph set.
    """
    import sys

    _log_debug(f"WARNING: {message}")
    print(f"Warning: {message}", file=sys.stderr)
