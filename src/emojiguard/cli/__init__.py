"""Command line interface (``emojiguard``)."""
