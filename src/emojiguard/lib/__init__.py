"""Library layer: everything the CLI uses, importable without argparse."""
