"""Module entry point for `python -m cmdscore.cli`."""

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    from cmdscore.cli import cli

    cli()
