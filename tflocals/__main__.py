"""Allow tflocals to be executable through `python -m tflocals`."""
from tflocals.cli import cli


if __name__ == "__main__":  # pragma: no cover
    cli(prog_name="tflocals")
