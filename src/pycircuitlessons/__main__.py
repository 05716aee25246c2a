"""Module entrypoint for `python -m pycircuitlessons`."""

from .cli import main_entry

if __name__ == "__main__":  # pragma: no cover
    main_entry()
