"""Module entrypoint for ``python -m pdfpager``."""

from .cli import main


if __name__ == "__main__":
    main()
