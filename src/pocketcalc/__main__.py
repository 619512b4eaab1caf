"""Allow ``python -m pocketcalc``."""

from pocketcalc.cli import app

if __name__ == "__main__":
    app(prog_name="pocketcalc")
