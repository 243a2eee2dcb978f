"""Allow running llamacommit as ``python -m llamacommit``."""

from llamacommit.cli import app

if __name__ == "__main__":
    app(prog_name="llamacommit")
