"""Container entrypoint: ``python main.py``, port taken from ``PORT``."""
from greeter.server import run


if __name__ == "__main__":
    run()
