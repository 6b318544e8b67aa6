import os

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")


def open_file(filename: str) -> str:
    with open(os.path.join(DATA_DIR, filename), "r", encoding="utf8") as f:
        return f.read()


def read_expressions(filename: str) -> list[str]:
    # One expression per line
    return open_file(filename).splitlines()
