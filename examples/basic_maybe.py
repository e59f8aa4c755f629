"""
Optional values: lookup, transformation and iteration.

Run: python examples/basic_maybe.py
"""
from maybepy import NOTHING, Just, from_nullable, maybe


SETTINGS = {"port": "8080", "debug": ""}


def setting(key: str):
    return from_nullable(SETTINGS.get(key))


def parse_port(raw: str):
    return Just(int(raw)) if raw.isdigit() else NOTHING


def main():
    port = setting("port").flat_map(parse_port).get(80)
    timeout = setting("timeout").map(float).get(30.0)
    print(f"port={port} timeout={timeout}")

    # Present-but-falsy values are still present
    print("debug set:", bool(setting("debug")))

    # Iterate 0 or 1 values
    for p in maybe(port).map(lambda p: p + 1):
        print("next port", p)

    # Total extraction
    print(setting("host").fold(lambda: "localhost", str.lower))


if __name__ == "__main__":
    main()
