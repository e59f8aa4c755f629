"""
Turning failures into data with attempt/attempt_async.

Run: python examples/try_either.py
"""
import anyio

from maybepy import ConsoleLogger, Failure, attempt, attempt_async, set_logger


def checked_div(a: int, b: int) -> float:
    if b == 0:
        raise Failure("division by zero")
    return a / b


async def slow_answer() -> int:
    await anyio.sleep(1)
    return 42


async def main():
    set_logger(ConsoleLogger("example", level="DEBUG"))

    for b in (2, 0):
        e = attempt(lambda: checked_div(10, b))
        print(e.join(lambda err: f"error: {err}", lambda v: f"ok: {v}"))

    parsed = attempt(lambda: int("x"), catch=ValueError).map_left(lambda ex: type(ex).__name__)
    print("parsed:", parsed)

    e = await attempt_async(slow_answer, timeout=0.1)
    print("timed out:", e.is_left())


if __name__ == "__main__":
    anyio.run(main)
