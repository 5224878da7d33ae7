"""
Example: mapping several streams in lockstep.

This example shows:
1. Pairwise sums that stop at the shortest input
2. A mapper ending the sequence by raising StopIteration
3. Driving through the type registry with a trace enabled
"""

import logging
import operator

from lockstep import DriveConfig, MapCombinator, Trace, builtin_registry, drain

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def pairwise() -> None:
    m = MapCombinator(operator.add, [1, 2, 3], [10, 20])
    print("pairwise:", list(m))


def until_negative() -> None:
    def mapper(x: int) -> int:
        if x < 0:
            raise StopIteration
        return x * 2

    m = MapCombinator(mapper, [3, 1, -1, 4])
    print("until negative:", list(m))


def traced() -> None:
    registry = builtin_registry()
    print(registry.doc("map"))

    trace = Trace()
    m = registry.new("map", lambda a, b: f"{a}:{b}", "abc", range(10))
    result = drain(m, DriveConfig(max_steps=5), trace=trace)

    print("values:", result.values, "exhausted:", result.exhausted)
    for ev in trace.get_events():
        print(f"  [{ev.id}] {ev.action} parent={ev.parent_id} {ev.info}")


if __name__ == "__main__":
    pairwise()
    until_negative()
    traced()
