"""Pair requests with responses that may arrive in bursts."""

from __future__ import annotations

from signaljoin import Combinator


def main() -> None:
    on = Combinator()
    waiter = on.all_cached(
        ["request", "response"],
        lambda args: print(f"{args['request'][0]} -> {args['response'][0]}"),
        cache_limit=3,
    )

    for i in range(5):
        on.publish("request", f"req-{i}")
    for i in range(5):
        on.publish("response", f"resp-{i}")

    waiter.cancel()


if __name__ == "__main__":
    main()
