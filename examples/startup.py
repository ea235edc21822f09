"""Wait for several services to report ready, then react to failures."""

from __future__ import annotations

import logging

from signaljoin import Combinator


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    on = Combinator()

    def ready(args: dict[str, tuple]) -> None:
        summary = ", ".join(f"{name}@{payload[0]}" for name, payload in args.items())
        print(f"All services ready: {summary}")

    def failed(signal: str, reason: str) -> None:
        print(f"First failure from {signal}: {reason}")

    on.all_once(["db.ready", "cache.ready", "api.ready"], ready)
    on.any_once(["db.failed", "cache.failed", "api.failed"], failed)

    on.publish("cache.ready", "10.0.0.2")
    on.publish("db.ready", "10.0.0.1")
    on.publish("api.ready", "10.0.0.3")
    on.publish("api.failed", "timeout")
    on.publish("db.failed", "disk full")


if __name__ == "__main__":
    main()
