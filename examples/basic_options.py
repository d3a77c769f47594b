"""
Basic options: construction, chaining, extraction, and logging mid-chain.

Run: python examples/basic_options.py
"""
import os

from optionpy import (
    ConsoleLogger,
    EmptyValueAccess,
    absent,
    from_nullable,
    log_inspect,
    present,
)


def parse_port(raw: str):
    return present(int(raw)) if raw.isdigit() else absent()


def main():
    log = ConsoleLogger("examples", level="DEBUG")

    # Lazy chain: parse_port only runs when PORT is set
    port = (
        from_nullable(os.environ.get("PORT"))
        .inspect(log_inspect(log, "raw port"))
        .and_then(parse_port)
        .filter(lambda p: 0 < p < 65536)
        .inspect(log_inspect(log, "accepted port", field="port"))
        .unwrap_or(8080)
    )
    log.info("listening", port=port)

    # Pairing and symmetric difference
    host = present("localhost")
    print(host.zip_with(present(port), lambda h, p: f"{h}:{p}").unwrap())
    print(present(2).xor(absent()), present(2).xor(present(2)))

    # Extraction failure
    try:
        absent().expect("no user configured")
    except EmptyValueAccess as e:
        log.error("extraction failed", reason=e.message)


if __name__ == "__main__":
    main()
