"""Basic usage examples for remotedata."""

import json

from remotedata import (
    Failed,
    Loading,
    NotAsked,
    Success,
    and_then,
    capture,
    configure_logging,
    map,
    map_error,
    match,
    with_default,
)

LAPS_JSON = '[{"lap_number": 1, "lap_duration": 96.2}, {"lap_number": 2, "lap_duration": 93.8}]'


@capture
def parse_laps(payload: str) -> list[dict]:
    return json.loads(payload)


def render(rd) -> str:
    return match(
        {
            "not_asked": lambda: "Pick a session",
            "loading": lambda: "Loading laps...",
            "failed": lambda err: f"Could not load laps: {err}",
            "success": lambda laps: f"{len(laps)} laps, best {min(laps):.3f}s",
        },
        rd,
    )


def main() -> None:
    configure_logging()

    # A panel moves through the states as the caller's fetch progresses
    print("=== Lifecycle ===")
    for rd in (NotAsked(), Loading()):
        print(f"  {render(rd)}")

    durations = map(
        lambda laps: [lap["lap_duration"] for lap in laps],
        parse_laps(LAPS_JSON),
    )
    print(f"  {render(durations)}")

    broken = map_error(lambda exc: type(exc).__name__, parse_laps("<html>"))
    print(f"  {render(broken)}")

    # Sequence a dependent step without nested matching
    print("\n=== andThen ===")
    fastest = and_then(
        lambda ds: Success(min(ds)) if ds else Failed("no laps"),
        durations,
    )
    print(f"  Fastest lap: {with_default(0.0, fastest):.3f}s")


if __name__ == "__main__":
    main()
