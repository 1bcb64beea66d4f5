"""Walkthrough of the hms_duration API."""

from hms_duration import Duration, DurationParseError


def main() -> None:
    print("Constructors:")
    for label, d in [
        ("from_seconds(3661)", Duration.from_seconds(3661)),
        ("from_minutes(90)", Duration.from_minutes(90)),
        ("from_hours(2)", Duration.from_hours(2)),
        ("from_hms(1, 30, 45)", Duration.from_hms(1, 30, 45)),
    ]:
        print(f"  {label:<20} {d}")

    d = Duration.from_hms(2, 15, 30)
    print(f"\nTotals for {d}:")
    print(f"  as_seconds(): {d.as_seconds()}")
    print(f"  as_minutes(): {d.as_minutes()}")
    print(f"  as_hours():   {d.as_hours()}")

    print(f"\nComponents for {d}:")
    print(f"  hours_part():   {d.hours_part()}")
    print(f"  minutes_part(): {d.minutes_part()}")
    print(f"  seconds_part(): {d.seconds_part()}")

    print("\nParsing:")
    for text in ["12:34:56", "0:90:0", "1:2"]:
        try:
            parsed = Duration.parse(text)
            print(f"  {text!r} -> {parsed} ({parsed.as_seconds()} seconds)")
        except DurationParseError as exc:
            print(f"  {text!r} -> error: {exc.text!r} is not H:M:S")

    morning = Duration.from_hms(4, 0, 0)
    afternoon = Duration.from_hms(3, 30, 0)
    total = morning + afternoon
    target = Duration.from_hours(8)
    print("\nWork log:")
    print(f"  total:     {total} ({total.as_minutes()} minutes)")
    print(f"  remaining: {target - total}")
    print(f"  overtime:  {total - target}")


if __name__ == "__main__":
    main()
