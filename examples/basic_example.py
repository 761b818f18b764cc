"""
Basic example of using the GPS distance calculator.
"""

from gpscalc import (
    UnitSystem,
    calculate_from_text,
    convert_to_dms,
    format_distance_with_dynamic_units,
    format_results_summary,
    pairwise_breakdowns,
)

SURVEY_POINTS = """
Base 44.4734245277 -70.88862750833 120.5
Rover 44 28 30.1 70 53 10.2 131.25
N44.4750 W70.8860 128
"""


def main():
    print("=" * 80)
    print("GPS Distance Calculator - Basic Example")
    print("=" * 80)

    print("\nParsing coordinates...")
    result = calculate_from_text(SURVEY_POINTS)
    if result is None:
        print("Need at least two valid coordinates")
        return
    print(f"Parsed {len(result.coordinates)} points")

    for label, coordinate in zip(result.labels, result.coordinates):
        lat_dms, lon_dms = convert_to_dms(coordinate.lat, coordinate.lon)
        print(f"  {label}: {lat_dms}, {lon_dms}")

    print("\n" + "-" * 80)
    print("Distance matrix (3D)...")
    for i, row in enumerate(result.matrix_3d):
        cells = [
            str(format_distance_with_dynamic_units(cell.km)) if cell else "-"
            for cell in row
        ]
        print(f"  {result.labels[i]:>8}: " + " | ".join(f"{cell:>12}" for cell in cells))

    print("\n" + "-" * 80)
    print("Survey breakdown from the base station...")
    for breakdown in pairwise_breakdowns(result.coordinates, reference_index=0):
        print(f"  {breakdown.from_label} -> {breakdown.to_label}")
        print(f"    Horizontal: {breakdown.horizontal_m:.3f} m")
        print(f"    Vertical: {breakdown.vertical_m:+.3f} m")
        print(f"    Grade: {breakdown.assessment.grade}")

    print("\n" + "-" * 80)
    print(format_results_summary(result, UnitSystem.SURVEY_FEET))

    print("=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
