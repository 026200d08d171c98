"""Hello Haven -- solve one puzzle with both searches.

Demonstrates:
- Describing a puzzle as a Layout and validating it
- Running the informed and greedy searches on the same grid
- Reading win/lose, path, step count and elapsed time from an Outcome

Run: python examples/basics.py
"""

import logging

from tick_haven import Layout, SearchConfig, solve_layout


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="  %(name)s: %(message)s")
    print("=== Hello Haven ===\n")

    layout = Layout(
        pursuer=(0, 0),
        pursuer_hazard=(2, 2),
        monster=(4, 4),
        rock=(8, 0),
        goal=(0, 8),
        haven=(8, 8),
    )
    results = solve_layout(layout, config=SearchConfig(variant=1))

    for algorithm, outcome in results.items():
        print(f"{algorithm.value}: {'Win' if outcome.won else 'Lose'}")
        if outcome.won:
            cells = " ".join(f"[{x},{y}]" for x, y in outcome.path)
            print(f"  {outcome.steps} steps: {cells}")
            print(f"  {outcome.elapsed * 1000:.2f} ms")


if __name__ == "__main__":
    main()
