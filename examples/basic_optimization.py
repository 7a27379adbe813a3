#!/usr/bin/env python3
"""
Example pipeline for the neldermead SDK.

This example shows:
1. Parsing formulas into expression trees
2. Seeding a simplex and running Nelder-Mead on several test functions
3. Inspecting the search history and run summary
4. Exporting the history
"""

from pathlib import Path

from neldermead import ExpressionTree, NelderMeadMethod, Point, Simplex

FUNCTIONS = [
    ("sphere", "x1^2 + x2^2", Point([1.0, 1.0]), 0.5),
    ("bowl", "(x1-2)^2 + (x2-3)^2", Point([1.5, 2.5]), 0.3),
    ("himmelblau", "(x1^2+x2-11)^2 + (x1+x2^2-7)^2", Point([0.0, 0.0]), 0.5),
    ("rosenbrock", "(1-x1)^2 + 100*(x2-x1^2)^2", Point([-1.2, 1.0]), 0.5),
]


def main() -> None:
    """Run the example optimization pipeline."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    print("Nelder-Mead example pipeline\n")  # noqa: T201
    print("=" * 60)  # noqa: T201

    for name, formula, start, step in FUNCTIONS:
        tree = ExpressionTree(formula)
        method = NelderMeadMethod(tree, epsilon=1e-10)
        method.set_simplex(Simplex.from_step(step, tree.required_variable_count, start))

        history = method.minimum_search(500)
        best = history.final.get_vertex(0)

        print(f"\n{name}: {formula}")  # noqa: T201
        print(f"   start      {start.to_list()}")  # noqa: T201
        print(f"   minimum    {[round(value, 6) for value in best]}")  # noqa: T201
        print(f"   value      {tree.evaluate(best):.3e}")  # noqa: T201
        print(f"   iterations {method.summary['iterations_completed']}")  # noqa: T201
        print(f"   moves      {method.summary['moves']}")  # noqa: T201

        target = history.export_json(output_dir / f"{name}_history.json")
        print(f"   history -> {target}")  # noqa: T201

    print("\n" + "=" * 60)  # noqa: T201


if __name__ == "__main__":
    main()
