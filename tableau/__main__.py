"""
CLI entry point. Run as: python -m tableau "<formula>" or --problem <name>
"""

import argparse
import sys

from .core.engine import make_initial_state, run_tableau
from .core.proof import build_result, print_proof
from .core.state import MAX_STEPS, WITNESS_POLICIES
from .core.terms import format_term
from .parser import parse, ParseError
from .problems import PROBLEMS
from .visualization import print_tree, print_steps, export_dot


def build_arg_parser():
    parser = argparse.ArgumentParser(description="Semantic tableau prover")
    parser.add_argument("formula", nargs="?", default=None,
                        help="Formula to prove, e.g. \"(A → B) → (¬B → ¬A)\"")
    parser.add_argument("--problem", choices=list(PROBLEMS.keys()), default=None,
                        help="Prove a registered sample problem instead")
    parser.add_argument("--list", action="store_true",
                        help="List registered problems and exit")
    parser.add_argument("--steps", type=int, default=MAX_STEPS,
                        help=f"Max rule applications (default {MAX_STEPS})")
    parser.add_argument("--witnesses", choices=WITNESS_POLICIES, default="name",
                        help="Witness caching: per variable name (default) "
                             "or per quantifier occurrence and branch")
    parser.add_argument("--save", type=str, default=None,
                        help="Save the proof (tree, steps, verdict) as JSON")
    parser.add_argument("--dot", type=str, default=None,
                        help="Export the proof tree as a DOT file")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    return parser


def main(argv=None):
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name, problem in PROBLEMS.items():
            print(f"  {name:20s} {problem['formula']:32s} {problem['description']}")
        return 0

    if args.problem:
        text = PROBLEMS[args.problem]["formula"]
    elif args.formula:
        text = args.formula
    else:
        parser.error("give a formula or --problem")

    try:
        goal = parse(text)
    except ParseError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        return 2

    if args.steps < 0:
        parser.error("--steps must be >= 0")

    print(f"Goal: {format_term(goal)}")
    state = make_initial_state(goal, max_steps=args.steps,
                               witness_policy=args.witnesses)
    state = run_tableau(state, verbose=not args.quiet)
    result = build_result(state)

    print_tree(result.tree_root)
    if not args.quiet:
        print_steps(result.steps)
    print_proof(result)

    if args.dot:
        export_dot(result.tree_root, args.dot)

    if args.save:
        result.save(args.save)
        print(f"Proof saved to {args.save}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
