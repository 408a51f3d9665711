#!/usr/bin/env python3
"""
HepCalc driver script.

Performs the calculation on momenta a, b, c:
  1. transform a, b, c into t
  2. log_product = log(pperp2(t)/q2) * log(m2(t)/q2)
  3. print the final result = log_product * a.(b + c)

Examples:
    python hep_calculation.py
    python hep_calculation.py --q2 50
    python hep_calculation.py --a 1000 0 0 0 --b 100 10 0 0 --c 50 0 5 0
    python hep_calculation.py --a 1000 0 0 0 --b 100 10 0 0 --c 50 0 5 0 --scan 1 1e4 --plot scan.png
"""

import argparse

from hepcalc.kinematics import FourMomentum
from hepcalc.calculation import DEFAULT_Q2, default_momenta, run_calculation
from hepcalc.scan import log_spaced_scales, scan_scale, plot_scale_scan


def print_scan_table(q2_values, results):
    print("\n" + "=" * 40)
    print(f"{'q2':>15s}  {'result':>20s}")
    print("-" * 40)
    for q2, res in zip(q2_values, results):
        print(f"{q2:15.6g}  {res:20.9g}")
    print("=" * 40 + "\n")


def build_parser():
    return argparse.ArgumentParser(
        description="HepCalc four-momentum calculation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  python hep_calculation.py
  python hep_calculation.py --q2 50
  python hep_calculation.py --b 100 10 0 0 --scan 1 1e4 --points 20 --plot scan.png"""
    )


def main(argv=None):
    parser = build_parser()
    momentum = dict(nargs=4, type=float, metavar=("E", "PX", "PY", "PZ"))
    parser.add_argument("--a", **momentum, help="Momentum a (default 200 0 0 200)")
    parser.add_argument("--b", **momentum, help="Momentum b (default 90 30 30 2000)")
    parser.add_argument("--c", **momentum, help="Momentum c (default 45 15 20 1000)")
    parser.add_argument("--q2", type=float, default=DEFAULT_Q2, help=f"Scale squared (default {DEFAULT_Q2:g})")
    parser.add_argument("--scan", type=float, nargs=2, metavar=("QMIN", "QMAX"), help="Also scan q2 over [QMIN, QMAX]")
    parser.add_argument("--points", type=int, default=50, help="Number of scan points (default 50)")
    parser.add_argument("--plot", type=str, help="Save the scan plot to this file (requires --scan)")
    args = parser.parse_args(argv)

    if args.plot and not args.scan:
        parser.error("--plot requires --scan")

    a, b, c = default_momenta()
    if args.a:
        a = FourMomentum.from_components(args.a)
    if args.b:
        b = FourMomentum.from_components(args.b)
    if args.c:
        c = FourMomentum.from_components(args.c)

    if args.scan:
        # the scan works on copies; take them before b is updated below
        try:
            q2_values = log_spaced_scales(args.scan[0], args.scan[1], args.points)
        except ValueError as e:
            parser.error(str(e))
        q2_values, results = scan_scale(a, b, c, q2_values)

    print("Performing a horrible calculation with momenta:")
    print(f"{a}\n{b}\n{c}")

    out = run_calculation(a, b, c, args.q2)

    # Final result is product of logs multiplied by a.(b+c)
    print(f"Answer is : {out['result']!r}")

    if args.scan:
        print_scan_table(q2_values, results)
        if args.plot:
            plot_scale_scan(q2_values, results, args.plot)
            print(f"📄 Saved scan plot to {args.plot}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
