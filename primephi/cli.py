# primephi/cli.py
# Command line: safe-prime demo, totient checks and one-off queries.
#   primephi safeprime --bits 256
#   primephi phi 1234567890 --bound 1000
#   primephi check

from __future__ import annotations
import argparse, logging, sys, time

from .config import load_settings
from .errors import PrimephiError
from .gcd import binary_gcd
from .miller_rabin import miller_rabin
from .numeric import as_int
from .random_source import RandomSource
from .safe_prime import find_safe_prime
from .sieve import PrimeSieve
from .totient import CHECK_BOUNDS, Totient, check_totients, totient_table

log = logging.getLogger(__name__)


def _rng(args) -> RandomSource:
    rng = RandomSource(seed=args.seed)
    if args.seed is None:
        used = rng.seed()
        log.debug("seeded with %d entropy bytes", used)
    return rng


def cmd_safeprime(args) -> int:
    rounds = args.rounds if args.rounds is not None else max(1, args.bits // 2)
    print(f"Finding two {args.bits}-bit primes q and p so that p=2q+1")
    t0 = time.perf_counter()
    q, p = find_safe_prime(args.bits, rounds, _rng(args),
                           max_attempts=args.max_attempts, max_seconds=args.max_seconds)
    log.info("found in %.2fs with MR rounds=%d", time.perf_counter() - t0, rounds)
    print(f"q = {q}")
    print(f"p = {p}")
    return 0


def cmd_phi(args) -> int:
    f = Totient(PrimeSieve(args.bound))
    for raw in args.n:
        n = as_int(raw)
        print(f"phi({n}) = {f(n)}")
    return 0


def cmd_isprime(args) -> int:
    n = as_int(args.n)
    ok = miller_rabin(n, args.rounds, _rng(args))
    print("probably prime" if ok else "composite")
    return 0


def cmd_gcd(args) -> int:
    print(binary_gcd(as_int(args.u), as_int(args.v)))
    return 0


def cmd_check(args) -> int:
    failed = 0
    for res in check_totients(args.bound or CHECK_BOUNDS):
        status = "PASS" if res.ok else "FAIL"
        print(f"{status} bound={res.bound} phi({res.n}) = {res.computed} (expected {res.expected})")
        failed += not res.ok
    print(f"{failed} failure(s)")
    return 1 if failed else 0


def cmd_table(args) -> int:
    sieve = PrimeSieve(args.bound)
    print(f"Sieved {len(sieve)} primes below {args.bound}")
    for n, t in totient_table(sieve, args.start, args.stop, args.step):
        print(f"phi({n}) = {t}")
    return 0


def build_parser(default_bound: int) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="primephi",
                                 description="Totient, Miller-Rabin and safe-prime toolkit")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("safeprime", help="find q, p = 2q+1 both prime")
    sp.add_argument("--bits", type=int, default=256, help="bit length of q (default: 256)")
    sp.add_argument("--rounds", type=int, default=None, help="MR rounds (default: bits/2)")
    sp.add_argument("--seed", type=int, default=None, help="deterministic rng seed")
    sp.add_argument("--max-attempts", type=int, default=None)
    sp.add_argument("--max-seconds", type=float, default=None)
    sp.set_defaults(func=cmd_safeprime)

    pp = sub.add_parser("phi", help="Euler's totient")
    pp.add_argument("n", nargs="+")
    pp.add_argument("--bound", type=int, default=default_bound, help="sieve bound")
    pp.set_defaults(func=cmd_phi)

    ip = sub.add_parser("isprime", help="Miller-Rabin test")
    ip.add_argument("n")
    ip.add_argument("--rounds", type=int, default=40)
    ip.add_argument("--seed", type=int, default=None)
    ip.set_defaults(func=cmd_isprime)

    gp = sub.add_parser("gcd", help="binary gcd of two nonnegative integers")
    gp.add_argument("u")
    gp.add_argument("v")
    gp.set_defaults(func=cmd_gcd)

    cp = sub.add_parser("check", help="totient reference cases across sieve bounds")
    cp.add_argument("--bound", type=int, action="append", default=None,
                    help="sieve bound to check (repeatable; default 10..10^7)")
    cp.set_defaults(func=cmd_check)

    tp = sub.add_parser("table", help="phi over a range")
    tp.add_argument("--bound", type=int, default=default_bound)
    tp.add_argument("--start", type=int, default=0)
    tp.add_argument("--stop", type=int, required=True)
    tp.add_argument("--step", type=int, default=1)
    tp.set_defaults(func=cmd_table)
    return ap


def main(argv=None) -> int:
    try:
        settings = load_settings()
    except PrimephiError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    args = build_parser(settings.sieve_bound).parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level,
                        format="[%(levelname)s] %(name)s: %(message)s")
    try:
        return args.func(args)
    except (PrimephiError, ValueError, TypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
