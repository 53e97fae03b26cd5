import argparse

from .arithmetic import ALPHABET_SIZE, mod_inverse, valid_keys
from .cipher import Direction, transform
from .keys import validate_key
from .mapping import build_mapping, format_mapping_table, mapping_for
from .session import Session
from .trace import maybe_pause, print_overview, report
from .visual import plot_mapping, show_or_save

# ===============================
# Helpers
# ===============================

def _looks_like_yes(s: str) -> bool:
    return s.strip().lower().startswith(("y", "yes", "t", "true", "1", "co"))


def maybe_plot(result, args):
    if not (args.plot or args.save_plot):
        return
    verb = "decryption" if result.direction is Direction.DECRYPT else "encryption"
    fig = plot_mapping(mapping_for(result),
                       title=f"{verb.capitalize()} mapping, multiplier {result.effective_key}")
    show_or_save(fig, args.save_plot)


def read_key(prompt: str) -> int:
    """Prompt until the key is valid; the reason is shown for each rejected key."""
    while True:
        check = validate_key(input(prompt))
        if check.ok:
            return check.key
        print(check.reason)

# ===============================
# Commands
# ===============================

def cmd_run(args, direction: Direction):
    if not args.no_overview and args.verbose >= 1:
        print_overview()
    result = transform(args.text, args.key, direction)
    report(result, verbose=args.verbose, step_limit=args.steps)
    maybe_plot(result, args)


def cmd_roundtrip(args):
    if not args.no_overview and args.verbose >= 1:
        print_overview()
    session = Session()
    enc = session.encrypt(args.text, args.key)
    if enc is None:
        raise ValueError(session.encrypt_panel.check.reason)
    report(enc, verbose=args.verbose, step_limit=args.steps)
    maybe_pause(args.pause, "\nPress Enter to continue to decryption...")
    if args.verbose >= 1:
        print(f"\n[ROUNDTRIP] ciphertext and key {enc.key} transferred to decryption")
    dec = session.decrypt()
    report(dec, verbose=args.verbose, step_limit=args.steps)
    ok = session.round_trip_ok()
    print(f"[ROUNDTRIP] original recovered: {'yes' if ok else 'NO'}")
    maybe_plot(dec, args)
    return 0 if ok else 1


def cmd_keys(args):
    print(f"Valid keys for a {ALPHABET_SIZE}-letter alphabet (gcd(k, {ALPHABET_SIZE}) = 1):")
    print("   k  k_inv")
    for k in valid_keys():
        print(f"  {k:2d}  {mod_inverse(k):5d}")
    if args.tables:
        for k in valid_keys():
            print(f"\nKey {k}:")
            print(format_mapping_table(build_mapping(k)))


def cmd_interactive(args):
    if not args.no_overview:
        print_overview()
    session = Session()
    while True:
        key = read_key("Enter the multiplicative key (1-25, coprime with 26): ")
        print("\nKey Mapping:")
        print(format_mapping_table(build_mapping(key)))

        plaintext = input("\nEnter the text to encrypt: ")
        enc = session.encrypt(plaintext, key)
        report(enc, verbose=args.verbose, step_limit=args.steps)

        input("\nPress Enter to continue to decryption...")
        dec = session.decrypt()
        report(dec, verbose=args.verbose, step_limit=args.steps)

        if not _looks_like_yes(input("\nAgain? (y/N): ")):
            return

# ===============================
# Self-test
# ===============================

def selftest(verbose: int = 1) -> bool:
    ok = True
    got = transform("hello", 5, Direction.ENCRYPT).output
    if verbose >= 1:
        print(f"[Selftest] hello --(k=5)--> {got} (expected judds)")
    ok &= got == "judds"

    sample = "Attack at Dawn! 0123 the quick brown fox jumps over the lazy dog"
    for k in valid_keys():
        ct = transform(sample, k, Direction.ENCRYPT).output
        rt = transform(ct, k, Direction.DECRYPT).output
        if rt != sample:
            ok = False
            print(f"[Selftest] round trip FAILED for k={k}")
    if verbose >= 1:
        print(f"[Selftest] round trip over {len(valid_keys())} keys: {'OK' if ok else 'FAILED'}")
    return ok

# ===============================
# CLI
# ===============================

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="multiplicative_cipher",
        description="Multiplicative cipher (Teaching Mode): y = (x * k) mod 26 with step-by-step prints")
    sub = ap.add_subparsers(dest="cmd", required=True)

    def add_display(p):
        p.add_argument("--verbose", type=int, default=0, help="0..3 (3 = most detail)")
        p.add_argument("--steps", type=int, default=0, help="Show at most N step lines (0 = all)")
        p.add_argument("--no-overview", action="store_true", help="Skip algorithm overview banner")

    def add_common(p):
        p.add_argument("--key", required=True, help="Multiplicative key (1-25, coprime with 26)")
        p.add_argument("--text", required=True, help="Input text")
        p.add_argument("--plot", action="store_true", help="Show the alphabet mapping figure")
        p.add_argument("--save-plot", metavar="PATH", help="Save the alphabet mapping figure (PNG)")
        add_display(p)

    pe = sub.add_parser("encrypt", help="Encrypt text")
    add_common(pe)
    pd = sub.add_parser("decrypt", help="Decrypt text")
    add_common(pd)
    pr = sub.add_parser("roundtrip", help="Encrypt, transfer to decryption, decrypt")
    add_common(pr)
    pr.add_argument("--pause", action="store_true", help="Pause before decryption (press Enter)")

    pk = sub.add_parser("keys", help="List valid keys and their inverses")
    pk.add_argument("--tables", action="store_true", help="Also print the mapping table of every key")

    pi = sub.add_parser("interactive", help="Prompt for key and text, encrypt then decrypt")
    add_display(pi)

    ps = sub.add_parser("selftest", help="Known-answer and round-trip checks")
    ps.add_argument("--verbose", type=int, default=1)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.cmd == "encrypt":
            cmd_run(args, Direction.ENCRYPT)
        elif args.cmd == "decrypt":
            cmd_run(args, Direction.DECRYPT)
        elif args.cmd == "roundtrip":
            return cmd_roundtrip(args)
        elif args.cmd == "keys":
            cmd_keys(args)
        elif args.cmd == "interactive":
            try:
                cmd_interactive(args)
            except (EOFError, KeyboardInterrupt):
                print("\nBye.")
        elif args.cmd == "selftest":
            return 0 if selftest(args.verbose) else 1
    except ValueError as e:
        print("Error:", e)
        return 1
    return 0

