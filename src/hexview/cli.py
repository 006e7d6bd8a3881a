# hexview/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, Sequence

from .__about__ import APP_TITLE, __version__, about_text
from .codec import FLOAT_TYPE_NAMES, INT_TYPE_NAMES
from .service import (
    ConversionResult,
    RegisterResult,
    convert_binary,
    convert_float,
    convert_hex,
    convert_int,
    convert_registers,
)

log = logging.getLogger(__name__)


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def _read_input(arg: str | None) -> str:
    return arg if arg is not None else sys.stdin.read().strip()

def _print_conversion(result: ConversionResult, as_json: bool) -> int:
    if as_json:
        print(json.dumps(result.to_dict(), indent=2, allow_nan=False))
        return 0

    _print_kv("Bytes", result.bytes_hex)
    _print_kv("Binary", result.binary)
    _print_kv("ASCII", result.ascii)
    _print_kv("Length", str(len(result.bytes_hex) // 2))
    present = result.present()
    if not present:
        print("(no numeric type matches this length)")
    for name, fv in present.items():
        _print_kv(name, f"{fv.text} (0x{fv.hex})")
    return 0

def _print_registers(result: RegisterResult, as_json: bool) -> int:
    if as_json:
        print(json.dumps(result.to_dict(), indent=2, allow_nan=False))
        return 0

    _print_kv("Raw", result.raw_hex)
    _print_kv("ASCII", result.ascii)
    for reg in result.registers:
        _print_kv(f"R{reg.index}", f"0x{reg.hex} u={reg.unsigned} s={reg.signed} b={reg.binary}")
    for label, rows in (("32-bit", result.combined32), ("64-bit", result.combined64)):
        for row in rows:
            print(f"{label} @R{row.register_start} (0x{row.hex})")
            for name, text in row.values.items():
                _print_kv(f"  {name}", text)
    return 0


# ---------- subcommands ----------
def cmd_hex(args: argparse.Namespace) -> int:
    return _print_conversion(convert_hex(_read_input(args.text)), args.json)

def cmd_binary(args: argparse.Namespace) -> int:
    return _print_conversion(convert_binary(_read_input(args.text)), args.json)

def cmd_int(args: argparse.Namespace) -> int:
    return _print_conversion(convert_int(args.value, args.type), args.json)

def cmd_float(args: argparse.Namespace) -> int:
    return _print_conversion(convert_float(args.value, args.type), args.json)

def cmd_registers(args: argparse.Namespace) -> int:
    return _print_registers(convert_registers(_read_input(args.text)), args.json)


# ---------- parser ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hexview",
        description=f"{APP_TITLE} (BE/LE/BADC/CDAB)",
        epilog=about_text(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")
    p.add_argument("--json", action="store_true", help="print results as JSON")

    # Also accepted after the subcommand; SUPPRESS keeps the top-level value.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", default=argparse.SUPPRESS, help="print results as JSON")

    sp = p.add_subparsers(dest="cmd")

    ph = sp.add_parser("hex", parents=[common], help="decode hex bytes into every matching type")
    ph.add_argument(
        "text", nargs="?",
        help="hex like '0x48656c6c6f', '48 65 6c' or '48:65:6C'; use 'hex -- TEXT' if TEXT starts with '-'",
    )
    ph.set_defaults(func=cmd_hex)

    pb = sp.add_parser("binary", parents=[common], help="decode bit text into every matching type")
    pb.add_argument("text", nargs="?", help="bits like '0100 1000' or '1_0101'")
    pb.set_defaults(func=cmd_binary)

    pi = sp.add_parser("int", parents=[common], help="encode an integer in each byte order")
    pi.add_argument("value", help="number (dec or 0x… / 0b… / 0o…)")
    pi.add_argument("--type", choices=INT_TYPE_NAMES, default="int32", help="integer type (default: int32)")
    pi.set_defaults(func=cmd_int)

    pf = sp.add_parser("float", parents=[common], help="encode a float in each byte order")
    pf.add_argument("value", help="number, 'nan' or 'inf'")
    pf.add_argument("--type", choices=FLOAT_TYPE_NAMES, default="float32", help="float type (default: float32)")
    pf.set_defaults(func=cmd_float)

    pr = sp.add_parser("registers", parents=[common], help="decode 16-bit registers and 32/64-bit windows over them")
    pr.add_argument("text", nargs="?", help="registers like '4148 0000' or 'd16712 d0'")
    pr.set_defaults(func=cmd_registers)

    return p


_COMMANDS = ("hex", "binary", "int", "float", "registers")

def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Back-compat convenience: `hexview "48 65 6c"` means `hexview hex "48 65 6c"`.
    positional = [i for i, a in enumerate(argv) if not a.startswith("-")]
    if positional and argv[positional[0]] not in _COMMANDS:
        argv.insert(positional[0], "hex")

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except ValueError as exc:
        log.debug("conversion failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
