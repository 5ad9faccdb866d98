from __future__ import annotations
import argparse, sys

from .bootstrap import bootstrap
from .diagnostics import ConfigDefect, UnknownName
from .logging_config import setup_logging

def _int(token: str) -> int:
    return int(token, 0)

def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="archns",
                                 description="Consulta de nombres de registros e instrucciones por arquitectura")
    ap.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="activa los logs de archns en stderr")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("reg", help="ID de un registro por nombre")
    p.add_argument("arch"); p.add_argument("name")
    p = sub.add_parser("op", help="ID de una instrucción por mnemónico")
    p.add_argument("arch"); p.add_argument("name")
    p = sub.add_parser("fmt-reg", help="nombre de presentación de un ID de registro")
    p.add_argument("id", type=_int)
    p = sub.add_parser("fmt-op", help="nombre de presentación de un ID de opcode")
    p.add_argument("id", type=_int)
    p = sub.add_parser("dump", help="lista id, nombre canónico y alias de una arquitectura")
    p.add_argument("arch")
    p.add_argument("--opcodes", action="store_true", help="lista opcodes en lugar de registros")
    return ap

def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    if args.log_level:
        setup_logging(args.log_level)

    try:
        ns = bootstrap()
    except ConfigDefect as ex:
        # defecto en las declaraciones estáticas: no hay arranque parcial
        print(ex.diagnostic, file=sys.stderr)
        return 2

    try:
        if args.cmd == "reg":
            print(ns.lookup_register_by_name(args.arch, args.name))
        elif args.cmd == "op":
            print(ns.lookup_instruction_by_name(args.arch, args.name))
        elif args.cmd == "fmt-reg":
            print(ns.format_register(args.id))
        elif args.cmd == "fmt-op":
            print(ns.format_opcode(args.id))
        elif args.cmd == "dump":
            arch = ns.architecture(args.arch)
            table = arch.opcodes if args.opcodes else arch.registers
            for value, name in table.canonical_items():
                print(f"{value}\t{name}\t{','.join(table.aliases(value))}")
    except UnknownName as ex:
        print(f"ERROR: {ex}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
