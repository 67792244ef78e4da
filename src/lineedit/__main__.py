from __future__ import annotations
import argparse, json, os, sys
from backend import config as CFG
from backend.engine import Engine
from backend.models import CommandResult

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_result(res: CommandResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(res.to_dict(), ensure_ascii=False))
        return
    if not res.ok and res.message:
        print(_c(res.message, "1;31"))
    print(f"Text: {res.snapshot.text}")
    print(f"Cursor Position: {res.snapshot.cursor_position}")

def _print_banner() -> None:
    print(_c(CFG.WELCOME, "1;37"))
    for line in CFG.HELP_LINES:
        print(line)

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Line editor REPL (one-letter commands)")
    parser.add_argument("-c", "--command", action="append", default=None,
                        help="Run this command and exit (repeatable, runs in order; q stops early and says goodbye unless --json)")
    parser.add_argument("--json", action="store_true", help="Emit the state after each command as JSON")
    parser.add_argument("--no-banner", action="store_true", help="Skip the welcome text")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    eng = Engine()
    eng.start(verbose=args.verbose)
    sid = eng.open_session()
    try:
        # Scripted mode
        if args.command:
            for line in args.command:
                res = eng.execute(sid, line)
                if res is None:
                    continue
                if res.quit:
                    if not args.json:
                        print(CFG.GOODBYE)
                    break
                _print_result(res, args.json)
            return 0

        # Interactive mode
        if not args.no_banner:
            _print_banner()
        while True:
            try:
                raw = input(CFG.PROMPT)
            except (EOFError, KeyboardInterrupt):
                print(); break
            res = eng.execute(sid, raw)
            if res is None:
                continue
            if res.quit:
                break
            _print_result(res, args.json)
        print(CFG.GOODBYE)
        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    sys.exit(main())
