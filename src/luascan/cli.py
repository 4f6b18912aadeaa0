"""Command-line entry point: dump the tokens of a file, or scan lines interactively."""

from __future__ import annotations

import argparse
import pathlib
import sys
from typing import TextIO

from luascan import __version__
from luascan.errors import LexError
from luascan.lexer import Scanner
from luascan.tokens import Token
from luascan.utils.logger import LOG_LEVELS, configure_logging, get_logger

logger = get_logger(__name__)


def format_token(token: Token) -> str:
    """One-line rendering used by both the file dump and the REPL."""
    return repr(token)


class ReplSession:
    """Interactive loop: each input line is scanned on its own in recovery mode."""

    MAIN_PROMPT = "> "

    def __init__(
        self,
        *,
        decode_escapes: bool = False,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.decode_escapes = decode_escapes
        self._stdin = stdin
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr

    def run(self) -> None:
        while True:
            try:
                line = self._read_line(self.MAIN_PROMPT)
            except EOFError:
                print(file=self._stdout)
                break
            except KeyboardInterrupt:
                print(file=self._stdout)
                continue
            self.process_line(line)

    def process_line(self, line: str) -> int:
        """Scan one line and print its tokens.

        Returns:
            Number of tokens printed (0 for a blank line).
        """
        if not line.strip():
            return 0
        scanner = Scanner(
            line,
            source_file="<repl>",
            error_recovery=True,
            diagnostic_sink=self._report,
            decode_escapes=self.decode_escapes,
        )
        count = 0
        for token in scanner:
            print(format_token(token), file=self._stdout)
            count += 1
        return count

    def _report(self, message: str) -> None:
        print(message, file=self._stderr)

    def _read_line(self, prompt: str) -> str:
        if self._stdin is None:
            return input(prompt)
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")


def run_file(
    path: str,
    *,
    error_recovery: bool = False,
    decode_escapes: bool = False,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Print every token of a file.

    Returns:
        Exit status: 0 on success, 1 on a lexical error, 2 if the file
        cannot be read.
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    try:
        source = pathlib.Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"luascan: cannot read {path}: {exc}", file=stderr)
        return 2

    def report(message: str) -> None:
        print(f"{path}: {message}", file=stderr)

    scanner = Scanner(
        source,
        source_file=path,
        error_recovery=error_recovery,
        diagnostic_sink=report,
        decode_escapes=decode_escapes,
    )
    try:
        for token in scanner:
            print(format_token(token), file=stdout)
    except LexError as exc:
        print(str(exc), file=stderr)
        return 1
    return 1 if scanner.errors else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="luascan", description="Print the tokens of Lua source")
    parser.add_argument("file", nargs="?", help="Lua source file; omit to start a REPL")
    parser.add_argument(
        "--recover",
        action="store_true",
        help="Report lexical errors and keep scanning instead of stopping",
    )
    parser.add_argument(
        "--decode-escapes",
        action="store_true",
        help="Decode escape sequences in short strings",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.file is None:
        if args.recover:
            logger.info("--recover is implied in REPL mode")
        ReplSession(decode_escapes=args.decode_escapes).run()
        return 0

    return run_file(args.file, error_recovery=args.recover, decode_escapes=args.decode_escapes)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
