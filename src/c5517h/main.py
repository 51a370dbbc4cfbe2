"""Command-line front end: ``c5517hctl``."""

import argparse
import json
import sys

from pydantic import ValidationError

from c5517h import __version__
from c5517h.core.config import Settings, setup_logging
from c5517h.core.models import CommandResult, SettingInfo, SettingValue
from c5517h.protocol.constants import Opcode
from c5517h.protocol.errors import TransactionError
from c5517h.protocol.handler import ProtocolHandler
from c5517h.protocol.types import SETTINGS, lookup_setting
from c5517h.serial.connection import SerialConnection

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="c5517hctl", description="Query and change C5517H display settings")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--port", "-p", help="Serial port (default: $C5517H_SERIAL_PORT or /dev/ttyS1)")
    parser.add_argument("--baud", "-b", type=int, help="Baud rate (default: 9600)")
    parser.add_argument("--timeout", "-t", type=float, help="Read/write timeout in seconds (default: 1.0)")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List known settings")

    get = sub.add_parser("get", help="Read a setting")
    get.add_argument("setting", help="Setting name, e.g. brightness or power-state")

    set_ = sub.add_parser("set", help="Write a setting")
    set_.add_argument("setting", help="Setting name")
    set_.add_argument("value", help="New value (number or enumerated name)")

    sub.add_parser("reset-power", help="Power-cycle the display")
    sub.add_parser("listen", help="Dump raw bytes received on the port to stdout")
    return parser


def _print_json(data) -> None:
    print(json.dumps(data, indent=2))


def _listen(connection: SerialConnection) -> int:
    out = sys.stdout.buffer
    try:
        while True:
            data = connection.read(1024)
            if data:
                out.write(data)
                out.flush()
    except KeyboardInterrupt:
        return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Run the command-line front end and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        messages = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        print(f"{parser.prog}: error: invalid settings: {messages}", file=sys.stderr)
        return EXIT_USAGE
    setup_logging(args.log_level or settings.log_level)

    if args.command == "list":
        _print_json([SettingInfo.from_setting(setting).model_dump() for setting in SETTINGS.values()])
        return EXIT_OK

    setting = value = None
    try:
        if args.command in ("get", "set"):
            setting = lookup_setting(args.setting)
        if args.command == "set":
            if not setting.writable:
                raise ValueError(f"Setting {setting.__name__} is read-only")
            value = setting.from_text(args.value)
    except KeyError as e:
        print(f"{parser.prog}: error: {e.args[0]}", file=sys.stderr)
        return EXIT_USAGE
    except ValueError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    connection = SerialConnection(
        port=args.port or settings.serial_port,
        baudrate=args.baud or settings.serial_baud,
        timeout=args.timeout if args.timeout is not None else settings.serial_timeout,
    )
    try:
        with connection:
            if args.command == "listen":
                return _listen(connection)

            handler = ProtocolHandler(connection)
            if args.command == "get":
                result = SettingValue.from_reply(handler.get(setting))
            elif args.command == "set":
                handler.set(value)
                result = CommandResult(command=f"set {setting.__name__}", opcode=setting.opcode)
            else:
                handler.reset_power()
                result = CommandResult(command="reset-power", opcode=int(Opcode.RESET_POWER))
    except (OSError, TransactionError) as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    _print_json(result.model_dump())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
