#!/usr/bin/env python

"""
CLI interface to typed_headers
"""

from argparse import ArgumentParser, Namespace
from configparser import ConfigParser, Error as ConfigError, SectionProxy
from functools import partial
import logging
import os
import sys
from typing import Callable, List, Type, Union

from typed_headers import __version__
from typed_headers.headers import HeaderBlock, HeaderError
from typed_headers.headers.content_md5 import content_md5
from typed_headers.speak import Note

log = logging.getLogger(__name__)

OutputType = Callable[[str], None]


def main(argv: List[str] = None) -> int:
    parser = ArgumentParser(
        prog="typed-headers", description="Decode and encode Content-MD5 header values."
    )
    parser.set_defaults(verbose=False, output_format=None, config=None)
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-c",
        "--config",
        action="store",
        dest="config",
        help="configuration file",
    )
    parser.add_argument(
        "-o",
        "--output-format",
        action="store",
        dest="output_format",
        choices=["text", "html"],
        help="how to show notes",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="show debugging information",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    decode_parser = subparsers.add_parser(
        "decode", help="decode Content-MD5 field values"
    )
    decode_parser.add_argument("values", nargs="+", help="field value")
    decode_parser.set_defaults(func=decode_values)

    encode_parser = subparsers.add_parser("encode", help="encode a hex MD5 digest")
    encode_parser.add_argument("digest", help="32 hex characters")
    encode_parser.set_defaults(func=encode_digest)

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.verbose:
            level = logging.DEBUG
        else:
            level = find_log_level(config["log_level"])
    except (OSError, ConfigError, ValueError) as why:
        error_output(f"Error: {why}\n")
        return 1
    if args.output_format:
        config["output_format"] = args.output_format
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("typed_headers").setLevel(level)

    return args.func(args, config, output, error_output)


def load_config(filename: str = None) -> SectionProxy:
    config_parser = ConfigParser()
    config_parser.read_dict(
        {"typed_headers": {"output_format": "text", "log_level": "WARNING"}}
    )
    if filename:
        with open(filename, encoding="utf-8") as fh:
            config_parser.read_file(fh)
    return config_parser["typed_headers"]


def find_log_level(name: str) -> int:
    """
    Return the numeric logging level for a level name, in any case.

    Raises ValueError if the name isn't a logging level.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"{name!r} isn't a log level.")
    return level


def decode_values(
    args: Namespace, config: SectionProxy, out: OutputType, err: OutputType
) -> int:
    name = content_md5.canonical_name.encode("ascii")
    block = HeaderBlock([(name, os.fsencode(value)) for value in args.values])
    show = partial(show_note, config["output_format"], err)
    try:
        header = block.decode(content_md5, warn_note)
    except HeaderError as why:
        show(why.note)
        return 1
    out(f"{header.hexdigest()}\n")
    out(f"{header.canonical_name}: {header.format()}\n")
    return 0


def encode_digest(
    args: Namespace, config: SectionProxy, out: OutputType, err: OutputType
) -> int:
    try:
        digest = bytes.fromhex(args.digest)
    except ValueError:
        err(f"Error: {args.digest!r} isn't hex.\n")
        return 1
    try:
        header = content_md5(digest)
    except HeaderError as why:
        show_note(config["output_format"], err, why.note)
        return 1
    block = HeaderBlock()
    block.encode(header)
    for name, value in block:
        out(f"{name.decode('ascii')}: {value.decode('ascii')}\n")
    return 0


def warn_note(note_cls: Type[Note], **vrs: Union[str, int]) -> None:
    "Log notes that don't stop processing."
    log.warning("%s", note_cls("cli", vrs).plain_summary())


def show_note(output_format: str, err: OutputType, note: Note) -> None:
    if output_format == "html":
        err(f"{note.show_text()}\n")
    else:
        err(f"{note.level.value.upper()}: {note.plain_summary()}\n")


def output(out: str) -> None:
    sys.stdout.write(out)


def error_output(out: str) -> None:
    sys.stderr.write(out)


if __name__ == "__main__":
    sys.exit(main())
