#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 varint tool.

Usage:
    python leb128_tool.py encode 300 -5
    python leb128_tool.py decode ac02 --signed
    python leb128_tool.py length ac02ff --offset 0
    python leb128_tool.py send --port /dev/ttyACM0 300 -5
    python leb128_tool.py recv --port /dev/ttyACM0 --count 2

Requirements:
    pip install pyserial
"""

import argparse
import sys

import serial

from leb128_codec import Transport, Varint, iter_varints
from leb128_codec.errors import Leb128Error
from leb128_codec.transport import TransportError


def parse_hex(text: str) -> bytes:
    """Parse a hex string, allowing spaces and an optional 0x prefix."""
    text = text.replace(" ", "")
    if text.lower().startswith("0x"):
        text = text[2:]
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex string: {text!r}") from None


def cmd_encode(values):
    """Print the encoding of each value."""
    for value in values:
        print(f"{value}: {Varint.encode(value).hex()}")


def cmd_decode(data: bytes, offset: int, signed: bool):
    """Print every varint in data from offset onwards."""
    for value in iter_varints(data, offset, signed):
        print(value)


def cmd_length(data: bytes, offset: int):
    """Print the length of the varint at offset."""
    print(Varint.get_length(data, offset))


def cmd_send(transport: Transport, values):
    """Send values over the serial port."""
    data = transport.write_varints(values)
    print(f"Sent {len(values)} varint(s), {len(data)} bytes: {data.hex()}")


def cmd_recv(transport: Transport, count: int, signed: bool):
    """Receive count varints and print them."""
    for _ in range(count):
        print(transport.read_varint(signed))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode, decode and transfer LEB128 varints"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode integers to hex")
    encode_parser.add_argument("values", type=int, nargs="+", help="Integers to encode")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode varints from hex")
    decode_parser.add_argument("data", type=parse_hex, help="Hex-encoded bytes")
    decode_parser.add_argument("--offset", "-o", type=int, default=0,
                               help="Offset of the first varint")
    decode_parser.add_argument("--signed", "-s", action="store_true",
                               help="Decode as negative values")

    # length command
    length_parser = subparsers.add_parser("length", help="Length of a varint in hex")
    length_parser.add_argument("data", type=parse_hex, help="Hex-encoded bytes")
    length_parser.add_argument("--offset", "-o", type=int, default=0,
                               help="Offset of the varint")

    # serial commands share the port options
    port_parser = argparse.ArgumentParser(add_help=False)
    port_parser.add_argument("--port", "-p", required=True,
                             help="Serial port (e.g., /dev/ttyACM0 or loop://)")
    port_parser.add_argument("--baudrate", "-b", type=int, default=115200,
                             help="Baud rate")
    port_parser.add_argument("--timeout", "-t", type=float, default=5.0,
                             help="Read timeout in seconds")

    send_parser = subparsers.add_parser("send", parents=[port_parser],
                                        help="Send varints over a serial port")
    send_parser.add_argument("values", type=int, nargs="+", help="Integers to send")

    recv_parser = subparsers.add_parser("recv", parents=[port_parser],
                                        help="Receive varints from a serial port")
    recv_parser.add_argument("--count", "-n", type=int, default=1,
                             help="Number of varints to read")
    recv_parser.add_argument("--signed", "-s", action="store_true",
                             help="Decode as negative values")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if args.command == "encode":
            cmd_encode(args.values)
        elif args.command == "decode":
            cmd_decode(args.data, args.offset, args.signed)
        elif args.command == "length":
            cmd_length(args.data, args.offset)
        else:
            try:
                transport = Transport(args.port, args.baudrate, args.timeout)
            except (serial.SerialException, ValueError) as e:
                print(f"Error opening {args.port}: {e}")
                sys.exit(1)

            try:
                if args.command == "send":
                    cmd_send(transport, args.values)
                elif args.command == "recv":
                    cmd_recv(transport, args.count, args.signed)
            finally:
                transport.close()
    except (Leb128Error, TransportError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
