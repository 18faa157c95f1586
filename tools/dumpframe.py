#!/usr/bin/env python
"""Decode RLE compressed OLED frames and dump them as text, source arrays or raw bytes."""

import logging
import os.path
import sys
from argparse import ArgumentParser
from typing import IO, Optional

from oledframe.frame import DEFAULT_HEIGHT, DEFAULT_WIDTH, Frame
from oledframe.frameexceptions import FrameException
from oledframe.high_level import decode_frame
from oledframe.image import FrameImageWriter
from oledframe.utils import format_c_array, format_rust_array

logging.basicConfig()

log = logging.getLogger(__name__)

OUTPUT_TYPES = ("text", "blocks", "c", "rust", "raw")


def array_name(fname: str) -> str:
    stem = os.path.splitext(os.path.basename(fname))[0]
    return stem.upper()


def dumpframe(
    outfp: IO,
    fname: str,
    base: Optional[bytes] = None,
    size: Optional[int] = None,
    output_type: str = "text",
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    imagewriter: Optional[FrameImageWriter] = None,
) -> bytes:
    with open(fname, "rb") as fp:
        data = fp.read()
    decoded = decode_frame(data, base=base, size=size)
    log.info("%s: %d bytes decoded to %d", fname, len(data), len(decoded))

    if output_type == "text":
        outfp.write(Frame(width, height, decoded).to_text())
    elif output_type == "blocks":
        outfp.write(str(Frame(width, height, decoded)))
    elif output_type == "c":
        outfp.write(format_c_array(array_name(fname), decoded))
    elif output_type == "rust":
        outfp.write(format_rust_array(array_name(fname), decoded))

    if imagewriter is not None:
        frame = Frame(width, height, decoded)
        imagewriter.export_frame(frame, os.path.splitext(os.path.basename(fname))[0])
    return decoded


def create_parser() -> ArgumentParser:
    parser = ArgumentParser(description=__doc__, add_help=True)
    parser.add_argument(
        "files", type=str, default=None, nargs="+",
        help="One or more compressed frame files.")

    parser.add_argument(
        "--debug", "-d", default=False, action="store_true",
        help="Use debug logging level.")

    decode_params = parser.add_argument_group(
        "Decoder", description="Used while decoding frames")
    decode_params.add_argument(
        "--base", "-b", type=str, default=None,
        help="Base frame file the frames were diffed against.")
    decode_params.add_argument(
        "--size", "-s", type=int, default=None,
        help="Maximum number of decoded bytes per frame.")
    decode_params.add_argument(
        "--width", "-W", type=int, default=DEFAULT_WIDTH,
        help="Panel width in pixels (default %d)." % DEFAULT_WIDTH)
    decode_params.add_argument(
        "--height", "-H", type=int, default=DEFAULT_HEIGHT,
        help="Panel height in pixels (default %d)." % DEFAULT_HEIGHT)

    output_params = parser.add_argument_group(
        "Output", description="Used during output generation.")
    output_params.add_argument(
        "--outfile", "-o", type=str, default="-",
        help='Path to file where output is written. Or "-" (default) to '
             "write to stdout.")
    output_params.add_argument(
        "--output_type", "-t", type=str, default="text", choices=OUTPUT_TYPES,
        help="Output type: %s (default is text)" % "|".join(OUTPUT_TYPES))
    output_params.add_argument(
        "--output-dir", "-O", type=str, default=None,
        help="Also save every frame as a PNG image in this directory.")
    output_params.add_argument(
        "--scale", type=int, default=1,
        help="Image pixels per panel pixel for PNG output.")
    return parser


def main(argv=None) -> int:
    parser = create_parser()
    args = parser.parse_args(args=argv)

    if args.debug:
        logging.getLogger("oledframe").setLevel(logging.DEBUG)
        log.setLevel(logging.DEBUG)

    base = None
    if args.base:
        with open(args.base, "rb") as fp:
            base = fp.read()

    imagewriter = None
    if args.output_dir:
        imagewriter = FrameImageWriter(args.output_dir, scale=args.scale)

    raw = args.output_type == "raw"
    if args.outfile == "-":
        outfp = sys.stdout.buffer if raw else sys.stdout
    else:
        outfp = open(args.outfile, "wb" if raw else "w", encoding=None if raw else "utf-8")

    try:
        for fname in args.files:
            decoded = dumpframe(
                outfp,
                fname,
                base=base,
                size=args.size,
                output_type=args.output_type,
                width=args.width,
                height=args.height,
                imagewriter=imagewriter,
            )
            if raw:
                outfp.write(decoded)
    except (FrameException, ValueError) as e:
        log.error("%s", e)
        return 1
    finally:
        if args.outfile != "-":
            outfp.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
