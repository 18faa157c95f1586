"""Utilities shared across the oledframe fuzzing harnesses"""

import logging

# Largest panel buffer the harnesses allocate
MAX_OUTPUT_SIZE = 4096


def prepare_oledframe_fuzzing() -> None:
    """Used to disable logging of the oledframe module"""
    logging.getLogger("oledframe").setLevel(logging.CRITICAL)
