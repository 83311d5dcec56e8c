"""Line-oriented read/eval/print loop over text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from malt.config import get_prompt
from malt.interpreter import Interpreter


def repl(
    interp: Optional[Interpreter] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    prompt: Optional[str] = None,
) -> int:
    """Prompt, read one line, print its value; stop at end of input."""
    interp = interp or Interpreter()
    prompt = get_prompt() if prompt is None else prompt
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        out = interp.rep(line.rstrip("\n"))
        if out is not None:
            stdout.write(out + "\n")
    stdout.write("\n")
    return 0
