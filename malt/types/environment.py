"""Runtime environment for malt.

The Environment stores bindings of symbol names to evaluated Nodes and supports
nested scopes via an `outer` link. The link is a plain reference to a frame
owned by someone else (the interpreter owns the root, `scope()` owns the
children), so frames never keep their parents alive.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from malt.types.node import Node

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from symbol names to Nodes."""

    __slots__ = ("vars", "outer", "depth")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Node] = {}
        self.outer: Environment | None = outer
        self.depth: int = 0 if outer is None else outer.depth + 1

    def set(self, name: str, value: Node) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str) -> Optional[Node]:
        """Look up the value bound to `name`, or None if no frame binds it."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def update(self, mapping: dict[str, Node]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.vars[k] = v

    @contextmanager
    def scope(self) -> Iterator[Environment]:
        """Push a child frame for the duration of the `with` block.

        The frame is released (bindings dropped, outer link cut) however the
        block exits, so a binding can never outlive the construct that made it.
        """
        frame = Environment(outer=self)
        logger.debug("push frame depth=%d", frame.depth)
        try:
            yield frame
        finally:
            frame.release()
            logger.debug("release frame depth=%d", frame.depth)

    def release(self) -> None:
        self.vars.clear()
        self.outer = None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v.as_string}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
