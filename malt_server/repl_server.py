"""
Simple TCP REPL server for malt.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(def! x 1)"}
- Response: {"ok": true, "result": <printed value>} or {"ok": false, "error": <message>}
  Blank or comment-only code answers {"ok": true, "result": null}.

All clients share one Interpreter, so definitions persist across requests and
connections. Requests are evaluated one at a time under a lock.

`serve_forever` runs until `shutdown()` is called; it then stops accepting,
closes the open client connections and joins their threads before returning.
"""

from __future__ import annotations

import json
import logging
import socket
import threading
from typing import Any, Optional, Tuple

from malt.config import DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT
from malt.interpreter import Interpreter
from malt.types.errors import MaltEmptyInput

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str = DEFAULT_SERVER_HOST, port: int = DEFAULT_SERVER_PORT):
        self.host = host
        self.port = port
        # Keep a single interpreter to maintain session state
        self.interp = Interpreter()
        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._stop = threading.Event()
        self._clients: dict[threading.Thread, socket.socket] = {}
        self._clients_lock = threading.Lock()

    def handle_request(self, req: Any) -> dict[str, Any]:
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        with self._lock:
            result = self.interp.eval(code)
        if isinstance(result.error, MaltEmptyInput):
            return {"ok": True, "result": None}
        if result.is_error:
            return {"ok": False, "error": result.message}
        printed = self.interp.render(result.value)
        if printed.is_error:
            return {"ok": False, "error": printed.message}
        return {"ok": True, "result": printed.value}

    def handle_line(self, line: bytes) -> dict[str, Any]:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        return self.handle_request(req)

    def wait_ready(self, timeout: Optional[float] = None) -> bool:
        """Block until the listening socket is bound; `port` is then the real port."""
        return self._ready.wait(timeout)

    def shutdown(self) -> None:
        self._stop.set()

    def serve_forever(self, poll_interval: float = 0.5):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            # port 0 asks the OS for a free port
            self.port = s.getsockname()[1]
            s.settimeout(poll_interval)
            logger.info("listening on %s:%d", self.host, self.port)
            self._ready.set()
            while not self._stop.is_set():
                try:
                    conn, addr = s.accept()
                except socket.timeout:
                    continue
                conn.settimeout(None)
                t = threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True)
                with self._clients_lock:
                    self._clients[t] = conn
                t.start()
        self._close_clients()
        logger.info("server stopped")

    def _close_clients(self, timeout: float = 5.0) -> None:
        with self._clients_lock:
            clients = list(self._clients.items())
        for _, conn in clients:
            try:
                conn.shutdown(socket.SHUT_RDWR)
            except OSError:
                # already closed by the client thread
                pass
        for t, _ in clients:
            t.join(timeout)

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("client connected: %s:%d", *addr)
        try:
            with conn:
                buf = b""
                while True:
                    try:
                        data = conn.recv(4096)
                    except OSError:
                        break
                    if not data:
                        break
                    buf += data
                    while b"\n" in buf:
                        line, buf = buf.split(b"\n", 1)
                        line = line.strip()
                        if not line:
                            continue
                        resp = self.handle_line(line)
                        conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        finally:
            with self._clients_lock:
                self._clients.pop(threading.current_thread(), None)
            logger.info("client disconnected: %s:%d", *addr)


if __name__ == "__main__":
    ReplServer().serve_forever()
