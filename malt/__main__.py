from __future__ import annotations

import argparse
import sys
from typing import Optional

from malt.config import configure_logging, get_log_level, get_prompt, get_server_address
from malt.interpreter import Interpreter
from malt.repl import repl


def main(argv: Optional[list[str]] = None) -> int:
    host, port = get_server_address()
    parser = argparse.ArgumentParser(prog="malt", description="malt Lisp interpreter")
    parser.add_argument("-e", "--eval", dest="code", help="evaluate one line, print it and exit")
    parser.add_argument("--prompt", default=None, help="REPL prompt (default: $MALT_PROMPT or 'user> ')")
    parser.add_argument("--log-level", default=None, help="logging level (default: $MALT_LOG_LEVEL or WARNING)")
    parser.add_argument("--serve", action="store_true", help="serve a JSON-lines REPL over TCP")
    parser.add_argument("--host", default=host)
    parser.add_argument("--port", type=int, default=port)
    args = parser.parse_args(argv)

    configure_logging(get_log_level(args.log_level))

    if args.serve:
        from malt_server.repl_server import ReplServer
        ReplServer(args.host, args.port).serve_forever()
        return 0

    if args.code is not None:
        out = Interpreter().rep(args.code)
        if out is not None:
            print(out)
        return 1 if out is not None and out.startswith("ERROR: ") else 0

    return repl(prompt=args.prompt if args.prompt is not None else get_prompt())


if __name__ == "__main__":
    sys.exit(main())
