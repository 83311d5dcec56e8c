"""
malt_server: network front ends for the malt interpreter.

- repl_server: a JSON-lines REPL over TCP that keeps one Interpreter alive so
  definitions persist across requests.
"""
