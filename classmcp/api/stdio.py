import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO
from classmcp.api.dispatcher import Dispatcher
from classmcp.schemas.rpc import PARSE_ERROR, RpcError, error_response

log = logging.getLogger(__name__)


def handle_line(dispatcher: Dispatcher, line: str) -> Optional[Dict[str, Any]]:
    """Decode one input line and dispatch it. Blank lines are ignored."""
    line = line.strip()
    if not line:
        return None
    try:
        message = json.loads(line)
    except ValueError as e:
        log.warning("Could not parse message: %s", e)
        return error_response(None, RpcError(PARSE_ERROR, "Parse error", str(e)))
    return dispatcher.handle(message)


def serve_stdio(dispatcher: Dispatcher, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Serve newline-delimited JSON-RPC until stdin is closed."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    for line in stdin:
        response = handle_line(dispatcher, line)
        if response is None:
            continue
        stdout.write(json.dumps(response, ensure_ascii=False) + "\n")
        stdout.flush()

    log.info("stdin closed, shutting down")
