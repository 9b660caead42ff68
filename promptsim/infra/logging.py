import json
import sys
import time
from typing import Any, Dict

from promptsim.config import log_enabled_from_env


def log_event(event: str, **fields: Any) -> None:
    """
    Reason:
    - Session activity (rejections, evaluations, resets) must be traceable per attempt.
    Benefit:
    - One JSON line per event on stderr; grep by attempt_id, grade, event.
    """
    if not log_enabled_from_env():
        return

    payload: Dict[str, Any] = {
        "ts": time.time(),
        "event": event,
        **fields,
    }
    print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
