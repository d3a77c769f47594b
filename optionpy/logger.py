from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Callable, Dict, Optional


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Structured logger writing one line per record to stderr.

    Records are either ``[ts] name LEVEL: msg k=v ...`` or, with
    ``json_output``, a compact JSON object per line.
    """

    def __init__(self, name: str = "optionpy", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 20)
        self.json_output = json_output
        self.context = dict(context or {})

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        ctx = dict(self.context); ctx.update(fields)
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output, context=ctx)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def log(self, level: str, msg: str, **fields: Any) -> None:
        level = level.upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level: {level}")
        if _LEVELS[level] < self.level:
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        data: Dict[str, Any] = {
            "ts": ts,
            "name": self.name,
            "level": level,
            "msg": msg,
        }
        all_fields: Dict[str, Any] = {}
        all_fields.update(self.context)
        all_fields.update(fields)
        if self.json_output:
            if all_fields:
                data["fields"] = all_fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=sys.stderr)
        else:
            extras = "".join([f" {k}={v!r}" for k, v in sorted(all_fields.items())]) if all_fields else ""
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self.log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self.log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self.log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self.log("ERROR", msg, **fields)


def log_inspect(logger: ConsoleLogger, msg: str, level: str = "DEBUG", field: str = "value") -> Callable[[Any], None]:
    """Build an ``Option.inspect`` callback that logs the payload.

    Example:
        ```python
        log = ConsoleLogger(level="DEBUG")
        port = (
            from_nullable(env.get("PORT"))
            .inspect(log_inspect(log, "raw port"))
            .map(int)
            .filter(lambda p: 0 < p < 65536)
            .inspect(log_inspect(log, "accepted port", field="port"))
            .unwrap_or(8080)
        )
        ```

    Absent chains never reach the callback, so nothing is logged for them.
    """
    level = level.upper()
    if level not in _LEVELS:
        raise ValueError(f"unknown log level: {level}")

    def emit(value: Any) -> None:
        logger.log(level, msg, **{field: value})

    return emit
