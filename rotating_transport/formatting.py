"""Default line formatter: [2017-08-02 09:33:06:0042] [warn] message"""

import json
import traceback
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class LogMessage:
    level: str
    data: tuple = ()
    date: datetime = field(default_factory=datetime.now)


def stringify(item) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, BaseException):
        return "".join(
            traceback.format_exception(type(item), item, item.__traceback__)
        ).rstrip("\n")
    if isinstance(item, (dict, list, tuple)):
        try:
            return json.dumps(item)
        except (TypeError, ValueError):
            return str(item)
    return str(item)


def format_message(msg: LogMessage) -> str:
    d = msg.date
    timestamp = (
        f"{d.year}-{d.month:02d}-{d.day:02d} "
        f"{d.hour:02d}:{d.minute:02d}:{d.second:02d}:{d.microsecond // 1000:04d}"
    )
    return f"[{timestamp}] [{msg.level}] " + " ".join(stringify(x) for x in msg.data)
