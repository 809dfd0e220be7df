# qdm/logging_utils.py

from __future__ import annotations
from datetime import datetime

from qdm.core.config import get_config


def _stamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def qstep(msg: str) -> None:
    if not get_config().verbose:
        return
    print(f"[{_stamp()}] ⧉ QDM: {msg}")


def qwarn(msg: str) -> None:
    print(f"[{_stamp()}] ⚠️ QDM WARN: {msg}")
