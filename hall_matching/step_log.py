from __future__ import annotations

from typing import List, Optional


class StepLog:
    """Копит строки пошаговых пояснений и (по желанию) дублирует их в stdout."""

    def __init__(self, echo: bool = False) -> None:
        self.lines: List[str] = []
        self.echo = echo

    def log(self, msg: str = "", depth: int = 0) -> None:
        line = "  " * depth + msg
        self.lines.append(line)
        if self.echo:
            print(line)

    def dump_to_file(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(self.lines))

    def __len__(self) -> int:
        return len(self.lines)


def say(log: Optional[StepLog], msg: str = "", depth: int = 0) -> None:
    """Пишет в лог, если он передан (None = без пояснений)."""
    if log is not None:
        log.log(msg, depth)
