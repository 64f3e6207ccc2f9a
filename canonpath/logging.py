from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

from .entities import Point


@dataclass(frozen=True)
class ConversionEvent:
    kind: str
    note: str
    points: Tuple[Point, ...] = ()
    values: Tuple[Tuple[str, float], ...] = ()


def write_event_report(events: Sequence[ConversionEvent], destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    lines: List[str] = []
    for idx, event in enumerate(events, start=1):
        lines.append(f"#{idx:04d} {event.kind:<18} {event.note}")
        if event.points:
            joined = " ".join(f"({x:.6f},{y:.6f})" for x, y in event.points)
            lines.append(f"       points={joined}")
        if event.values:
            joined = " ".join(f"{name}={value:.6f}" for name, value in event.values)
            lines.append(f"       {joined}")
    destination.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")


@dataclass
class ConversionLogger:
    """Collects degenerate substitutions and radius corrections for a report file."""

    destination: Path
    events: List[ConversionEvent] = field(default_factory=list)

    def record(
        self,
        *,
        kind: str,
        note: str,
        points: Sequence[Point] = (),
        **values: float,
    ) -> None:
        self.events.append(
            ConversionEvent(
                kind=kind,
                note=note,
                points=tuple(points),
                values=tuple(sorted(values.items())),
            )
        )

    def count(self, kind: str) -> int:
        return sum(1 for event in self.events if event.kind == kind)

    def flush(self) -> None:
        if not self.events:
            return
        write_event_report(self.events, self.destination)
