from __future__ import annotations

"""
Per-session resolution report.

Diagnostics are collected here alongside (never instead of) the best-effort
output, so a caller can tell a clean run from one that degraded gracefully.

Diagnostic kinds:
- unresolved_reference: a render target matched no file
- unresolved_route:     a route name matched no route table entry
- read_failure:         a located file could not be read
- environment_failure:  the host application (routes) could not be loaded
- repeated_reference:   a partial was already expanded in this call
"""

import json
import time
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Literal, Optional

DiagnosticKind = Literal[
    'unresolved_reference',
    'unresolved_route',
    'read_failure',
    'environment_failure',
    'repeated_reference',
]


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    source: Optional[str] = None

    def __str__(self) -> str:
        where = f' (in {self.source})' if self.source else ''
        return f'{self.kind}: {self.message}{where}'


@dataclass
class ResolutionReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    templates: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {"lookup": 0.0, "expand": 0.0, "format": 0.0}
    )

    def add_template(self, relpath: str) -> None:
        self.templates.append(relpath)

    def add_diagnostic(self, kind: DiagnosticKind, message: str, *, source: Optional[str] = None) -> None:
        self.diagnostics.append(Diagnostic(kind, message, source))

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]

    @property
    def warnings(self) -> List[str]:
        return [str(d) for d in self.diagnostics]

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = (
            self.finished_at - self.started_at if self.finished_at else None
        )

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "templates": self.templates,
                "diagnostics": [asdict(d) for d in self.diagnostics],
                "time_by_stage": self.time_by_stage,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: ResolutionReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
