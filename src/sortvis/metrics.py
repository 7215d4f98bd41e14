"""Step, comparison and access counters."""

from dataclasses import asdict, dataclass

from .steps import StepKind


@dataclass
class Metrics:
    steps: int = 0
    comparisons: int = 0
    accesses: int = 0

    def record(self, step):
        self.steps += 1
        if step.kind is StepKind.COMPARE:
            self.comparisons += 1
        else:
            self.accesses += 1

    def reset(self):
        self.steps = 0
        self.comparisons = 0
        self.accesses = 0

    def as_dict(self):
        return asdict(self)
