"""Worker records kept by the calling layer."""
from dataclasses import dataclass
from typing import Iterable, List


class DuplicateWorkerNameError(ValueError):
    """Two worker records share the same display name."""


@dataclass
class Worker:
    """A worker known by an opaque id; the allocator only sees `name`."""

    id: str
    name: str
    salary_coefficient: float = 1.0

    def __post_init__(self):
        self.id = str(self.id).strip()
        self.name = str(self.name).strip()
        if self.salary_coefficient is None:
            self.salary_coefficient = 1.0
        self.salary_coefficient = float(self.salary_coefficient)
        if self.salary_coefficient < 0:
            raise ValueError(
                f"Worker {self.id!r} salary_coefficient must be non-negative, got {self.salary_coefficient}"
            )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "salary_coefficient": self.salary_coefficient,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Worker":
        coef = d.get("salary_coefficient")
        return cls(
            id=d.get("id", ""),
            name=d.get("name", ""),
            salary_coefficient=1.0 if coef in (None, "") else float(coef),
        )


def resolve_names(workers: Iterable[Worker]) -> List[str]:
    """
    Display names for a set of workers, checked for uniqueness.

    The allocator keys everything by name, so two records with the same
    name would be merged silently.

    Raises:
        DuplicateWorkerNameError: if a name occurs twice
    """
    names: List[str] = []
    owner = {}
    for w in workers:
        if w.name in owner:
            raise DuplicateWorkerNameError(
                f"Workers {owner[w.name]!r} and {w.id!r} are both named {w.name!r}"
            )
        owner[w.name] = w.id
        names.append(w.name)
    return names
