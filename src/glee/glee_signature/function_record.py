from dataclasses import dataclass
from dataclasses import field
from typing import Sequence
from typing import Tuple


@dataclass(frozen=True)
class FunctionRecord:
    """One function extracted from a source file."""

    path: str
    location: Tuple[int, int]  # 从0开始的 (行, 列)，仅用于显示
    name: str
    args: Tuple[str, ...] = field(default_factory=tuple)
    rets: Tuple[str, ...] = field(default_factory=tuple)

    def signature(self) -> str:
        return canonicalize(self)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class RankedResult:
    """A function record paired with its edit distance to the query."""

    record: FunctionRecord
    distance: int


def _join(tokens: Sequence[str]) -> str:
    return ", ".join(tokens)


def canonical_signature(args: Sequence[str], rets: Sequence[str]) -> str:
    """Render the comparison key ``( a1, a2 ) -> ( r1, r2 )``.

    Type tokens are passed through verbatim; an empty side keeps both
    padding spaces.
    """
    return f"( {_join(args)} ) -> ( {_join(rets)} )"


def canonicalize(record: FunctionRecord) -> str:
    return canonical_signature(record.args, record.rets)


def render(record: FunctionRecord) -> str:
    """Render the output line ``path:row:column:name (args) -> (rets)``."""
    row, column = record.location
    return (
        f"{record.path}:{row}:{column}:{record.name} "
        f"({_join(record.args)}) -> ({_join(record.rets)})"
    )
