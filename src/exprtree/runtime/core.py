from dataclasses import dataclass, field

from ..writer import IndentingWriter


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)
    strict: bool = False
