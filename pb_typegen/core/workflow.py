from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List

class TypegenStage(str, Enum):
    FETCH_SCHEMA = "FETCH_SCHEMA"
    GENERATE = "GENERATE"
    WRITE = "WRITE"
    DONE = "DONE"
    FAILED = "FAILED"

@dataclass(frozen=True)
class TypegenResult:
    output_path: Path
    interface_count: int
    skipped: List[str] = field(default_factory=list)
