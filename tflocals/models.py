from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class Target:
    """
    What one run updates: the local ``attribute_name`` in the file at
    ``file_path``, set to ``value``.
    """
    file_path: Path
    attribute_name: str
    value: str

    @classmethod
    def create(cls, file_path: Union[str, Path], attribute_name: str, value: str) -> "Target":
        return cls(file_path=Path(file_path), attribute_name=attribute_name, value=value)

    def __post_init__(self) -> None:
        if not self.attribute_name:
            raise ValueError("attribute_name must not be empty")
