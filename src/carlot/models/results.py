"""Result models for inventory loading."""

from pydantic import BaseModel, Field

from carlot.models.dealership import Dealership


class SkippedLine(BaseModel):
    """An inventory line that could not be turned into a vehicle."""

    line_number: int
    line: str
    reason: str

    @property
    def display(self) -> str:
        """Format for display."""
        return f"line {self.line_number}: {self.reason}"


class LoadResult(BaseModel):
    """Outcome of reading an inventory file."""

    dealership: Dealership
    skipped: list[SkippedLine] = Field(default_factory=list)
    header_defaulted: bool = False
    file_found: bool = True

    @property
    def vehicle_count(self) -> int:
        return len(self.dealership)

    @property
    def has_problems(self) -> bool:
        """True if any line was skipped or the header was replaced."""
        return bool(self.skipped) or (self.file_found and self.header_defaulted)
