from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RunState(Enum):
    """Enum for the interaction loop's lifecycle."""
    RUNNING = "running"
    EXITING = "exiting"


@dataclass
class ViewState:
    """Selection cursor over a catalog of ``row_count`` rows.

    ``selected_index`` stays None until the first navigation command and is
    always a valid row index afterwards. With zero rows every transition is
    a no-op.
    """
    row_count: int
    selected_index: Optional[int] = None
    chosen_index: Optional[int] = None

    def next(self) -> Optional[int]:
        """Select the following row, wrapping from the last row to the first."""
        if self.row_count <= 0:
            return None
        if self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = (self.selected_index + 1) % self.row_count
        return self.selected_index

    def previous(self) -> Optional[int]:
        """Select the preceding row, wrapping from the first row to the last."""
        if self.row_count <= 0:
            return None
        if self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = (self.selected_index - 1 + self.row_count) % self.row_count
        return self.selected_index

    def activate(self) -> Optional[int]:
        """Record the current selection as the chosen row."""
        if self.row_count <= 0:
            return None
        self.chosen_index = self.selected_index
        return self.chosen_index
