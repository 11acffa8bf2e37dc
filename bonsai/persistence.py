"""
Save and load a generation's progress.

A tree is fully determined by its seed, its growth parameters and its canvas
size, so the record only keeps the seed and the number of branches grown.
Loading replays the seed and fast-forwards until that branch count.
"""

from pathlib import Path

from pydantic import BaseModel, Field


class SaveState(BaseModel):
    """Persisted progress of one tree."""

    seed: int = Field(ge=0, description="Seed of the random source")
    branches: int = Field(ge=1, description="Branches grown when the tree was saved")


def save_state(filepath: str | Path, seed: int, branches: int) -> SaveState:
    """Write the record as JSON and return it."""
    state = SaveState(seed=seed, branches=branches)
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(state.model_dump_json() + "\n")
    return state


def load_state(filepath: str | Path) -> SaveState:
    """
    Read a record written by save_state().

    Raises:
        FileNotFoundError: The file does not exist
        pydantic.ValidationError: The contents are not a valid record
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"No saved tree at {path}")
    return SaveState.model_validate_json(path.read_text())
