from pydantic import BaseModel, ConfigDict, Field

from unix_terminal_mcp.commands.utils.constants import HOME_PATH, MAX_LESSON


class ShellState(BaseModel):
    """Stores the terminal state for a single session."""

    model_config = ConfigDict(validate_assignment=True)

    cwd: str = HOME_PATH
    lesson: int = Field(default=0, ge=0, le=MAX_LESSON)
