"""Pydantic models for the scanning data flow."""

from pydantic import BaseModel, ConfigDict


class CallSite(BaseModel):
    """One matched call: raw argument text plus 1-based source offsets."""

    model_config = ConfigDict(frozen=True)

    args_text: str
    start: int  # first character of the prefix match
    close: int  # the matching ")"

    @property
    def args_start(self) -> int:
        """1-based offset of the first argument character."""
        return self.close - len(self.args_text)


class ClassDocSite(BaseModel):
    """An existing ``---@class`` line and the table assigned below it."""

    model_config = ConfigDict(frozen=True)

    class_name: str
    line_end: int  # 0-based index of the newline ending the class line
    table_var: str | None = None
