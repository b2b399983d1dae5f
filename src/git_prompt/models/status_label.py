"""Status label model and zsh prompt markup rendering."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StatusLabel:
    """
    A piece of prompt text with optional presentation attributes.

    Attributes:
        text: Text shown in the prompt
        is_bold: Whether the text is wrapped in bold markers
        color: zsh color name for the foreground, or None for no color
    """

    text: str
    is_bold: bool = False
    color: str | None = None

    def with_color(self, color: str) -> "StatusLabel":
        """Return a copy of this label drawn in ``color``."""
        return StatusLabel(text=self.text, is_bold=self.is_bold, color=color)

    def bold(self) -> "StatusLabel":
        """Return a bold copy of this label."""
        return StatusLabel(text=self.text, is_bold=True, color=self.color)

    def render(self) -> str:
        """
        Render the label as zsh prompt markup.

        Markers nest as bold-on, color-on, text, color-off, bold-off and are
        only emitted for attributes that are set.

        Returns:
            str: Markup such as ``%B%F{blue}(not repo)%f%b``
        """
        parts = []

        if self.is_bold:
            parts.append("%B")
        if self.color is not None:
            parts.append(f"%F{{{self.color}}}")

        parts.append(self.text)

        if self.color is not None:
            parts.append("%f")
        if self.is_bold:
            parts.append("%b")

        return "".join(parts)

    def __str__(self) -> str:
        return self.render()
