"""Abstract interface for rendering screens."""

from abc import ABC, abstractmethod

RenderPlan = list[tuple[str, str]]


class Display(ABC):
    """Receives render plans of (style, text) pairs and shows them."""

    @abstractmethod
    def render(self, plan: RenderPlan) -> None:
        """Show a full render plan, one pair per line."""
        pass

    def format_prompt(self, text: str) -> str:
        """Decorate the input prompt; plain by default."""
        return text
