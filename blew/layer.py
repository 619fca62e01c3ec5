"""Base class for application layers."""


class Layer:
    """A named unit of the frame loop; subclasses override the hooks they need."""

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack; marks it attached."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is popped from a stack; marks it detached."""
        self.attached = False

    def on_update(self) -> None:
        """Called once per frame."""

    def on_render(self) -> None:
        """Called once per frame, after :meth:`on_update`."""

    def on_event(self, event) -> None:
        """Called for each pending event."""