"""Ordered collection of layers."""

from collections.abc import Iterator

from blew.layer import Layer


class LayerStack:
    """Layers in the order they were pushed."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []

    def push_layer(self, layer: Layer) -> None:
        """Attach ``layer`` and add it on top of the stack."""
        layer.on_attach()
        self._layers.append(layer)

    def pop_layer(self, name: str) -> None:
        """Remove and detach every layer called ``name``."""
        removed = [layer for layer in self._layers if layer.name == name]
        if not removed:
            return
        self._layers = [layer for layer in self._layers if layer.name != name]
        for layer in removed:
            layer.on_detach()

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __len__(self) -> int:
        return len(self._layers)