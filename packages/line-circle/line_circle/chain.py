"""NodeChain - arena of nodes linked by neighbor indices."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from line_circle.config import LineCircleConfig
from line_circle.constants import STEP
from line_circle.drawing import draw_node
from line_circle.progress import ProgressState
from line_circle.types import Callback, ConfigurationError, Direction

if TYPE_CHECKING:
    from line_circle.drawing import Canvas


@dataclass
class Node:
    index: int
    progress: ProgressState
    prev: int | None = None
    next: int | None = None


@dataclass
class NodeChain:
    """Nodes ``0..count-1`` built eagerly, each owning one ProgressState.

    Links are plain indices into the arena: ``prev`` points at the lower
    index, ``next`` at the higher one, ``None`` past either end.
    """

    count: int
    step: float = STEP
    nodes: list[Node] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ConfigurationError("count must be positive")
        self.nodes = []
        for i in range(self.count):
            self.nodes.append(Node(
                index=i,
                progress=ProgressState(self.step),
                prev=i - 1 if i > 0 else None,
                next=i + 1 if i < self.count - 1 else None,
            ))

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def get_next(self, index: int, direction: Direction, on_exhausted: Callback) -> int:
        """Neighbor of ``index`` in ``direction``.

        At either end ``on_exhausted`` is called and ``index`` is returned
        unchanged.
        """
        node = self.nodes[index]
        neighbor = node.prev if direction == -1 else node.next if direction == 1 else None
        if neighbor is None:
            on_exhausted()
            return index
        return neighbor

    def draw(self, canvas: Canvas, index: int, config: LineCircleConfig) -> None:
        """Draw node ``index`` then each predecessor down to node 0."""
        current: int | None = index
        while current is not None:
            node = self.nodes[current]
            draw_node(canvas, node.index, node.progress.scale, config)
            current = node.prev

    def active_nodes(self) -> list[int]:
        """Indices of nodes currently animating."""
        return [node.index for node in self.nodes if not node.progress.is_idle]
