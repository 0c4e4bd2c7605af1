"""Backtrace graphs shared by codemodel target and directory objects."""

from __future__ import annotations

from cmake_file_api.objects.base import NonNegativeInt, ReplyStruct


class BacktraceNode(ReplyStruct, frozen=True):
    """One node of a backtrace graph.

    ``file`` indexes ``BacktraceGraph.files``; ``command`` indexes
    ``BacktraceGraph.commands``; ``parent`` indexes ``BacktraceGraph.nodes``.
    """

    file: NonNegativeInt
    line: NonNegativeInt | None = None
    command: NonNegativeInt | None = None
    parent: NonNegativeInt | None = None


class BacktraceGraph(ReplyStruct, frozen=True):
    """Deduplicated CMake language backtraces referenced by index."""

    nodes: tuple[BacktraceNode, ...] = ()
    commands: tuple[str, ...] = ()
    files: tuple[str, ...] = ()

    def frames(self, index: int | None) -> tuple[BacktraceNode, ...]:
        """Walk parent links from ``index`` to the root.

        Parameters
        ----------
        index
            Node index, typically a ``backtrace`` member of another object.

        Returns
        -------
        tuple[BacktraceNode, ...]
            Nodes from innermost to outermost; empty when ``index`` is None.
        """
        frames: list[BacktraceNode] = []
        current = index
        while current is not None and 0 <= current < len(self.nodes) and len(frames) < len(
            self.nodes
        ):
            node = self.nodes[current]
            frames.append(node)
            current = node.parent
        return tuple(frames)

    def describe(self, node: BacktraceNode) -> str:
        """Return ``file:line command`` for a node."""
        file = self.files[node.file] if node.file < len(self.files) else f"<file {node.file}>"
        location = file if node.line is None else f"{file}:{node.line}"
        if node.command is None or node.command >= len(self.commands):
            return location
        return f"{location} {self.commands[node.command]}"


__all__ = ["BacktraceGraph", "BacktraceNode"]
