from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from gedcom_viewer.config import get_config
from gedcom_viewer.core.exceptions import EmptyGraphError, UnknownPersonError
from gedcom_viewer.loader.tokenizer import read_gedcom_text
from gedcom_viewer.logging import get_logger
from gedcom_viewer.parser_core import GEDCOMParser
from gedcom_viewer.registry.entities import GedcomData, Person, TreeNode
from gedcom_viewer.registry.queries import find_first_person_id
from gedcom_viewer.relationships.resolver import get_path_peak, get_relationship_label
from gedcom_viewer.traversal.paths import find_shortest_path
from gedcom_viewer.traversal.trees import build_ancestor_tree, build_descendant_tree


class ViewerSession:
    """
    Navigation state around one loaded family graph.

    Holds the graph, the diagram root, the starting ("home") root, the
    selected person, the generation count and the highlighted path.
    The graph is never mutated; loading new content swaps it wholesale.
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("session")

        viewer = self.cfg.viewer
        self.default_generations: int = int(viewer["default_generations"])
        self.min_trace_generations: int = int(viewer["min_trace_generations"])
        self.max_trace_generations: int = int(viewer["max_trace_generations"])
        self.main_person_id: Optional[str] = viewer.get("main_person_id")

        self.data: Optional[GedcomData] = None
        self.root_id: Optional[str] = None
        self.original_root_id: Optional[str] = None
        self.selected_id: Optional[str] = None
        self.generations: int = self.default_generations
        self.highlighted_path: List[str] = []

    # ---------------------------------------------------------
    # Loading
    # ---------------------------------------------------------
    def load_text(self, text: str, *, prefer_main: bool = True) -> GedcomData:
        """
        Parse ``text`` and make it the current graph.

        The root starts at the configured main person when present (and
        ``prefer_main`` is set), else at the first person in the file.
        """
        data = GEDCOMParser(config=self.cfg).parse_text(text)

        if prefer_main and self.main_person_id and self.main_person_id in data.people:
            start = self.main_person_id
        else:
            start = find_first_person_id(data)

        # Swap only after a complete parse
        self.data = data
        self.root_id = start or None
        self.original_root_id = start or None
        self.selected_id = None
        self.generations = self.default_generations
        self.highlighted_path = []

        self.log.info(f"Graph loaded, root={self.root_id}")
        return data

    def load_file(self, path: Union[str, Path], *, prefer_main: bool = True) -> GedcomData:
        text = read_gedcom_text(path)
        return self.load_text(text, prefer_main=prefer_main)

    def upload(self, text: str) -> GedcomData:
        """Replace the graph with uploaded content, rooted at its first person."""
        return self.load_text(text, prefer_main=False)

    # ---------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------
    def _graph(self) -> GedcomData:
        if self.data is None or not self.data.people:
            raise EmptyGraphError("No family graph loaded")
        return self.data

    def person(self, person_id: str) -> Person:
        person = self._graph().get_person(person_id)
        if person is None:
            raise UnknownPersonError(f"Unknown person id: {person_id}")
        return person

    # ---------------------------------------------------------
    # Navigation
    # ---------------------------------------------------------
    def select(self, person_id: str) -> Person:
        person = self.person(person_id)
        self.selected_id = person_id
        return person

    def set_root(self, person_id: str) -> None:
        """Re-centre the diagram; any traced path is cleared."""
        self.person(person_id)
        self.root_id = person_id
        self.highlighted_path = []

    def go_home(self) -> None:
        if not self.original_root_id:
            raise EmptyGraphError("No family graph loaded")
        self.set_root(self.original_root_id)
        self.generations = self.default_generations
        self.highlighted_path = []
        self.selected_id = self.original_root_id

    def trace_path(self, target_id: str, start_id: Optional[str] = None) -> List[str]:
        """
        Highlight the shortest path from the selected person to ``target_id``.

        On success the root moves to the path peak and the generation count
        grows with the path length. An empty result leaves the state alone.
        """
        data = self._graph()
        start = start_id or self.selected_id
        if not start:
            raise UnknownPersonError("No person selected to trace from")
        self.person(start)
        self.person(target_id)

        path = find_shortest_path(data, start, target_id)
        if not path:
            self.log.info(f"No connection between {start} and {target_id}")
            return []

        self.highlighted_path = path
        peak = get_path_peak(data, path)
        if peak and peak != self.root_id:
            self.root_id = peak

        self.generations = min(
            max(len(path) + 2, self.min_trace_generations),
            self.max_trace_generations,
        )
        self.log.info(f"Traced {start} -> {target_id} ({len(path)} people), root={self.root_id}")
        return path

    # ---------------------------------------------------------
    # Projections
    # ---------------------------------------------------------
    def ancestor_tree(self) -> Optional[TreeNode]:
        data = self._graph()
        if not self.root_id:
            return None
        return build_ancestor_tree(data, self.root_id, self.generations)

    def descendant_tree(self) -> Optional[TreeNode]:
        data = self._graph()
        if not self.root_id:
            return None
        return build_descendant_tree(
            data, self.root_id, self.generations, self.highlighted_path or None
        )

    def relationship_to_root(self, person_id: str) -> str:
        data = self._graph()
        self.person(person_id)
        return get_relationship_label(data, self.root_id or person_id, person_id)
