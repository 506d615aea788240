from typing import Dict, Optional, Type

from perfect_maze.algo.base import MazeAlgorithm
from perfect_maze.algo.dfs import DepthFirstSearch
from perfect_maze.algo.prim import PrimsAlgorithm
from perfect_maze.algo.kruskal import KruskalsAlgorithm

ALGORITHM_CLASSES: Dict[str, Type[MazeAlgorithm]] = {
    cls.name: cls for cls in (DepthFirstSearch, PrimsAlgorithm, KruskalsAlgorithm)
}

ALGORITHMS = tuple(ALGORITHM_CLASSES)


def create_algorithm(name: str, seed: Optional[int] = None) -> MazeAlgorithm:
    try:
        cls = ALGORITHM_CLASSES[name]
    except KeyError:
        raise ValueError(f"Unknown algorithm {name!r}, expected one of {', '.join(ALGORITHMS)}") from None
    return cls(seed=seed)
