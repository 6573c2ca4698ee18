import random
from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional, Sequence, TypeVar
from maze_backtracker.core.state import MazeState

T = TypeVar("T")
Chooser = Callable[[Sequence[T]], T]


class Generator(ABC):
    def __init__(self, state: MazeState, seed: int = None,
                 choose: Optional[Chooser] = None, check_invariants: bool = False):
        self.state = state
        self.seed = seed
        # Uniform pick over a non-empty sequence
        self.choose = choose if choose is not None else random.Random(seed).choice
        self.check_invariants = check_invariants
        self.step_count = 0

    @property
    def finished(self) -> bool:
        return self.state.complete

    @abstractmethod
    def step(self) -> bool:
        """
        Performs one atomic transition on self.state.
        Returns False when there was nothing left to do.
        """
        pass

    def run(self) -> Iterator[str]:
        """
        Yields a status string after every step until the state completes.
        """
        while not self.state.complete:
            self.step()
            yield f"Step {self.step_count}... Stack: {len(self.state.stack)}"
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
