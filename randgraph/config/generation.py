"""Generation configuration dataclass, frozen and slotted for immutability."""

from dataclasses import dataclass

from randgraph.graph.binomial import check_parameters


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Binomial graph generation parameters.

    Range checks run in __post_init__ so an invalid configuration is
    rejected before any generator is built.
    """

    vertices: int = 0  # number of vertices
    trials: int = 0  # Bernoulli trials per tail vertex
    probability: float = 0.0  # success probability of each trial
    loops: bool = False
    multiedges: bool = False
    directed: bool = False
    labels: tuple[str, ...] = ()  # vertex labels, cycled past the end
    seed: int | None = None  # None draws an unpredictable seed
    description: str = ""

    def __post_init__(self) -> None:
        check_parameters(self.vertices, self.trials, self.probability)
