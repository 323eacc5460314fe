"""Default configuration: the order-zero graph."""

from randgraph.config.generation import GenerationConfig

# All-zero counts: no vertices, no trials, probability 0, unseeded.
DEFAULT_CONFIG = GenerationConfig()
