"""String-evolving genetic algorithm and nearest-neighbour travelling salesman solver."""

__version__ = "0.1.0"