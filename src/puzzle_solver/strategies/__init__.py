from puzzle_solver.strategies.cascade import decode_cascade
from puzzle_solver.strategies.dictionary import dictionary_search
from puzzle_solver.strategies.keyspace import keyspace_search
from puzzle_solver.strategies.sequence import infer_sequence

__all__ = [
    "decode_cascade",
    "dictionary_search",
    "infer_sequence",
    "keyspace_search",
]
