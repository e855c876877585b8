from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from puzzle_solver.models import Category, PuzzleDescriptor

Difficulty = Literal["easy", "medium", "hard", "impossible"]


class CatalogPuzzle(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    type: Category
    name: str
    description: str
    difficulty: Difficulty
    challenge: str
    hint: Optional[str] = None
    solution: Optional[str] = None
    solution_method: Optional[str] = None
    reward: Optional[str] = None

    # Bitcoin specific.
    bits: Optional[int] = None
    address: Optional[str] = None
    balance: Optional[str] = None

    def to_descriptor(self) -> PuzzleDescriptor:
        """Build the engine input for this puzzle."""
        return PuzzleDescriptor(
            category=self.type,
            challenge=self.challenge,
            bit_width=self.bits,
            known_solution=self.solution,
        )


def _bitcoin(id: int, bits: int, address: str, balance: str, difficulty: Difficulty, *,
             name: str, description: str, solution_method: str, hint: str,
             solution: Optional[str] = None) -> CatalogPuzzle:
    return CatalogPuzzle(
        id=id,
        type=Category.BITCOIN_ADDRESS,
        name=name,
        description=description,
        difficulty=difficulty,
        challenge=address,
        bits=bits,
        address=address,
        balance=balance,
        solution=solution,
        solution_method=solution_method,
        hint=hint,
    )


PUZZLES: Tuple[CatalogPuzzle, ...] = (
    # Bitcoin address puzzles
    _bitcoin(
        1, 1, "1BgGZ9tcN4rm9KBzDn7KprQz87SZ26SAMH", "0.001", "easy",
        name="Puzzle #1 - 1 bit",
        description="Find the private key for a 1-bit Bitcoin address",
        solution="1",
        solution_method="Brute force: 2^1 = 2 possible keys",
        hint="Only 2 possible private keys to try",
    ),
    _bitcoin(
        2, 2, "1CUNEBjYrCn2y1SdiUMohaKUi4wpP326Lb", "0.002", "easy",
        name="Puzzle #2 - 2 bits",
        description="Find the private key for a 2-bit Bitcoin address",
        solution="3",
        solution_method="Brute force: 2^2 = 4 possible keys",
        hint="Search space: 0-3",
    ),
    _bitcoin(
        3, 3, "19ZewH8Kk1PDbSNdJ97FP4EiCjTRaZMZQA", "0.003", "easy",
        name="Puzzle #3 - 3 bits",
        description="Find the private key for a 3-bit Bitcoin address",
        solution="7",
        solution_method="Brute force: 2^3 = 8 possible keys",
        hint="Maximum value for 3 bits",
    ),
    _bitcoin(
        4, 4, "1EhqbyUMvvs7BfL8goY6qcPbD6YKfPqb7e", "0.004", "easy",
        name="Puzzle #4 - 4 bits",
        description="Find the private key for a 4-bit Bitcoin address",
        solution="8",
        solution_method="Brute force: 2^4 = 16 possible keys",
        hint="Middle of the search space",
    ),
    _bitcoin(
        5, 5, "1E6NuFjCi27W5zoXg8TRdcSRq84zJeBW3k", "0.005", "easy",
        name="Puzzle #5 - 5 bits",
        description="Find the private key for a 5-bit Bitcoin address",
        solution="21",
        solution_method="Brute force: 2^5 = 32 possible keys",
        hint="Around 2/3 of the maximum",
    ),

    # Hash preimage puzzles
    CatalogPuzzle(
        id=6,
        type=Category.HASH_PREIMAGE,
        name="SHA-256 Simple Preimage",
        description="Find the input that produces this SHA-256 hash",
        difficulty="easy",
        challenge="e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
        solution="",
        solution_method="Hash of empty string",
        hint="Sometimes the simplest answer is the right one",
    ),
    CatalogPuzzle(
        id=7,
        type=Category.HASH_PREIMAGE,
        name="SHA-256 Common Word",
        description="Find the common English word that produces this hash",
        difficulty="easy",
        challenge="2c26b46b68ffc68ff99b453c1d30413413422d706483bfa0f98a5e886266e7ae",
        solution="foo",
        solution_method="Dictionary attack with common words",
        hint="Three letter word, often used in programming examples",
    ),
    CatalogPuzzle(
        id=8,
        type=Category.HASH_PREIMAGE,
        name="SHA-256 Numeric Pattern",
        description="Find the numeric string that hashes to this value",
        difficulty="medium",
        challenge="6b86b273ff34fce19d6b804eff5a3f5747ada4eaa22f1d49c01e52ddb7875b4b",
        solution="1",
        solution_method="Brute force numeric strings",
        hint="Single digit number",
    ),

    # Cipher decode puzzles
    CatalogPuzzle(
        id=9,
        type=Category.CIPHER_DECODE,
        name="Caesar Cipher - ROT13",
        description="Decode this ROT13 encrypted Bitcoin private key hint",
        difficulty="easy",
        challenge="GUVF VF N FRPERG ZRFFNTR",
        solution="THIS IS A SECRET MESSAGE",
        solution_method="Apply ROT13 transformation (shift by 13)",
        hint="Classic rotation cipher",
    ),
    CatalogPuzzle(
        id=10,
        type=Category.CIPHER_DECODE,
        name="Base64 Encoded Key",
        description="Decode this Base64 encoded private key fragment",
        difficulty="easy",
        challenge="UHJpdmF0ZUtleUZyYWdtZW50",
        solution="PrivateKeyFragment",
        solution_method="Base64 decoding",
        hint="Standard encoding for binary-to-text",
    ),
    CatalogPuzzle(
        id=11,
        type=Category.CIPHER_DECODE,
        name="Hex to ASCII",
        description="Convert this hexadecimal string to reveal the key",
        difficulty="easy",
        challenge="48656c6c6f20426974636f696e",
        solution="Hello Bitcoin",
        solution_method="Hexadecimal to ASCII conversion",
        hint="Common encoding for binary data",
    ),
    CatalogPuzzle(
        id=12,
        type=Category.CIPHER_DECODE,
        name="XOR Cipher",
        description="Decode this XOR encrypted message (key: 'KEY')",
        difficulty="medium",
        challenge="0a1e1b1f4b0a1e1b1f",
        solution="BITCOIN",
        solution_method="XOR decryption with known key",
        hint="XOR each byte with cycling key bytes",
    ),

    # Pattern analysis puzzles
    CatalogPuzzle(
        id=13,
        type=Category.PATTERN_ANALYSIS,
        name="Fibonacci Sequence",
        description="Find the next number in the sequence to unlock the key",
        difficulty="medium",
        challenge="1, 1, 2, 3, 5, 8, 13, 21, ?",
        solution="34",
        solution_method="Fibonacci sequence: sum of previous two numbers",
        hint="Each number is the sum of the previous two",
    ),
    CatalogPuzzle(
        id=14,
        type=Category.PATTERN_ANALYSIS,
        name="Prime Number Pattern",
        description="Identify the pattern in these prime numbers",
        difficulty="medium",
        challenge="2, 3, 5, 7, 11, 13, 17, 19, ?",
        solution="23",
        solution_method="Sequence of prime numbers",
        hint="These are consecutive prime numbers",
    ),
    CatalogPuzzle(
        id=15,
        type=Category.PATTERN_ANALYSIS,
        name="Binary Pattern",
        description="Decode the binary pattern to find the key value",
        difficulty="medium",
        challenge="01000010 01010100 01000011",
        solution="BTC",
        solution_method="Binary to ASCII conversion",
        hint="8 bits per character",
    ),

    # Advanced bitcoin puzzles
    _bitcoin(
        16, 10, "16JrGhLx5bcBSA34kew9V6Mufa4aXhFe9X", "0.01", "medium",
        name="Puzzle #10 - 10 bits",
        description="Find the private key for a 10-bit Bitcoin address",
        solution_method="Brute force: 2^10 = 1,024 possible keys",
        hint="Feasible with modern computing",
    ),
    _bitcoin(
        17, 15, "13zb1hQbWVsc2S7ZTZnP2G4undNNpdh5so", "0.015", "medium",
        name="Puzzle #15 - 15 bits",
        description="Find the private key for a 15-bit Bitcoin address",
        solution_method="Brute force: 2^15 = 32,768 possible keys",
        hint="Requires optimized algorithms",
    ),
    _bitcoin(
        18, 20, "1BY8GQbnueYofwSuFAT3USAhGjPrkxDdW9", "0.02", "hard",
        name="Puzzle #20 - 20 bits",
        description="Find the private key for a 20-bit Bitcoin address",
        solution_method="Brute force: 2^20 = 1,048,576 possible keys",
        hint="Requires parallel processing",
    ),

    # Expert level puzzles
    CatalogPuzzle(
        id=19,
        type=Category.HASH_PREIMAGE,
        name="Double SHA-256 Challenge",
        description="Find input for double SHA-256 hash (Bitcoin style)",
        difficulty="hard",
        challenge="4f8b42c22dd3729b519ba6f68d2da7cc5b2d606d05daed5ad5128cc03e6c6358",
        solution_method="Double hashing: SHA256(SHA256(input))",
        hint="Bitcoin uses double SHA-256 for security",
    ),
    CatalogPuzzle(
        id=20,
        type=Category.PRIVATE_KEY_RECOVERY,
        name="Partial Key Recovery",
        description="Recover private key from partial information",
        difficulty="hard",
        challenge="First 64 bits known: 0x0000000000000000...",
        solution_method="Brute force remaining bits with known prefix",
        hint="Reduce search space using known information",
    ),

    # Demonstrations of computational limits
    _bitcoin(
        21, 50, "14oFNXucftsHiUMY8uctg6N487riuyXs4h", "0.05", "impossible",
        name="Puzzle #50 - 50 bits",
        description="Theoretical demonstration of computational limits",
        solution_method="Brute force: 2^50 = 1.1 quadrillion attempts",
        hint="Would take years even with GPUs",
    ),
    _bitcoin(
        22, 66, "1BY8GQbnueYofwSuFAT3USAhGjPrkxDdW9", "6.6", "impossible",
        name="Puzzle #66 - Real Bitcoin Challenge",
        description="Part of the famous Bitcoin puzzle transaction",
        solution_method="Beyond current computational feasibility",
        hint="Requires breakthrough in quantum computing or algorithms",
    ),
)


def get_puzzle_by_id(puzzle_id: int, puzzles: Tuple[CatalogPuzzle, ...] = PUZZLES) -> Optional[CatalogPuzzle]:
    return next((p for p in puzzles if p.id == puzzle_id), None)


def get_puzzles_by_type(category: Category | str, puzzles: Tuple[CatalogPuzzle, ...] = PUZZLES) -> List[CatalogPuzzle]:
    known = Category.coerce(category)
    return [p for p in puzzles if p.type == known]


def get_puzzles_by_difficulty(difficulty: str, puzzles: Tuple[CatalogPuzzle, ...] = PUZZLES) -> List[CatalogPuzzle]:
    return [p for p in puzzles if p.difficulty == difficulty]
