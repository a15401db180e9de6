from enum import Enum, unique


@unique
class Junction(Enum):
    CONJUNCTION = "conjunction"
    DISJUNCTION = "disjunction"

    @property
    def spellings(self):
        """
        The symbolic spelling followed by the ascii digraph.
        """
        if self == Junction.CONJUNCTION:
            return ("∧", "/\\")
        return ("∨", "\\/")
