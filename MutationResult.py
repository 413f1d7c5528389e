from enum import Enum

class MutationResult(Enum):
    """
    Enumeration of the possible outcomes of a structural linked list operation.

    Linked list mutations never raise for out-of-range or degenerate usage.
    Instead they report whether the chain was actually changed so that callers
    can detect those edge cases if they care to.

    Values:
        APPLIED: The operation changed the chain (links and/or node values).
        NO_OP: The operation had nothing to do and left the chain untouched.
    """
    APPLIED = 1
    NO_OP = 2

    def __bool__(self):
        """
        Allow "if llist.removeNode(node):" style checks.

        Returns:
            bool: True if the operation was applied, False otherwise.
        """
        return self is MutationResult.APPLIED
