from MutationResult import MutationResult

import numpy as np
import logging, os

class ChainCycleError(Exception):
    """Exception raised when a node chain is (or would become) cyclic."""

    pass

class LinkedListNode:
    """
    A node in a singly-linked list structure.

    Each node contains a value and a reference to the next node in the chain.
    Nodes compare structurally with "==" (same value and an equal tail) and are
    ordered by value alone with "<", "<=", ">" and ">=".

    Attributes:
        value: The data stored in this node. Must be totally ordered.
        nextNode (LinkedListNode): Reference to the next node in the chain, or None.
    """
    def __init__(self,value,nextNode=None):
        """
        Initialize a new linked list node.

        Args:
            value: The data to store in this node.
            nextNode (LinkedListNode, optional): The following node in the chain. Defaults to None.
        """
        self.value = value
        self.nextNode = nextNode

    def append(self,node):
        """
        Attach a node to the end of the chain that starts at this node.

        Args:
            node (LinkedListNode): The node to attach after the last node of this chain.
        """
        nodei = self
        while nodei.nextNode is not None:
            nodei = nodei.nextNode
        nodei.nextNode = node

    def ChainString(self):
        """
        Render the chain starting at this node.

        Returns:
            str: A string of the form "[Node(v1), Node(v2), ..., Node(vn)]".
        """
        nodeStrs = []
        nodei = self
        while nodei is not None:
            nodeStrs.append(str(nodei))
            nodei = nodei.nextNode
        return "[" + ", ".join(nodeStrs) + "]"

    def __str__(self):
        return f"Node({self.value})"

    def __repr__(self):
        return str(self)

    def __eq__(self,other):
        """
        Structural equality: equal values all the way down both chains.

        Two nodes are equal only if their values match and their tails are
        also equal, so the comparison walks both chains in lockstep.

        Args:
            other (LinkedListNode): The node to compare against.

        Returns:
            bool: True if both chains hold equal values in the same order.
        """
        if not isinstance(other,LinkedListNode):
            return NotImplemented

        nodeA = self
        nodeB = other
        while nodeA is not None and nodeB is not None:
            if nodeA is nodeB:
                # Shared tail.
                return True
            if nodeA.value != nodeB.value:
                return False
            nodeA = nodeA.nextNode
            nodeB = nodeB.nextNode
        return nodeA is None and nodeB is None

    def __lt__(self,other):
        if not isinstance(other,LinkedListNode):
            return NotImplemented
        return self.value < other.value

    def __le__(self,other):
        if not isinstance(other,LinkedListNode):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self,other):
        if not isinstance(other,LinkedListNode):
            return NotImplemented
        return self.value > other.value

    def __ge__(self,other):
        if not isinstance(other,LinkedListNode):
            return NotImplemented
        return self.value >= other.value

class LinkedList:
    """
    A singly-linked list with position-based and value-based mutation and an
    in-place merge sort.

    The list only keeps a reference to its first node. Since predecessors are not
    tracked, "removeNode" and "insert(..., beforeNode=...)" work by moving values
    between neighboring nodes instead of relinking the previous node.

    Several lists may reference overlapping parts of the same chain (for example
    after "appendContentsOf", or transiently while sorting). Mutating the chain
    through one of them is visible through the others.

    Attributes:
        firstNode (LinkedListNode): First node in the list, or None if the list is empty.
        checkCycles (bool): Whether linking operations verify they do not create a cycle.
        logger (logging.Logger): Logger for debugging output.
    """
    def __init__(
        self,
        firstNode: LinkedListNode = None,
        checkCycles=False,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize a new linked list.

        Args:
            firstNode (LinkedListNode, optional): Head of an existing chain to adopt. Defaults to None.
            checkCycles (bool, optional): If True, "insertAtBeginning", "insert(afterNode=...)",
                "append" and "appendContentsOf" raise a ChainCycleError instead of linking a node
                that would make the chain cyclic. Defaults to False.
            logFile (str, optional): Path to log file. If None, no file logging. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. If None, the shared "LINKED_LIST"
                logger is used and its level is set to logLevel, which also applies to every other
                list using that logger. Pass a logger explicitly to keep an existing level. Defaults to None.
        """
        if logger is None:
            self.logger = logging.getLogger("LINKED_LIST")
            self.logger.setLevel(logLevel)

            if logFile is not None:
                logPath = os.path.abspath(logFile)
                alreadyAttached = any(
                    isinstance(h, logging.FileHandler) and h.baseFilename == logPath
                    for h in self.logger.handlers
                )
                if not alreadyAttached:
                    file_handler = logging.FileHandler(logFile)
                    file_handler.setLevel(logLevel)

                    formatter = logging.Formatter(
                        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                    )
                    file_handler.setFormatter(formatter)

                    self.logger.addHandler(file_handler)
        else:
            self.logger = logger

        self.checkCycles = checkCycles
        self.firstNode = firstNode

    @staticmethod
    def FromArray(arr, **kwargs):
        """
        Build a linked list holding the elements of an array, in order.

        Args:
            arr (list or np.ndarray): The values to store. Numpy scalars are converted
                to their native Python equivalents.
            **kwargs: Forwarded to the LinkedList constructor.

        Returns:
            LinkedList: A new list with one node per element of arr.
        """
        llist = LinkedList(**kwargs)
        lastNode = None
        for e in arr:
            if isinstance(e,np.generic):
                e = e.item()
            newNode = LinkedListNode(e)
            if lastNode is None:
                llist.firstNode = newNode
            else:
                lastNode.nextNode = newNode
            lastNode = newNode
        return llist

    @property
    def length(self):
        """
        The number of nodes reachable from the first node. O(n), never cached.
        """
        count = 0
        for _ in self:
            count += 1
        return count

    def __len__(self):
        return self.length

    def __iter__(self):
        """
        Iterate over the nodes of the list in chain order.

        Returns:
            iterator: A generator yielding each LinkedListNode once.
        """
        nodei = self.firstNode
        while nodei is not None:
            # The link is read before the node is handed out.
            nextNode = nodei.nextNode
            yield nodei
            nodei = nextNode

    def first(self):
        return self.firstNode

    def last(self):
        """
        Returns:
            LinkedListNode: The final node of the chain, or None if the list is empty.
        """
        current = self.firstNode
        if current is None:
            return None
        while current.nextNode is not None:
            current = current.nextNode
        return current

    def nodeAtPosition(self,index:int):
        """
        Find the node at a 0-based position.

        This lookup is permissive and never raises: asking for a position past the
        end of a non-empty list returns the last node, and negative positions are
        treated as 0.

        Args:
            index (int): The 0-based position of the desired node.

        Returns:
            LinkedListNode: The node at index, the last node if the list is shorter
                than index+1, or None if the list is empty.
        """
        if index < 0:
            self.logger.debug("Position %s is negative. Returning the first node.", index)
            index = 0

        nodeToReturn = None
        i = 0
        for node in self:
            nodeToReturn = node
            if i == index:
                return nodeToReturn
            i += 1

        if nodeToReturn is not None:
            self.logger.debug("Position %s is past the end of a list of length %s. Returning the last node.", index, i)
        return nodeToReturn

    def nodeStepsToTheRightOf(self,steps:int,node:LinkedListNode):
        """
        Walk a number of links to the right of a node.

        Unlike "nodeAtPosition", this does not fall back to the last node.

        Args:
            steps (int): How many links to follow.
            node (LinkedListNode): The node to start from.

        Returns:
            LinkedListNode: The node steps links after node, or None if node is None
                or the chain ends first.
        """
        nodei = node
        for _ in range(steps):
            if nodei is None:
                break
            nodei = nodei.nextNode
        return nodei

    def contains(self,node:LinkedListNode):
        """
        Check whether the list holds a node structurally equal to the given one.

        Note that node equality includes the tail, so a node only matches if the
        rest of its chain matches the rest of this list from that point on.

        Args:
            node (LinkedListNode): The node to look for.

        Returns:
            bool: True if some node of this list equals node.
        """
        for nodei in self:
            if nodei == node:
                return True
        return False

    def __contains__(self,node):
        return self.contains(node)

    def AssertValidChain(self):
        """
        Verify that the chain reachable from the first node is acyclic.

        Raises:
            ChainCycleError: If some node is reached twice while walking the chain.
        """
        seen = set()
        nodei = self.firstNode
        position = 0
        while nodei is not None:
            if id(nodei) in seen:
                raise ChainCycleError(f"The chain loops back onto itself at position {position} ({nodei}).")
            seen.add(id(nodei))
            nodei = nodei.nextNode
            position += 1

    def _assertNoCycle(self,startNode,forbiddenNode,operation):
        """
        Raise a ChainCycleError if forbiddenNode is reachable from startNode (by identity).
        Only active when checkCycles is enabled.
        """
        if not self.checkCycles:
            return
        nodei = startNode
        while nodei is not None:
            if nodei is forbiddenNode:
                raise ChainCycleError(f"\"{operation}\" would link {forbiddenNode} back into its own chain.")
            nodei = nodei.nextNode

    def insertAtBeginning(self,node:LinkedListNode):
        """
        Make a node the new head of the list. Any previous tail of node is replaced
        by the current chain.

        Args:
            node (LinkedListNode): The new first node.

        Returns:
            MutationResult: Always APPLIED.
        """
        assert isinstance(node,LinkedListNode), f"Error! \"insertAtBeginning\" can only be used for linked list nodes, not \"{type(node)}\""
        self._assertNoCycle(self.firstNode,node,"insertAtBeginning")

        node.nextNode = self.firstNode
        self.firstNode = node
        return MutationResult.APPLIED

    def insert(self,newNode:LinkedListNode,beforeNode:LinkedListNode=None,afterNode:LinkedListNode=None):
        """
        Insert a value before or after a node of this list.

        Exactly one of beforeNode and afterNode must be given.

        With afterNode, newNode itself is spliced into the chain right after afterNode.

        With beforeNode, a copy of newNode is spliced in right after beforeNode and the
        values of beforeNode and the copy are swapped. beforeNode therefore stays where
        it was but now holds the new value, while the copy after it holds the old value.
        newNode itself is never linked in. If beforeNode is not part of this list the
        outcome is unspecified.

        Args:
            newNode (LinkedListNode): The node carrying the value to insert.
            beforeNode (LinkedListNode, optional): Insert the value in front of this node.
            afterNode (LinkedListNode, optional): Insert newNode behind this node.

        Returns:
            MutationResult: Always APPLIED.

        Raises:
            ValueError: If neither or both of beforeNode and afterNode are given.
        """
        assert isinstance(newNode,LinkedListNode), f"Error! \"insert\" can only be used for linked list nodes, not \"{type(newNode)}\""
        if (beforeNode is None) == (afterNode is None):
            raise ValueError("Exactly one of \"beforeNode\" and \"afterNode\" must be provided.")

        if beforeNode is not None:
            newNodeCopy = LinkedListNode(newNode.value,beforeNode.nextNode)
            beforeNode.nextNode = newNodeCopy

            oldNodeValue = beforeNode.value
            beforeNode.value = newNodeCopy.value
            newNodeCopy.value = oldNodeValue
        else:
            self._assertNoCycle(afterNode,newNode,"insert")

            newNode.nextNode = afterNode.nextNode
            afterNode.nextNode = newNode
        return MutationResult.APPLIED

    def append(self,node:LinkedListNode):
        """
        Attach a node (and whatever chain follows it) to the end of the list.

        Args:
            node (LinkedListNode): The node to append.

        Returns:
            MutationResult: Always APPLIED.
        """
        assert isinstance(node,LinkedListNode), f"Error! \"append\" can only be used for linked list nodes, not \"{type(node)}\""

        lastNode = self.last()
        if lastNode is None:
            self.firstNode = node
        else:
            self._assertNoCycle(node,lastNode,"append")
            lastNode.nextNode = node
        return MutationResult.APPLIED

    def appendContentsOf(self,otherList):
        """
        Link the chain of another list onto the end of this one.

        No nodes are copied: afterwards both lists share the other list's nodes, so
        mutating one of them may change what the other contains. An empty list has
        no last node to link from, so nothing is attached to it.

        Args:
            otherList (LinkedList): The list whose chain is attached.

        Returns:
            MutationResult: NO_OP if either list is empty, APPLIED otherwise.
        """
        assert isinstance(otherList,LinkedList), f"Error! \"appendContentsOf\" can only be used for other linked lists, not \"{type(otherList)}\""

        otherFirst = otherList.first()
        if otherFirst is None:
            return MutationResult.NO_OP

        lastNode = self.last()
        if lastNode is None:
            return MutationResult.NO_OP

        self._assertNoCycle(otherFirst,lastNode,"appendContentsOf")
        lastNode.nextNode = otherFirst
        return MutationResult.APPLIED

    def removeFirst(self):
        """
        Drop the head of the list.

        Returns:
            MutationResult: NO_OP if the list is empty, APPLIED otherwise.
        """
        if self.firstNode is None:
            return MutationResult.NO_OP
        self.firstNode = self.firstNode.nextNode
        return MutationResult.APPLIED

    def removeNode(self,node:LinkedListNode):
        """
        Remove a node's value from the list by pulling its successor into it.

        The successor's value and link are copied into node, which removes the
        successor cell from the chain. The last node of a chain has no successor
        and cannot be removed this way: that call does nothing.

        Args:
            node (LinkedListNode): The node whose value should be removed.

        Returns:
            MutationResult: NO_OP if node has no successor, APPLIED otherwise.
        """
        nextNode = node.nextNode
        if nextNode is None:
            self.logger.warning("\"removeNode\" cannot remove the last node of a chain (%s). Nothing was removed.", node)
            return MutationResult.NO_OP

        node.value = nextNode.value
        node.nextNode = nextNode.nextNode
        return MutationResult.APPLIED

    def removeAfter(self,node:LinkedListNode):
        """
        Unlink the node immediately following node.

        Returns:
            MutationResult: NO_OP if node has no successor, APPLIED otherwise.
        """
        if node.nextNode is None:
            return MutationResult.NO_OP
        node.nextNode = node.nextNode.nextNode
        return MutationResult.APPLIED

    def removeAllAfter(self,node:LinkedListNode):
        """
        Truncate the chain right after node.

        Returns:
            MutationResult: NO_OP if node was already the end of its chain, APPLIED otherwise.
        """
        if node.nextNode is None:
            return MutationResult.NO_OP
        node.nextNode = None
        return MutationResult.APPLIED

    def swapNodeValues(self,node1:LinkedListNode,node2:LinkedListNode):
        """
        Exchange the values held by two nodes of this list.

        Both nodes must be contained in the list (structurally, see "contains"),
        otherwise nothing happens.

        Args:
            node1 (LinkedListNode): The first node.
            node2 (LinkedListNode): The second node.

        Returns:
            MutationResult: NO_OP if either node is not in the list, APPLIED otherwise.
        """
        if not self.contains(node1) or not self.contains(node2):
            self.logger.warning("\"swapNodeValues\" was given a node that is not in this list (%s, %s). Nothing was swapped.", node1, node2)
            return MutationResult.NO_OP

        node1Value = node1.value
        node1.value = node2.value
        node2.value = node1Value
        return MutationResult.APPLIED

    def toArray(self,asNumpy=False):
        """
        Collect the values of the list in chain order.

        Args:
            asNumpy (bool, optional): If True, return a numpy array instead of a list. Defaults to False.

        Returns:
            list or np.ndarray: The values of the list.
        """
        values = [node.value for node in self]
        if asNumpy:
            return np.array(values)
        return values

    def sort(self):
        """
        Sort the list in ascending order with a stable, top-down merge sort.

        The chain is split in two at length // 2 (the left half is never the
        larger one). Each half is wrapped in its own temporary LinkedList, sorted
        recursively, and the right half is then merged into the left one. Finally
        this list adopts the head of the merged chain.
        """
        listLength = self.length
        if listLength < 2:
            return

        sublistLength = listLength // 2
        self.logger.debug("Sorting %s nodes as %s + %s.", listLength, sublistLength, listLength - sublistLength)

        leftList = LinkedList(self.firstNode,checkCycles=self.checkCycles,logger=self.logger)
        rightList = LinkedList(self.nodeAtPosition(sublistLength),checkCycles=self.checkCycles,logger=self.logger)
        leftList.removeAllAfter(leftList.nodeAtPosition(sublistLength - 1))

        leftList.sort()
        rightList.sort()

        leftList.mergeInItemsFromList(rightList)
        self.firstNode = leftList.firstNode

    def mergeInItemsFromList(self,otherList):
        """
        Merge the values of another sorted list into this sorted list.

        A cursor walks this list from its head. Whenever the head of otherList is
        strictly smaller than the cursor node, its value is inserted in front of the
        cursor and removed from otherList. Once the cursor runs off the end of this
        list, whatever is left of otherList is appended as is. Equal values already
        in this list stay ahead of the incoming ones, which keeps the merge stable.

        Args:
            otherList (LinkedList): A sorted list. It is consumed by the merge.

        Returns:
            MutationResult: NO_OP if either list is empty, APPLIED otherwise.
        """
        assert isinstance(otherList,LinkedList), f"Error! \"mergeInItemsFromList\" can only be used for other linked lists, not \"{type(otherList)}\""

        if self.firstNode is None or otherList.first() is None:
            return MutationResult.NO_OP

        lastCompared = self.firstNode
        while otherList.first() is not None:
            otherFirst = otherList.first()
            if otherFirst < lastCompared:
                self.insert(otherFirst,beforeNode=lastCompared)
                otherList.removeFirst()

            if lastCompared.nextNode is None:
                break
            lastCompared = lastCompared.nextNode

        if otherList.first() is not None:
            self.logger.debug("Appending the remaining nodes of the other list after %s.", lastCompared)
            self.appendContentsOf(otherList)
            otherList.firstNode = None
        return MutationResult.APPLIED

    def __eq__(self,other):
        """
        Two lists are equal if their chains hold equal values in the same order.
        """
        if not isinstance(other,LinkedList):
            return NotImplemented
        if self.firstNode is None or other.firstNode is None:
            return self.firstNode is None and other.firstNode is None
        return self.firstNode == other.firstNode

    def __str__(self):
        if self.firstNode is None:
            return "[]"
        return self.firstNode.ChainString()

    def __repr__(self):
        return str(self)
