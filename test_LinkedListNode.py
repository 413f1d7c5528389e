from LinkedList import LinkedListNode

import pytest


def buildChain(values):
    head = None
    for v in reversed(values):
        head = LinkedListNode(v, head)
    return head


def test_Append():
    head = LinkedListNode(1)
    head.append(LinkedListNode(2))
    head.append(LinkedListNode(3))

    assert head.value == 1
    assert head.nextNode.value == 2
    assert head.nextNode.nextNode.value == 3
    assert head.nextNode.nextNode.nextNode is None


def test_AppendLongChain():
    # Long enough that a recursive walk would exceed the interpreter's recursion limit.
    head = LinkedListNode(0)
    tail = head
    for i in range(1, 5000):
        tail.nextNode = LinkedListNode(i)
        tail = tail.nextNode

    head.append(LinkedListNode(5000))
    assert tail.nextNode.value == 5000


def test_StructuralEquality():
    assert LinkedListNode(1) == LinkedListNode(1)
    assert LinkedListNode(1) != LinkedListNode(2)

    assert buildChain([1, 2, 3]) == buildChain([1, 2, 3])
    # Same value but a different tail.
    assert buildChain([1, 2]) != LinkedListNode(1)
    assert buildChain([1, 2]) != buildChain([1, 3])
    assert LinkedListNode(1) != "Node(1)"


def test_EqualityLongChains():
    values = list(range(10000))
    assert buildChain(values) == buildChain(values)
    assert buildChain(values) != buildChain(values[:-1] + [-1])


def test_OrderingByValue():
    a = buildChain([1, 100])
    b = LinkedListNode(2)

    assert a < b
    assert a <= b
    assert b > a
    assert b >= a
    assert LinkedListNode(2) <= LinkedListNode(2)
    assert LinkedListNode(2) >= LinkedListNode(2)
    assert not LinkedListNode(2) < LinkedListNode(2)


def test_OrderingAgainstOtherTypes():
    with pytest.raises(TypeError):
        LinkedListNode(1) < 5
    with pytest.raises(TypeError):
        LinkedListNode(1) >= "Node(1)"


def test_StringForm():
    assert str(LinkedListNode(15)) == "Node(15)"
    assert buildChain([15, 2, 8]).ChainString() == "[Node(15), Node(2), Node(8)]"
    assert LinkedListNode("a").ChainString() == "[Node(a)]"


if __name__ == "__main__":
    test_Append()
    test_AppendLongChain()
    test_StructuralEquality()
    test_EqualityLongChains()
    test_OrderingByValue()
    test_OrderingAgainstOtherTypes()
    test_StringForm()
