"""Tests for the Visitor protocol."""

from prefixtree import PrefixTree, Visitor


class TestVisitor:
    """Tests for Visitor runtime checks."""

    def test_callables_are_visitors(self):
        """Test common callables satisfy the protocol."""
        assert isinstance(print, Visitor)
        assert isinstance([].append, Visitor)
        assert isinstance(lambda value: None, Visitor)

    def test_non_callable_is_not_visitor(self):
        """Test plain data does not satisfy the protocol."""
        assert not isinstance("text", Visitor)

    def test_class_based_visitor(self):
        """Test an object with __call__ used with traverse."""

        class Counter:
            def __init__(self):
                self.count = 0

            def __call__(self, value):
                self.count += 1

        tree = PrefixTree()
        tree.insert(1, "a")
        tree.insert(2, "ab")

        counter = Counter()
        assert isinstance(counter, Visitor)
        tree.traverse(counter)
        assert counter.count == 2
