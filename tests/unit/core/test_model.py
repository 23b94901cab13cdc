"""
Model tests
"""

from hexastore.core.model import ORDER_FIELDS, Field, Order, Triple, TriplePattern


class TestOrder:
    """Test the static order table."""

    def test_six_permutations(self):
        """Every order is a distinct permutation of the three fields."""
        sequences = set(ORDER_FIELDS.values())

        assert len(sequences) == 6
        assert all(set(seq) == set(Field) for seq in sequences)

    def test_fields_follow_initials(self):
        """Tag letters name the fields in sequence."""
        assert Order.POS.fields == (Field.PREDICATE, Field.OBJECT, Field.SUBJECT)

    def test_parse(self):
        """Known tags parse, others give None."""
        assert Order.parse("osp") is Order.OSP
        assert Order.parse(Order.SOP) is Order.SOP
        assert Order.parse("SPO") is None
        assert Order.parse("xyz") is None


class TestTriplePattern:
    """Test presence handling."""

    def test_default_all_absent(self):
        """Empty pattern."""
        assert TriplePattern().present_fields() == ()

    def test_empty_string_present(self):
        """Empty string is a value, not absence."""
        pattern = TriplePattern(subject="")

        assert pattern.is_present(Field.SUBJECT)
        assert not pattern.is_present(Field.OBJECT)

    def test_of_triple(self):
        """Fully specified pattern."""
        pattern = TriplePattern.of(Triple("s", "p", "o"))

        assert pattern.present_fields() == (Field.SUBJECT, Field.PREDICATE, Field.OBJECT)
        assert pattern.get(Field.OBJECT) == "o"


class TestTriple:
    """Test Triple accessors."""

    def test_as_tuple(self):
        """Canonical tuple."""
        assert Triple("s", "p", "o").as_tuple() == ("s", "p", "o")

    def test_hashable(self):
        """Triples can be collected in sets."""
        assert len({Triple("s", "p", "o"), Triple("s", "p", "o")}) == 1
