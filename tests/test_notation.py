"""
Unit tests for the tiling configuration notation.
"""

import pytest
from antwerp import (
    Centre,
    Configuration,
    Corner,
    Edge,
    Origin,
    ParseError,
    ParseErrorKind,
    Reflection,
    Rotation,
    Vertex,
    format_configuration,
    parse,
)
from antwerp.notation import NotationParser, format_source, format_transformation


class TestParse:
    """Test parsing of valid configurations."""

    def test_seed_without_phases(self):
        """A bare seed has no phases."""
        config = parse("3/m30/r(h2)")
        assert config.seed == 3
        assert config.phases == ()
        assert config.transformations == (
            Reflection(Origin(30)),
            Rotation(Vertex(Edge(2))),
        )

    def test_seed_with_phase(self):
        """Comma separated orders form one phase."""
        config = parse("12-6,4/m30/r(c2)")
        assert config.seed == 12
        assert config.phases == ((6, 4),)
        assert config.transformations == (
            Reflection(Origin(30)),
            Rotation(Vertex(Centre(2))),
        )

    def test_multiple_phases(self):
        """Each '-' starts a new phase."""
        config = parse("3-4-3,3/m30/r(h2)")
        assert config.phases == ((4,), (3, 3))

    def test_origin_without_angle(self):
        """A bare kind letter rotates about the origin at no given angle."""
        config = parse("6/r/m")
        assert config.transformations == (Rotation(Origin()), Reflection(Origin()))
        assert config.transformations[0].source.angle is None

    def test_corner_feature(self):
        config = parse("6-3,0,3,3,3,3/r(h4)/r(v15)/r(v30)")
        assert config.phases == ((3, 0, 3, 3, 3, 3),)
        assert config.transformations[1] == Rotation(Vertex(Corner(15)))

    def test_transformation_order_preserved(self):
        config = parse("4/r90/m45/r(c1)/m(v0)")
        kinds = [type(t) for t in config.transformations]
        assert kinds == [Rotation, Reflection, Rotation, Reflection]

    def test_parse_is_deterministic(self):
        text = "4-4,4,4,4/r90/m45"
        assert parse(text) == parse(text)

    def test_configuration_parse_alias(self):
        assert Configuration.parse("3/m30") == parse("3/m30")

    def test_parser_class(self):
        assert NotationParser("4/r90").parse() == parse("4/r90")


class TestFormat:
    """Test rendering configurations back to text."""

    def test_format_literal_configuration(self):
        config = Configuration(
            seed=6,
            phases=[[3, 0, 3, 3, 3, 3]],
            transformations=[
                Rotation(Vertex(Edge(4))),
                Rotation(Vertex(Corner(15))),
                Rotation(Vertex(Corner(30))),
            ],
        )
        assert format_configuration(config) == "6-3,0,3,3,3,3/r(h4)/r(v15)/r(v30)"

    def test_format_without_phases(self):
        config = Configuration(3, [], [Reflection(Origin(30)), Rotation(Vertex(Edge(2)))])
        assert format_configuration(config) == "3/m30/r(h2)"

    def test_str_matches_format(self):
        config = parse("12-6,4/m30/r(c2)")
        assert str(config) == "12-6,4/m30/r(c2)"

    def test_variant_str(self):
        assert str(Corner(3)) == "v3"
        assert str(Centre(1)) == "c1"
        assert str(Edge(0)) == "h0"
        assert str(Origin()) == ""
        assert str(Origin(60)) == "60"
        assert str(Vertex(Edge(2))) == "(h2)"
        assert str(Rotation(Origin(60))) == "r60"
        assert str(Reflection(Vertex(Corner(1)))) == "m(v1)"

    def test_unknown_variant_rejected(self):
        with pytest.raises(TypeError):
            format_transformation("r60")
        with pytest.raises(TypeError):
            format_source(Corner(1))

    def test_lists_compare_equal_to_tuples(self):
        a = Configuration(4, [[4, 4]], [Rotation(Origin(90))])
        b = Configuration(4, ((4, 4),), (Rotation(Origin(90)),))
        assert a == b

    def test_configuration_requires_transformations(self):
        with pytest.raises(ValueError):
            Configuration(4, [], [])


@pytest.mark.parametrize("text", [
    "3/m30/r(h2)",
    "12-6,4/m30/r(c2)",
    "6-3,0,3,3,3,3/r(h4)/r(v15)/r(v30)",
    "3-4-3,3/m30/r(h2)",
    "4/r",
    "6/m/r/m90",
    "0/r0",
    "8-4,4-8/r(v0)/m(c12)",
])
def test_round_trip(text):
    config = parse(text)
    assert parse(format_configuration(config)) == config
    assert format_configuration(config) == text


def test_round_trip_normalizes_vertex_brackets():
    """Only the parsed value is preserved, not the enclosing characters."""
    config = parse("4/r[h1]")
    assert config.transformations == (Rotation(Vertex(Edge(1))),)
    assert parse(format_configuration(config)) == config


class TestParseErrors:
    """Test rejection of malformed configurations."""

    def _error(self, text):
        with pytest.raises(ParseError) as excinfo:
            parse(text)
        return excinfo.value

    def test_missing_transformations(self):
        err = self._error("3")
        assert err.kind is ParseErrorKind.MISSING_TRANSFORMATIONS

    def test_invalid_seed(self):
        err = self._error("x/m30/r(h2)")
        assert err.kind is ParseErrorKind.INVALID_SEED
        assert err.fragment == "x"
        assert err.diagnostic.offset == 0

    def test_empty_seed(self):
        err = self._error("/r")
        assert err.kind is ParseErrorKind.INVALID_SEED
        assert err.fragment == ""

    def test_signed_seed_rejected(self):
        assert self._error("+3/r").kind is ParseErrorKind.INVALID_SEED

    def test_invalid_shape(self):
        err = self._error("3-x/m30/r(h2)")
        assert err.kind is ParseErrorKind.INVALID_SHAPE
        assert err.fragment == "x"
        assert err.diagnostic.offset == 2

    def test_invalid_shape_later_in_phase(self):
        err = self._error("3-4,4-4,y/r")
        assert err.kind is ParseErrorKind.INVALID_SHAPE
        assert err.fragment == "y"
        assert err.diagnostic.offset == 8

    def test_empty_phase(self):
        assert self._error("3-/r").kind is ParseErrorKind.INVALID_SHAPE

    def test_empty_transformation(self):
        assert self._error("3//r").kind is ParseErrorKind.EMPTY_TRANSFORMATION
        assert self._error("3/").kind is ParseErrorKind.EMPTY_TRANSFORMATION

    def test_unknown_transformation_char(self):
        err = self._error("3/x30/r(h2)")
        assert err.kind is ParseErrorKind.UNKNOWN_TRANSFORMATION_CHAR
        assert err.fragment == "x"
        assert err.diagnostic.offset == 2

    def test_unknown_transformation_char_without_remainder(self):
        """The kind is checked even when nothing follows it."""
        assert self._error("3/x").kind is ParseErrorKind.UNKNOWN_TRANSFORMATION_CHAR

    def test_empty_vertex_specifier(self):
        assert self._error("3/r()").kind is ParseErrorKind.EMPTY_VERTEX_SPECIFIER
        assert self._error("3/r(").kind is ParseErrorKind.EMPTY_VERTEX_SPECIFIER

    def test_unknown_vertex_type_char(self):
        err = self._error("3/m30/r(x2)")
        assert err.kind is ParseErrorKind.UNKNOWN_VERTEX_TYPE_CHAR
        assert err.fragment == "x"
        assert err.diagnostic.offset == 8

    def test_invalid_vertex_index(self):
        assert self._error("3/r(v)").kind is ParseErrorKind.INVALID_VERTEX_INDEX
        err = self._error("3/r(vq)")
        assert err.kind is ParseErrorKind.INVALID_VERTEX_INDEX
        assert err.fragment == "q"

    def test_first_error_wins(self):
        """Parsing stops at the seed before looking at transformations."""
        assert self._error("x/q").kind is ParseErrorKind.INVALID_SEED

    def test_error_message_points_at_fragment(self):
        err = self._error("3-x/m30")
        lines = str(err).splitlines()
        assert "E103" in lines[0]
        assert lines[1] == "  | 3-x/m30"
        assert lines[2] == "  |   ^"
