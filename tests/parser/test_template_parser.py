"""
Tests for splitting templates into literal and expression parts.
"""

import pytest

from uritmpl.errors import TemplateParseError
from uritmpl.model import Expression, Literal, Operator, Term
from uritmpl.parser import TemplateParser


class TestTemplateParser:

    def setup_method(self):
        self.parser = TemplateParser()

    def test_plain_literal(self):
        """Template without expressions is a single literal"""
        parts = self.parser.parse("http://example.com/static")

        assert parts == (Literal("http://example.com/static"),)

    def test_empty_template(self):
        assert self.parser.parse("") == (Literal(""),)

    def test_literal_expression_literal_order(self):
        parts = self.parser.parse("http://localhost:8080/{id}/edit")

        assert len(parts) == 3
        assert parts[0] == Literal("http://localhost:8080/")
        assert parts[1] == Expression(operator=Operator.SIMPLE, terms=(Term("id"),))
        assert parts[2] == Literal("/edit")

    def test_adjacent_expressions_have_empty_literals(self):
        parts = self.parser.parse("{a}{b}")

        assert [type(p) for p in parts] == [Literal, Expression, Literal, Expression, Literal]
        assert parts[0] == Literal("")
        assert parts[2] == Literal("")
        assert parts[4] == Literal("")

    def test_literal_is_not_reescaped(self):
        parts = self.parser.parse("a b%20c{x}ü")

        assert parts[0] == Literal("a b%20c")
        assert parts[2] == Literal("ü")

    @pytest.mark.parametrize("char,operator", [
        ("+", Operator.RESERVED),
        ("#", Operator.FRAGMENT),
        (".", Operator.LABEL),
        ("/", Operator.PATH),
        (";", Operator.PARAMETER),
        ("?", Operator.QUERY),
        ("&", Operator.CONTINUATION),
    ])
    def test_operators(self, char, operator):
        parts = self.parser.parse("{" + char + "var}")

        expr = parts[1]
        assert isinstance(expr, Expression)
        assert expr.operator is operator
        assert expr.terms == (Term("var"),)

    def test_simple_operator_keeps_first_char(self):
        expr = self.parser.parse_expression("var")

        assert expr.operator is Operator.SIMPLE
        assert expr.terms == (Term("var"),)

    def test_multiple_terms(self):
        expr = self.parser.parse_expression("?sort,filter*,search,limit:10")

        assert expr.operator is Operator.QUERY
        assert expr.terms == (
            Term("sort"),
            Term("filter", explode=True),
            Term("search"),
            Term("limit", truncate=10),
        )

    def test_unexpected_closing_brace_in_leading_literal(self):
        with pytest.raises(TemplateParseError, match="unexpected '}'") as exc:
            self.parser.parse("http://x}/{id}")

        assert exc.value.position == 8

    def test_missing_closing_brace(self):
        with pytest.raises(TemplateParseError, match="missing '}'") as exc:
            self.parser.parse("/users/{id")

        assert exc.value.position == 7

    def test_extra_closing_brace(self):
        with pytest.raises(TemplateParseError, match="malformed template"):
            self.parser.parse("/users/{id}}")

    def test_nested_open_brace(self):
        with pytest.raises(TemplateParseError, match="missing '}'"):
            self.parser.parse("{a{b}}")

    def test_empty_expression(self):
        with pytest.raises(TemplateParseError, match="empty expression"):
            self.parser.parse("/x/{}")

    def test_operator_without_terms(self):
        with pytest.raises(TemplateParseError, match="not a valid name"):
            self.parser.parse("{?}")

    def test_empty_term_in_list(self):
        with pytest.raises(TemplateParseError, match="not a valid name"):
            self.parser.parse("{a,,b}")

    def test_error_position_points_at_bad_term(self):
        with pytest.raises(TemplateParseError) as exc:
            self.parser.parse("/base/{?ok,b@d}")

        assert exc.value.position == 11
        assert exc.value.fragment == "b@d"

    def test_error_aborts_whole_template(self):
        """A bad expression late in the template fails the whole parse"""
        with pytest.raises(TemplateParseError):
            self.parser.parse("{good}/{also_good}/{bad name}")

    def test_trailing_newline_in_name_rejected(self):
        with pytest.raises(TemplateParseError, match="not a valid name"):
            self.parser.parse("{a\n}")

    def test_trailing_newline_in_prefix_rejected(self):
        with pytest.raises(TemplateParseError, match="invalid prefix length"):
            self.parser.parse("{a:3\n}")
