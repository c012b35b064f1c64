"""Tests for composing selectors from token sequences."""

import pytest

from cssbuilder.compose import DEFAULT_COMBINATORS, compose, parse_part
from cssbuilder.errors import DuplicateKindError, OutOfOrderError, SelectorError
from cssbuilder.model import PartKind


# ---------------------------------------------------------------------------
# parse_part
# ---------------------------------------------------------------------------


class TestParsePart:
    @pytest.mark.parametrize(
        "token, kind",
        [
            ("element=div", PartKind.ELEMENT),
            ("id=main", PartKind.ID),
            ("class=box", PartKind.CLASS),
            ("attr=lang", PartKind.ATTRIBUTE),
            ("attribute=lang", PartKind.ATTRIBUTE),
            ("pseudo-class=hover", PartKind.PSEUDO_CLASS),
            ("pseudo_class=hover", PartKind.PSEUDO_CLASS),
            ("pseudoClass=hover", PartKind.PSEUDO_CLASS),
            ("pseudo-element=after", PartKind.PSEUDO_ELEMENT),
            ("pseudoElement=after", PartKind.PSEUDO_ELEMENT),
        ],
    )
    def test_kind_names(self, token, kind):
        assert parse_part(token)[0] is kind

    def test_splits_on_first_equals(self):
        assert parse_part('attr=href$=".png"') == (PartKind.ATTRIBUTE, 'href$=".png"')

    def test_empty_value(self):
        assert parse_part("class=") == (PartKind.CLASS, "")

    def test_missing_equals(self):
        with pytest.raises(SelectorError, match="Expected kind=value"):
            parse_part("div")

    def test_unknown_kind(self):
        with pytest.raises(SelectorError, match="Unknown selector part kind"):
            parse_part("tag=div")


# ---------------------------------------------------------------------------
# compose
# ---------------------------------------------------------------------------


class TestCompose:
    def test_single_compound(self):
        sel = compose(["element=a", 'attr=href$=".png"', "pseudo-class=focus"])
        assert sel.render() == 'a[href$=".png"]:focus'

    def test_combinators_fold_left(self):
        sel = compose(["element=a", "+", "id=b", "~", "class=c"])
        assert sel.render() == "a + #b ~ .c"

    def test_descendant_token(self):
        sel = compose(["element=tr", " ", "element=td"])
        assert sel.render() == "tr   td"

    def test_worked_example(self):
        sel = compose(
            [
                "element=div", "id=main", "class=container", "class=draggable",
                "+",
                "element=table", "id=data",
                "~",
                "element=tr", "pseudo-class=nth-of-type(even)",
                " ",
                "element=td", "pseudo-class=nth-of-type(even)",
            ]
        )
        assert sel.render() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_custom_combinators(self):
        sel = compose(["element=a", "/", "element=b"], combinators=["/"])
        assert sel.render() == "a / b"

    def test_default_combinators(self):
        assert set(DEFAULT_COMBINATORS) == {" ", ">", "+", "~"}

    def test_builder_errors_propagate(self):
        with pytest.raises(DuplicateKindError):
            compose(["id=a", "id=b"])
        with pytest.raises(OutOfOrderError):
            compose(["class=a", "element=b"])

    def test_empty_tokens(self):
        with pytest.raises(SelectorError, match="No selector parts"):
            compose([])

    def test_leading_combinator(self):
        with pytest.raises(SelectorError, match="no selector on its left"):
            compose([">", "element=a"])

    def test_trailing_combinator(self):
        with pytest.raises(SelectorError, match="no selector on its right"):
            compose(["element=a", ">"])

    def test_consecutive_combinators(self):
        with pytest.raises(SelectorError, match="no selector on its left"):
            compose(["element=a", ">", "+", "element=b"])
