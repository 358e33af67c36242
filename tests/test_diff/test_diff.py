"""Tests for the structural token diff."""

from tokencss.diff import diff_style_tokens
from tokencss.model import StyleDiff, StyleToken


def _token(contents: dict) -> StyleToken:
    return StyleToken(id="t", name="T", state=0, contents=contents)


BASE = _token(
    {
        "default": {
            "default": {"color": "black", "margin": "0px", "padding": "4px"},
            "hover": {"color": "blue"},
        },
        "md": {"default": {"font-size": "14px"}},
    }
)


class TestDiffStyleTokens:
    def test_identical_tokens_diff_empty(self):
        result = diff_style_tokens(BASE, BASE)
        assert isinstance(result, StyleDiff)
        assert result.is_empty
        for section in (result.added, result.removed, result.changed):
            assert section == {
                "default": {"default": {}, "hover": {}},
                "md": {"default": {}},
            }

    def test_classifies_properties(self):
        compare = _token(
            {
                "default": {
                    "default": {"color": "red", "margin": "0px", "border": "none"},
                    "hover": {"color": "blue"},
                },
                "md": {"default": {"font-size": "14px"}},
            }
        )
        result = diff_style_tokens(BASE, compare)
        assert result.added["default"]["default"] == {"border": "none"}
        assert result.removed["default"]["default"] == {"padding": "4px"}
        assert result.changed["default"]["default"] == {"color": {"from": "black", "to": "red"}}
        assert result.changed["default"]["hover"] == {}

    def test_missing_address_in_compare_is_removed(self):
        compare = _token({"default": {"default": {"color": "black", "margin": "0px", "padding": "4px"}}})
        result = diff_style_tokens(BASE, compare)
        assert result.removed["default"]["hover"] == {"color": "blue"}
        assert result.removed["md"]["default"] == {"font-size": "14px"}

    def test_values_compared_as_strings(self):
        compare = _token({"default": {"default": {"color": "black", "margin": "0", "padding": "4px"}}})
        result = diff_style_tokens(BASE, compare)
        assert result.changed["default"]["default"] == {"margin": {"from": "0px", "to": "0"}}

    def test_compare_only_breakpoint_invisible_by_default(self):
        compare = _token(
            {
                "default": {
                    "default": {"color": "black", "margin": "0px", "padding": "4px"},
                    "hover": {"color": "blue"},
                    "focus": {"outline": "none"},
                },
                "md": {"default": {"font-size": "14px"}},
                "xs": {"default": {"display": "none"}},
            }
        )
        result = diff_style_tokens(BASE, compare)
        assert result.is_empty
        assert "xs" not in result.added
        assert "focus" not in result.added["default"]

    def test_compare_only_addresses_reported_when_requested(self):
        compare = _token(
            {
                "default": {"focus": {"outline": "none"}},
                "xs": {"default": {"display": "none"}},
            }
        )
        result = diff_style_tokens(BASE, compare, include_compare_only=True)
        assert result.added["xs"]["default"] == {"display": "none"}
        assert result.added["default"]["focus"] == {"outline": "none"}
        assert result.removed["xs"]["default"] == {}

    def test_accepts_mappings(self):
        base = {"id": "a", "name": "a", "contents": {"default": {"default": {"color": "red"}}}}
        compare = {"id": "b", "name": "b", "contents": {"default": {"default": {"color": "blue"}}}}
        result = diff_style_tokens(base, compare)
        assert result.to_dict() == {
            "added": {"default": {"default": {}}},
            "removed": {"default": {"default": {}}},
            "changed": {"default": {"default": {"color": {"from": "red", "to": "blue"}}}},
        }

    def test_inputs_not_mutated(self):
        before = BASE.to_dict()
        diff_style_tokens(BASE, _token({}))
        assert BASE.to_dict() == before
