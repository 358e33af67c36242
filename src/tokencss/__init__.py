"""tokencss -- breakpoint- and pseudo-state-aware style tokens <-> CSS."""

from tokencss.batch import batch_process_tokens
from tokencss.cache import (
    AstCache,
    clear_ast_cache,
    invalidate_ast_cache,
    memoized_style_token_to_ast,
)
from tokencss.codec import (
    breakpoint_to_media_query,
    extract_pseudo_state,
    media_query_to_breakpoint,
)
from tokencss.computed import (
    compute_inherited_styles,
    computed_token_to_css,
    extract_properties_from_computed_token,
    merge_tokens_union,
)
from tokencss.diff import diff_style_tokens
from tokencss.errors import ParseError, ShapeError, TokenCssError
from tokencss.model import BREAKPOINTS, PSEUDO_STATES, StyleDiff, StyleToken
from tokencss.projector import (
    ast_to_css,
    ast_to_style_token,
    css_to_ast,
    css_to_style_token,
    style_token_to_ast,
    style_token_to_css,
)
from tokencss.properties import (
    ExtractedProperty,
    extract_properties_from_ast,
    extract_properties_from_css,
    update_property_in_ast,
    update_property_in_style_token,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # errors
    "TokenCssError",
    "ShapeError",
    "ParseError",
    # model
    "BREAKPOINTS",
    "PSEUDO_STATES",
    "StyleToken",
    "StyleDiff",
    # codec
    "breakpoint_to_media_query",
    "media_query_to_breakpoint",
    "extract_pseudo_state",
    # projector
    "style_token_to_ast",
    "ast_to_style_token",
    "css_to_ast",
    "ast_to_css",
    "style_token_to_css",
    "css_to_style_token",
    # merge
    "compute_inherited_styles",
    "merge_tokens_union",
    "computed_token_to_css",
    "extract_properties_from_computed_token",
    # properties
    "ExtractedProperty",
    "extract_properties_from_ast",
    "extract_properties_from_css",
    "update_property_in_ast",
    "update_property_in_style_token",
    # diff
    "diff_style_tokens",
    # cache / batch
    "AstCache",
    "memoized_style_token_to_ast",
    "clear_ast_cache",
    "invalidate_ast_cache",
    "batch_process_tokens",
]
