"""Memoization of token-to-AST projection."""

from __future__ import annotations

import json
import logging
import threading

from tokencss.cssast import StyleSheet, clone
from tokencss.model.token import StyleToken, as_token
from tokencss.projector import style_token_to_ast

__all__ = [
    "AstCache",
    "memoized_style_token_to_ast",
    "clear_ast_cache",
    "invalidate_ast_cache",
]

log = logging.getLogger(__name__)


class AstCache:
    """Thread-safe map from cache key to AST.

    Stored ASTs are private: :meth:`put` stores a copy and :meth:`get`
    returns a fresh copy, so callers may mutate what they receive.
    Entries are never evicted; the module-level cache grows until
    :func:`clear_ast_cache` or :func:`invalidate_ast_cache` is called.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, StyleSheet] = {}

    def get(self, key: str) -> StyleSheet | None:
        """Return a copy of the cached AST for *key*, or None."""
        with self._lock:
            ast = self._entries.get(key)
            return clone(ast) if ast is not None else None

    def put(self, key: str, ast: StyleSheet) -> None:
        """Store a copy of *ast* under *key*."""
        copied = clone(ast)
        with self._lock:
            self._entries[key] = copied

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def invalidate(self, key: str | None = None) -> None:
        """Drop *key*, or everything when no key is given."""
        with self._lock:
            if key:
                self._entries.pop(key, None)
            else:
                self._entries.clear()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        with self._lock:
            return f"AstCache(entries={len(self._entries)})"


_default_cache = AstCache()


def cache_key_for(token: StyleToken, selector: str) -> str:
    """Build the default cache key from the selector and token JSON."""
    return f"{selector}:{json.dumps(token.to_dict(), separators=(',', ':'))}"


def memoized_style_token_to_ast(
    token: StyleToken | dict,
    selector: str = ".token",
    cache_key: str | None = None,
    cache: AstCache | None = None,
) -> StyleSheet:
    """Like :func:`style_token_to_ast`, but served from *cache* when possible."""
    cache = cache if cache is not None else _default_cache
    token = as_token(token)
    key = cache_key or cache_key_for(token, selector)

    cached = cache.get(key)
    if cached is not None:
        log.debug("AST cache hit for %s", token.id)
        return cached

    log.debug("AST cache miss for %s", token.id)
    ast = style_token_to_ast(token, selector)
    cache.put(key, ast)
    return ast


def clear_ast_cache() -> None:
    """Empty the module-level cache."""
    _default_cache.clear()


def invalidate_ast_cache(cache_key: str | None = None) -> None:
    """Drop one key from the module-level cache, or all keys."""
    _default_cache.invalidate(cache_key)
