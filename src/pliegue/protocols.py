"""Protocols for Pliegue.

Defines the single capability external trees need to take part in
layout: conversion into a document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pliegue.nodes import Doc


@runtime_checkable
class ToDoc(Protocol):
    """Protocol for values that can be laid out by the renderer.

    Any AST node (CSS rules, JSON values, source code, markup) that
    implements ``to_doc`` can be passed to ``fold`` or ``Printer``.

    Thread Safety:
        Implementations should be pure: build and return a new document,
        never cache a mutable one.

    """

    def to_doc(self) -> Doc:
        """Convert this value into a document."""
        ...
