"""SettingsHolder: a class whose attributes declare properties.

Usage::

    class TitleSettings(SettingsHolder, section="title"):
        description = ("Settings for the page title",)

        text = StringProperty("Test", comments=["Text shown as title"])
        size = IntegerProperty(12)

        def register_comments(self, comments: CommentsConfiguration) -> None:
            comments.set_comment("title", "Title section")

Properties declared without a path get ``<section>.<attribute name>``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from typedconf.resource.nodes import PATH_SEPARATOR


class CommentsConfiguration:
    """Comment lines keyed by dotted path, in registration order."""

    def __init__(self) -> None:
        self._comments: dict[str, tuple[str, ...]] = {}

    def set_comment(self, path: str, *lines: str) -> None:
        """Set the comment lines shown above *path* (replaces earlier ones)."""
        self._comments[path] = tuple(lines)

    def get_comment(self, path: str) -> tuple[str, ...]:
        return self._comments.get(path, ())

    @property
    def all_comments(self) -> dict[str, tuple[str, ...]]:
        return dict(self._comments)


class SettingsHolder:
    """Base class for property declarations.

    Subclasses may pass ``section=`` to prefix the paths of properties that
    do not declare one. Holders must be constructible without arguments so
    that :meth:`register_comments` can run.
    """

    section: ClassVar[str] = ""
    description: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, section: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if section is not None:
            cls.section = section

    def register_comments(self, comments: CommentsConfiguration) -> None:
        """Hook for comments on parent paths (sections without a property)."""

    @classmethod
    def path_for(cls, attribute: str) -> str:
        """Default path for a property stored under *attribute*."""
        if cls.section:
            return f"{cls.section}{PATH_SEPARATOR}{attribute}"
        return attribute
