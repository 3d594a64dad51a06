"""
Field-aware highlighting.

Each field of an article (title, content, author, tags) has a fixed
options profile. Caller options are laid over the profile field by field
before the call is handed to the highlighter.
"""

from dataclasses import fields
from typing import Dict, Iterable, Mapping, Optional, Union

from ..core import get_logger
from ..search import ArticleSearchResult
from .highlighter import Highlighter, OptionsLike, _default_highlighter, option_overrides
from .models import FieldType, HighlightOptions, HighlightResult

logger = get_logger(__name__)


FIELD_PROFILES: Mapping[FieldType, HighlightOptions] = {
    FieldType.TITLE: HighlightOptions(max_length=100, style_hint="emphasis", multi_color=False),
    FieldType.AUTHOR: HighlightOptions(max_length=30),
    FieldType.TAGS: HighlightOptions(max_length=15, style_hint="pill", whole_words=False),
    FieldType.CONTENT: HighlightOptions(max_length=200),
}

_DEFAULT_OPTIONS = HighlightOptions()


def resolve_field_type(field_type: Union[FieldType, str, None]) -> FieldType:
    """
    Map a field name to a FieldType, falling back to content.

    Args:
        field_type: FieldType member or its string value.

    Returns:
        The matching FieldType; CONTENT for unknown values.
    """
    if isinstance(field_type, FieldType):
        return field_type
    try:
        return FieldType(str(field_type).strip().lower())
    except ValueError:
        logger.warning(f"Unknown field type '{field_type}', using content profile")
        return FieldType.CONTENT


def get_field_profile(field_type: Union[FieldType, str, None]) -> HighlightOptions:
    """Return the fixed options profile for a field."""
    return FIELD_PROFILES[resolve_field_type(field_type)]


def merge_field_options(field_type: Union[FieldType, str, None], options: OptionsLike = None) -> HighlightOptions:
    """
    Overlay caller options on a field profile.

    Only options the caller actually set override the profile: for a
    mapping, its keys; for a HighlightOptions, the fields that differ
    from the defaults.

    Args:
        field_type: Field whose profile is the base.
        options: Caller options.

    Returns:
        Merged HighlightOptions.
    """
    profile = get_field_profile(field_type)
    if options is None:
        return profile

    if isinstance(options, HighlightOptions):
        overrides = {
            f.name: getattr(options, f.name)
            for f in fields(options)
            if getattr(options, f.name) != getattr(_DEFAULT_OPTIONS, f.name)
        }
    elif isinstance(options, Mapping):
        overrides = option_overrides(options)
    else:
        logger.warning(f"Ignoring options of type {type(options).__name__}")
        overrides = {}

    return profile.merged(**overrides)


def highlight_with_field_context(
    text: str,
    query: str,
    field_type: Union[FieldType, str],
    options: OptionsLike = None,
    highlighter: Optional[Highlighter] = None
) -> HighlightResult:
    """
    Highlight text using the defaults of the field it comes from.

    Args:
        text: Field text.
        query: Raw search query.
        field_type: title, content, author or tags. Unknown values use
            the content profile.
        options: Caller overrides applied on top of the profile.
        highlighter: Engine to use; the default limits apply if omitted.

    Returns:
        HighlightResult from the highlighter.
    """
    resolved = resolve_field_type(field_type)
    merged = merge_field_options(resolved, options)
    engine = highlighter or _default_highlighter
    return engine.highlight(text, query, merged, [resolved.value])


def highlight_article_fields(
    result: ArticleSearchResult,
    query: str,
    options: OptionsLike = None,
    highlighter: Optional[Highlighter] = None
) -> Dict[str, object]:
    """
    Highlight every displayed field of a search result.

    Args:
        result: Upstream search result.
        query: Raw search query.
        options: Caller overrides applied to every field.
        highlighter: Engine to use.

    Returns:
        Mapping with "title", "content", "author" entries holding a
        HighlightResult each, and "tags" holding a list of them.
    """
    content = result.snippet or result.content

    highlighted = {
        FieldType.TITLE.value: highlight_with_field_context(result.title, query, FieldType.TITLE, options, highlighter),
        FieldType.CONTENT.value: highlight_with_field_context(content, query, FieldType.CONTENT, options, highlighter),
        FieldType.AUTHOR.value: highlight_with_field_context(result.author, query, FieldType.AUTHOR, options, highlighter),
        FieldType.TAGS.value: [
            highlight_with_field_context(tag, query, FieldType.TAGS, options, highlighter)
            for tag in result.tags
        ],
    }
    return highlighted


def summarize_field_matches(results: Iterable[ArticleSearchResult]) -> Dict[str, int]:
    """
    Count how many results matched in each field.

    Uses the upstream ``matched_fields`` hint; unknown field names are
    ignored.

    Returns:
        Dict keyed by field name with a count for every FieldType.
    """
    counts = {field_type.value: 0 for field_type in FieldType}
    for result in results:
        for name in set(result.matched_fields or ()):
            if name in counts:
                counts[name] += 1
    return counts


if __name__ == "__main__":
    print(highlight_with_field_context("Machine Learning Guide", "machine", "title").html)
    print(highlight_with_field_context("John Doe", "john", "author").html)
    print(highlight_with_field_context("JavaScript", "script", "tags").html)
    print(highlight_with_field_context("Some text about learning", "learning", "sidebar").html)

    article = ArticleSearchResult(
        id="1",
        title="Machine Learning in Modern JavaScript Applications",
        content="This article explores the integration of machine learning algorithms "
                "into JavaScript applications using several libraries.",
        author="John Doe",
        tags=["JavaScript", "Machine Learning", "AI"],
        matched_fields=["title", "content", "tags"]
    )
    for name, value in highlight_article_fields(article, "machine learning").items():
        print(f"{name}: {value}")
    print(summarize_field_matches([article]))
