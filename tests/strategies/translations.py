"""Hypothesis strategies for translation templates and their arguments.

Literal pattern text is drawn from an alphabet without ``%`` or ``<`` so the
only markers and tags in a generated pattern are the ones placed on purpose.

Events emitted:
    - tr_params={0|1|few|many}: Parameter count classification
    - tr_wrap={identity|coloured}: Wrap format kind
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from chatlex import Translation, translate

_LITERAL_ALPHABET = st.characters(
    categories=("L", "N", "Zs"),
    exclude_characters="%<>§",
)

literal_text = st.text(_LITERAL_ALPHABET, max_size=12)

translation_keys = st.from_regex(r"%[a-z]{1,10}(\.[a-zA-Z]{1,10}){0,3}", fullmatch=True)

_colour_tags = st.sampled_from(["yellow", "red", "gold", "bold", "italic", "dark-aqua"])


@st.composite
def fallback_patterns(draw: st.DrawFn, params: int) -> str:
    """Generate a fallback pattern holding exactly ``params`` markers."""
    pieces = [draw(literal_text)]
    for _ in range(params):
        pieces.append("%v")
        pieces.append(draw(literal_text))
    return "".join(pieces)


@st.composite
def wrap_formats(draw: st.DrawFn) -> str:
    """Generate a wrap format with one marker, optionally coloured."""
    if draw(st.booleans()):
        event("tr_wrap=identity")
        return "%v"
    tag = draw(_colour_tags)
    event("tr_wrap=coloured")
    return f"{draw(literal_text)}<{tag}>%v</{tag}>{draw(literal_text)}"


@st.composite
def translations_with_args(
    draw: st.DrawFn, max_params: int = 5
) -> tuple[Translation, tuple[object, ...]]:
    """Generate a Translation together with a matching argument tuple."""
    params = draw(st.integers(min_value=0, max_value=max_params))
    match params:
        case 0:
            event("tr_params=0")
        case 1:
            event("tr_params=1")
        case n if n <= 3:
            event("tr_params=few")
        case _:
            event("tr_params=many")
    translation = translate(
        draw(translation_keys), params, draw(fallback_patterns(params))
    ).enc(draw(wrap_formats()))
    args = tuple(
        draw(
            st.lists(
                st.one_of(st.text(max_size=20), st.integers(), st.floats(allow_nan=False)),
                min_size=params,
                max_size=params,
            )
        )
    )
    return translation, args
