"""Transport-facing form of a client-deferred message.

The identifier alone is not enough for a client to build the message: the
parameters must travel with it. TranslationPayload keeps the two together
so the outbound protocol layer cannot send one without the other. Encoding
the payload into a packet is left to that layer.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["TranslationPayload"]


@dataclass(frozen=True, slots=True)
class TranslationPayload:
    """Identifier and parameters of a message the client localizes.

    Attributes:
        message: Decorated translation identifier for the target locale
        parameters: Display strings substituted by the client, in order
        needs_translation: Always True; mirrors the packet flag telling the
            client to look ``message`` up in its language resources
    """

    message: str
    parameters: tuple[str, ...] = ()
    needs_translation: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.parameters, tuple):
            object.__setattr__(self, "parameters", tuple(self.parameters))
