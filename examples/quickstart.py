"""Quickstart example for chatlex.

Shows the two renderings of a filled translation: the identifier and
parameters a client localizes itself, and the locally substituted fallback
used for console output, logs and errors.
"""

import logging

from chatlex import LocaleTableString, ParameterCountError, RenderConfig, translate
from chatlex.markup import strip_markup
from chatlex.messages import MESSAGE_COMMAND_UNKNOWN, MESSAGE_JOIN

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("quickstart")

# Example 1: Client-deferred rendering
print("=" * 50)
print("Example 1: Identifier + Parameters")
print("=" * 50)

message = MESSAGE_JOIN.fill("Steve")
payload = message.payload("de_DE")
print(payload.message, payload.parameters)
# Output: §e%multiplayer.player.joined§r ('Steve',)

# Example 2: Server-local fallback
print("\n" + "=" * 50)
print("Example 2: Fallback Rendering")
print("=" * 50)

print(str(message))
# Output: §eSteve joined the game§r
print(message.render_fallback(RenderConfig(colour=False)))
# Output: Steve joined the game

# Example 3: Translations as error values
print("\n" + "=" * 50)
print("Example 3: Error Values")
print("=" * 50)

try:
    raise MESSAGE_COMMAND_UNKNOWN.fill("fly").as_error()
except Exception as e:
    logger.info("Command failed: %s", strip_markup(str(e)))

# Example 4: Locale-dependent identifiers
print("\n" + "=" * 50)
print("Example 4: Locale Table Resolver")
print("=" * 50)

welcome = translate(
    LocaleTableString(
        {"en": "%custom.welcome", "de": "%custom.willkommen"}, default="%custom.welcome"
    ),
    1,
    "Welcome, %v!",
).enc("<gold>%v</gold>")
print(welcome.fill("Alex").resolve("de-AT"))
# Output: §6%custom.willkommen§r

# Example 5: Wrong argument count is a defect
print("\n" + "=" * 50)
print("Example 5: Parameter Count Check")
print("=" * 50)

try:
    MESSAGE_JOIN.fill("Steve", "Alex")
except ParameterCountError as e:
    print(e.diagnostic.format_error() if e.diagnostic else e)
