# chelper

These are the core building blocks of a command helper for Minecraft Bedrock
Edition. They cover the parse tree of a command and the queries run on it: a
description of the part under the cursor, error reasons, completion
suggestions, a structure hint such as `<target> [amount]`, and a colour for
each character.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `chelper.kmp_matcher.KMPMatcher` finds a pattern in text. `match(text)`
  returns the index of the first occurrence, or `-1` when there is none. An
  empty pattern matches at `0`.
- `chelper.profile.Profile` keeps a stack of step messages through `push`,
  `next`, `pop` and `clear`. `stack_trace()` joins the messages with
  newlines. `print_and_clear(error)` logs the error together with that trace,
  empties the stack and returns the logged message.
- `chelper.theme` holds `Theme`, a frozen dataclass of ARGB colours, one for
  each kind of element. It also holds `NO_COLOR`.
- `chelper.error_reason` holds `ErrorReasonLevel` and `ErrorReason`. The
  levels, from least to most severe, are `REQUIRE_WHITE_SPACE`, `INCOMPLETE`,
  `CONTENT_ERROR` and `ID_ERROR`. An `ErrorReason` covers the range
  `[start, end)`. Two reasons are equal when their range and text are equal;
  the level plays no part. The constructors are `incomplete`,
  `content_error`, `id_error`, `require_whitespace` and `for_tokens`.
- `chelper.structure_builder.StructureBuilder` builds structure hints.
  `append_param(is_must_have, text)` writes `<text>` for a required
  parameter and `[text]` for an optional one, with a space in front unless
  the hint is still empty. `build()` returns the text and resets it.
- `chelper.colored_string.ColoredString` is a text with one colour per
  character. It is set through `set_color`, `set_range_color` and
  `set_tokens_color`. An index out of range raises `IndexError`. A range with
  `start > end` raises `ValueError`.
- `chelper.json_util` has two functions. `string_to_json_string` puts a
  backslash before every character that JSON escapes.
  `json_string_to_string` decodes a literal that begins with its opening
  quote and returns a `ConvertResult`. That result holds the decoded text,
  whether the closing quote was found, an optional `ErrorReason`, and a map
  from decoded positions back to input positions (`convert(index)`).
- `chelper.ids` is the identifier catalogue: `NormalId`, `NamespaceId` (see
  `id_with_namespace()`, default namespace `minecraft`), `ItemId` (see
  `data_values()`), `BlockId`, `BlockIds`, `Property`, `PropertyType` and the
  block property descriptions.
  `BlockPropertyDescriptions.get_property_description` tries block-specific
  entries first and then the common ones. When neither has the property it
  raises `LookupError`.
- `chelper.tokens_view` holds `Token`, `TokenType`, `LexerResult` and
  `TokensView`. A `TokensView` is a view over tokens `[start, end)` and
  caches the text range they cover.
- `chelper.suggestion` holds `Suggestion`, `SuggestionsType`, `Suggestions`
  and `merge_suggestions`. `merge_suggestions` removes duplicate suggestions
  and duplicate groups, then orders the groups as whitespace, symbol,
  literal, id. `Suggestion.apply(core, before)` returns the new text and
  cursor. When the suggestion reaches the end of the text, it calls
  `core.on_text_changed(text, cursor)` and reads `core.ast_node`.
- `chelper.ast_node` holds `ASTNode`, `ASTNodeMode` and `ASTNodeId`. Build a
  tree with `simple_node`, `and_node` and `or_node`. Query it with
  `get_description`, `get_error_reasons`, `get_id_errors`, `get_suggestions`,
  `get_structure` and `get_colors`. `get_colors` colours matching `[`/`{`
  brackets by nesting depth, using the three bracket colours of the theme.

## Example

```python
from chelper.kmp_matcher import KMPMatcher
from chelper.structure_builder import StructureBuilder

assert KMPMatcher("@").match("a@b") == 1
assert KMPMatcher("aa").match("ababa") == -1

builder = StructureBuilder()
builder.append("give")
builder.append_param(True, "target")
builder.append_param(False, "amount")
print(builder.build())  # give <target> [amount]
```

## What this package does not do

It has no lexer, no grammar and no resource-pack loading. It cannot turn a
command string into an `ASTNode` by itself.

The grammar nodes an `ASTNode` refers to must be supplied by the caller. Each
node is any object that offers `brief`, `next_nodes`, `collect_description`,
`collect_id_error`, `collect_suggestions`, `collect_structure`,
`collect_structure_with_next_nodes` and `collect_color`. A node marks the
end of a line with a true `is_lf` attribute. `Suggestion.apply` likewise
expects a caller-supplied core object.

There is no command-line program and no graphical interface.