"""Quickstart example for message_format.

This example demonstrates parsing ICU-style templates and rendering them
with typed arguments.

Note: Examples print rendered output directly. In production, catch
MessageFormatError around render calls and log/report the failure.
"""

import io

from message_format import (
    CldrPluralClassifier,
    Context,
    MissingArgumentError,
    ParseError,
    TypeMismatchError,
    arg,
    parse,
    serialize,
)

# Example 1: Simple message
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)

message = parse("Hello, World!")
print(message.render_to_string())
# Output: Hello, World!

# Example 2: Variables
print("\n" + "=" * 50)
print("Example 2: Variable Interpolation")
print("=" * 50)

message = parse("{name} went to {place}.")
args = arg("name", "Hendrik").arg("place", "Berlin")
print(message.render_to_string(args=args))
# Output: Hendrik went to Berlin.

print(sorted(message.variables()))
# Output: ['name', 'place']

# Example 3: Plurals (English)
print("\n" + "=" * 50)
print("Example 3: Plural Forms (English)")
print("=" * 50)

message = parse("You have {count, plural, =0 {no emails} one {one email} other {# emails}}.")
for count in (0, 1, 5):
    print(message.render_to_string(args=arg("count", count)))
# Output:
# You have no emails.
# You have one email.
# You have 5 emails.

# Example 4: Plural offset
print("\n" + "=" * 50)
print("Example 4: Plural Offset")
print("=" * 50)

message = parse(
    "{host} invites {guests, plural, offset:1 "
    "one {{guest} and # other} other {{guest} and # others}}."
)
for guests in (2, 4):
    args = arg("host", "Ana").arg("guest", "Ben").arg("guests", guests)
    print(message.render_to_string(args=args))
# Output:
# Ana invites Ben and 1 other.
# Ana invites Ben and 3 others.

# Example 5: Select
print("\n" + "=" * 50)
print("Example 5: Select")
print("=" * 50)

message = parse("{gender, select, female {She} male {He} other {They}} replied.")
for gender in ("female", "male", "robot"):
    print(message.render_to_string(args=arg("gender", gender)))
# Output:
# She replied.
# He replied.
# They replied.

# Example 6: CLDR plural rules (Polish)
print("\n" + "=" * 50)
print("Example 6: CLDR Plural Rules (Polish)")
print("=" * 50)

message = parse(
    "{n, plural, one {# plik} few {# pliki} many {# plików} other {# pliku}}",
    classifier=CldrPluralClassifier("pl"),
)
for n in (1, 3, 5, 22):
    print(message.render_to_string(Context("pl"), arg("n", n)))
# Output:
# 1 plik
# 3 pliki
# 5 plików
# 22 pliki

# Example 7: Rendering into a stream
print("\n" + "=" * 50)
print("Example 7: Rendering Into a Stream")
print("=" * 50)

output = io.StringIO()
output.write("log: ")
parse("{user} logged in").render(Context(), output, arg("user", "root"))
print(output.getvalue())
# Output: log: root logged in

# Example 8: Canonical serialization
print("\n" + "=" * 50)
print("Example 8: Canonical Serialization")
print("=" * 50)

message = parse("{ n ,plural,other{# items}  one {# item}\n =0{none} }")
print(serialize(message))
# Output: {n, plural, =0 {none} one {# item} other {# items}}

# Example 9: Error handling
print("\n" + "=" * 50)
print("Example 9: Error Handling")
print("=" * 50)

try:
    parse("Hello {name")
except ParseError as e:
    print(e.format_with_context())

try:
    parse("Hello {name}").render_to_string()
except MissingArgumentError as e:
    print(f"missing: {e.variable_name}")
# Output: missing: name

try:
    parse("{n, plural, other {#}}").render_to_string(args=arg("n", "ten"))
except TypeMismatchError as e:
    print(f"{e.variable_name}: expected {e.expected}, got {e.received}")
# Output: n: expected Number, got Str

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed!")
print("=" * 50)
