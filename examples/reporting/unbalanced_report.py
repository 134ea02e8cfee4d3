"""Report where a text is unbalanced, with line:col positions."""

from pairbrackets import scan_brackets

source = "def f(x:\n    return [x, (x + 1]\n"
result = scan_brackets(source)

for loc in result.unmatched_locations(source):
    print(f"{loc}: unmatched {source[loc.offset]!r}")
for loc in result.unclosed_locations(source):
    print(f"{loc}: unclosed {source[loc.offset]!r}")
