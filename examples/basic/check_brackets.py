"""Locate and validate brackets in a few lines, zero config."""

from pairbrackets import get_bracket_pair_positions, validate_brackets

source = "print(items[0], {'k': (1, 2)})"
for start, end in get_bracket_pair_positions(source):
    print(start, end, source[start : end + 1])
print(validate_brackets(source))
