"""hexcalc — interactive calculator for base-tagged integers.

Literals carry their base as a prefix (d42, hFF); the last character of a
line picks the base of the result. Expressions use + - * and parentheses.

Usage:
    python -m hexcalc                        # Interactive session
    python -m hexcalc eval "d2+d3*d4 h"      # One expression → hE
    python -m hexcalc convert hFF d          # One literal → d255
"""
