"""Permitted character set for source code validation.

The base set is the basic source character set: HT, LF, CR and the printable
ASCII range 0x20-0x7E without ``$``, ``@`` and backtick. Four independent
switches widen or narrow it.
"""

from dataclasses import dataclass, field
from typing import Tuple

# Byte values 0..126 are covered by the permission table; 127 and above are
# always rejected.
MAX_VALID_CHAR = 126
TABLE_SIZE = MAX_VALID_CHAR + 1

PRINTABLE_START = 0x20

CHAR_CODE_HT = 0x09
CHAR_CODE_LF = 0x0A
CHAR_CODE_VT = 0x0B
CHAR_CODE_FF = 0x0C
CHAR_CODE_CR = 0x0D
CHAR_CODE_DOLLAR = 0x24
CHAR_CODE_AT = 0x40
CHAR_CODE_BACKTICK = 0x60

# Printable ASCII outside the basic source character set
EXTENDED_PRINTABLE = (CHAR_CODE_DOLLAR, CHAR_CODE_AT, CHAR_CODE_BACKTICK)

# EOL bytes are handled by the EOL checker, never by the policy
STRUCTURAL_CHARS = (CHAR_CODE_LF, CHAR_CODE_CR)


def _build_table(
    allow_form_feed: bool,
    allow_vertical_tab: bool,
    allow_all_printable_ascii: bool,
    forbid_horizontal_tab: bool,
) -> Tuple[bool, ...]:
    table = [False] * TABLE_SIZE
    for code in range(PRINTABLE_START, TABLE_SIZE):
        table[code] = True
    for code in STRUCTURAL_CHARS:
        table[code] = True

    table[CHAR_CODE_HT] = not forbid_horizontal_tab
    table[CHAR_CODE_VT] = allow_vertical_tab
    table[CHAR_CODE_FF] = allow_form_feed
    for code in EXTENDED_PRINTABLE:
        table[code] = allow_all_printable_ascii

    return tuple(table)


@dataclass(frozen=True)
class CharacterPolicy:
    """Immutable description of which byte values are permitted.

    Attributes:
        allow_form_feed: Permit FF (0x0C)
        allow_vertical_tab: Permit VT (0x0B)
        allow_all_printable_ascii: Permit ``$``, ``@`` and backtick
        forbid_horizontal_tab: Reject HT (0x09)
    """

    allow_form_feed: bool = False
    allow_vertical_tab: bool = False
    allow_all_printable_ascii: bool = False
    forbid_horizontal_tab: bool = False
    table: Tuple[bool, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "table",
            _build_table(
                self.allow_form_feed,
                self.allow_vertical_tab,
                self.allow_all_printable_ascii,
                self.forbid_horizontal_tab,
            ),
        )

    def is_allowed(self, byte: int) -> bool:
        """Check whether ``byte`` is permitted by this policy.

        LF and CR are always permitted, as line terminators are validated
        separately.
        """
        if byte > MAX_VALID_CHAR or byte < 0:
            return False
        return self.table[byte]

    def allowed_bytes(self) -> bytes:
        """All permitted byte values in ascending order."""
        return bytes(code for code in range(TABLE_SIZE) if self.table[code])
