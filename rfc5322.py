'''
The small slice of RFC5322 (section 3.2.3) that SMTP envelope syntax borrows:
atext and unfolded atoms
'''
from __future__ import annotations

# python imports:
from typing import Optional as Opt, Tuple

# smtp_envelope imports:
from combinators import take_while
from rfc5234 import is_alnum
from util import ascii_slice

_atext_specials = frozenset ( b"!#$%&'*+-/=?^_`{|}~" )


def is_atext ( c: int ) -> bool:
	return is_alnum ( c ) or c in _atext_specials


def atom ( buf: bytes, pos: int ) -> Opt[Tuple[int,str]]:
	# 1*atext, SMTP never allows the CFWS that RFC5322 wraps around it
	end = take_while ( buf, pos, is_atext, 1 )
	if end is None:
		return None
	return end, ascii_slice ( buf, pos, end )
