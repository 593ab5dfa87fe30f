'''
RFC5234 core rules (Appendix B.1) as byte predicates and skippers
'''
from __future__ import annotations

# python imports:
from typing import Optional as Opt, Tuple

# smtp_envelope imports:
from combinators import many, tag, take_while

HTAB = 0x09
SP = 0x20
HYPHEN = 0x2D


def is_alpha ( c: int ) -> bool:
	return 0x41 <= c <= 0x5A or 0x61 <= c <= 0x7A

def is_digit ( c: int ) -> bool:
	return 0x30 <= c <= 0x39

def is_hexdig ( c: int ) -> bool:
	# RFC5234 only lists uppercase, but hex digits are matched case-insensitively there
	return is_digit ( c ) or 0x41 <= c <= 0x46 or 0x61 <= c <= 0x66

def is_alnum ( c: int ) -> bool:
	return is_alpha ( c ) or is_digit ( c )

def is_wsp ( c: int ) -> bool:
	return c == SP or c == HTAB


def wsp ( buf: bytes, pos: int ) -> Opt[int]:
	return take_while ( buf, pos, is_wsp, 1, 1 )


def _wsp_rule ( buf: bytes, pos: int ) -> Opt[Tuple[int,None]]:
	end = wsp ( buf, pos )
	if end is None:
		return None
	return end, None


def wsps ( buf: bytes, pos: int ) -> Opt[int]:
	# 1*WSP
	r = many ( buf, pos, _wsp_rule, 1 )
	if r is None:
		return None
	return r[0]


def crlf ( buf: bytes, pos: int ) -> Opt[int]:
	return tag ( buf, pos, b'\r\n' )
