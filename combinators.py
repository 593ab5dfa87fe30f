'''
Position-tracking matchers over an immutable byte buffer.

Every rule has the shape rule ( buf, pos ) and returns None when it does not
match, or ( end, value ) when it does. A rule never mutates buf and never
raises for a non-match, so alternation is just "try the next rule with the
same pos". Skippers are rules with no value: they return the end position
or None.
'''
from __future__ import annotations

# python imports:
from typing import Callable, List, Optional as Opt, Tuple, TypeVar

T = TypeVar ( 'T' )

Predicate = Callable[[int],bool]
Skipper = Callable[[bytes,int],Opt[int]]
Rule = Callable[[bytes,int],Opt[Tuple[int,T]]]


def tag ( buf: bytes, pos: int, lit: bytes ) -> Opt[int]:
	end = pos + len ( lit )
	if buf[pos:end] == lit:
		return end
	return None


def tag_no_case ( buf: bytes, pos: int, lit: bytes ) -> Opt[int]:
	# ASCII-only case folding, bytes.lower() never touches 0x80..0xFF
	end = pos + len ( lit )
	if buf[pos:end].lower() == lit.lower():
		return end
	return None


def take_while ( buf: bytes, pos: int, pred: Predicate, lo: int = 0, hi: Opt[int] = None ) -> Opt[int]:
	'''
	longest run of bytes satisfying pred, at least lo and at most hi of them
	'''
	limit = len ( buf ) if hi is None else min ( len ( buf ), pos + hi )
	end = pos
	while end < limit and pred ( buf[end] ):
		end += 1
	if end - pos < lo:
		return None
	return end


def alt ( buf: bytes, pos: int, *rules: Rule[T] ) -> Opt[Tuple[int,T]]:
	for rule in rules:
		r = rule ( buf, pos )
		if r is not None:
			return r
	return None


def opt ( buf: bytes, pos: int, rule: Rule[T] ) -> Tuple[int,Opt[T]]:
	r = rule ( buf, pos )
	if r is None:
		return pos, None
	return r


def many ( buf: bytes, pos: int, rule: Rule[T], lo: int = 0 ) -> Opt[Tuple[int,List[T]]]:
	values: List[T] = []
	while ( r := rule ( buf, pos ) ) is not None:
		end, value = r
		values.append ( value )
		if end == pos: # an empty match would repeat forever
			break
		pos = end
	if len ( values ) < lo:
		return None
	return pos, values


def separated ( buf: bytes, pos: int, rule: Rule[T], sep: Skipper ) -> Opt[Tuple[int,List[T]]]:
	'''
	one or more rule matches joined by sep

	a trailing separator that is not followed by another match is left
	unconsumed
	'''
	r = rule ( buf, pos )
	if r is None:
		return None
	pos, value = r
	values = [ value ]
	while ( after := sep ( buf, pos ) ) is not None:
		r = rule ( buf, after )
		if r is None:
			break
		pos, value = r
		values.append ( value )
	return pos, values


def exact ( rule: Rule[T], buf: bytes ) -> Opt[T]:
	'''
	run rule at the start of buf, a match that leaves input behind is no match
	'''
	r = rule ( buf, 0 )
	if r is None:
		return None
	end, value = r
	if end != len ( buf ):
		return None
	return value
