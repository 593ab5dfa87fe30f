# python imports:
import logging
from pathlib import Path
import sys
from typing import Optional as Opt, Tuple
import unittest

if __name__ == '__main__': # pragma: no cover
	sys.path.append ( str ( Path ( __file__ ).parent.parent.absolute() ) )

# smtp_envelope imports:
from combinators import alt, exact, many, opt, separated, tag, tag_no_case, take_while

logger = logging.getLogger ( __name__ )


def digits ( buf: bytes, pos: int ) -> Opt[Tuple[int,int]]:
	end = take_while ( buf, pos, lambda c: 0x30 <= c <= 0x39, 1 )
	if end is None:
		return None
	return end, int ( buf[pos:end] )

def letters ( buf: bytes, pos: int ) -> Opt[Tuple[int,str]]:
	end = take_while ( buf, pos, lambda c: 0x61 <= c <= 0x7A, 1 )
	if end is None:
		return None
	return end, buf[pos:end].decode()

def nothing ( buf: bytes, pos: int ) -> Opt[Tuple[int,None]]:
	return pos, None

def comma ( buf: bytes, pos: int ) -> Opt[int]:
	return tag ( buf, pos, b',' )


class Tests ( unittest.TestCase ):
	def test_primitives ( self ) -> None:
		test = self
		
		test.assertEqual ( tag ( b'MAIL FROM:', 0, b'MAIL' ), 4 )
		test.assertEqual ( tag ( b'MAIL FROM:', 5, b'FROM:' ), 10 )
		test.assertIsNone ( tag ( b'mail', 0, b'MAIL' ) )
		test.assertIsNone ( tag ( b'MAI', 0, b'MAIL' ) )
		
		test.assertEqual ( tag_no_case ( b'mAiL', 0, b'MAIL' ), 4 )
		test.assertIsNone ( tag_no_case ( b'MA', 0, b'MAIL' ) )
		test.assertIsNone ( tag_no_case ( b'\xc1', 0, b'\xe1' ) ) # no folding outside ASCII
		
		isdigit = lambda c: 0x30 <= c <= 0x39
		test.assertEqual ( take_while ( b'123abc', 0, isdigit ), 3 )
		test.assertEqual ( take_while ( b'abc', 0, isdigit ), 0 )
		test.assertIsNone ( take_while ( b'abc', 0, isdigit, 1 ) )
		test.assertEqual ( take_while ( b'12345', 0, isdigit, 1, 3 ), 3 )
		test.assertEqual ( take_while ( b'12345', 3, isdigit, 1, 3 ), 5 )
		test.assertIsNone ( take_while ( b'12345', 5, isdigit, 1, 3 ) )
		test.assertEqual ( take_while ( b'', 0, isdigit ), 0 )
	
	def test_composition ( self ) -> None:
		test = self
		
		test.assertEqual ( alt ( b'abc', 0, digits, letters ), ( 3, 'abc' ) )
		test.assertEqual ( alt ( b'42', 0, digits, letters ), ( 2, 42 ) )
		test.assertIsNone ( alt ( b'!', 0, digits, letters ) )
		test.assertIsNone ( alt ( b'!', 0 ) )
		
		test.assertEqual ( opt ( b'abc', 0, digits ), ( 0, None ) )
		test.assertEqual ( opt ( b'7abc', 0, digits ), ( 1, 7 ) )
		
		test.assertEqual ( many ( b'', 0, letters ), ( 0, [] ) )
		test.assertIsNone ( many ( b'', 0, letters, 1 ) )
		test.assertEqual ( many ( b'12', 0, lambda buf, pos: alt ( buf, pos, digits, letters ) ), ( 2, [ 12 ] ) )
		test.assertEqual ( many ( b'x', 0, nothing ), ( 0, [ None ] ) ) # stops instead of looping
		
		test.assertEqual ( separated ( b'1,22,333', 0, digits, comma ), ( 8, [ 1, 22, 333 ] ) )
		test.assertEqual ( separated ( b'1,22,', 0, digits, comma ), ( 4, [ 1, 22 ] ) )
		test.assertEqual ( separated ( b'1', 0, digits, comma ), ( 1, [ 1 ] ) )
		test.assertIsNone ( separated ( b',1', 0, digits, comma ) )
		
		test.assertEqual ( exact ( digits, b'123' ), 123 )
		test.assertIsNone ( exact ( digits, b'123 ' ) )
		test.assertIsNone ( exact ( digits, b'' ) )
		test.assertIsNone ( exact ( nothing, b'x' ) )

if __name__ == '__main__':
	logging.basicConfig ( level = logging.DEBUG )
	unittest.main()
