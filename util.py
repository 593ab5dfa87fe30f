from typing import Union

BYTES = Union[bytes,bytearray,memoryview]
bytes_types = ( bytes, bytearray, memoryview )

def b2s ( b: BYTES, encoding: str = 'us-ascii', errors: str = 'strict' ) -> str:
	return bytes ( b ).decode ( encoding, errors )

def s2b ( s: str, encoding: str = 'us-ascii', errors: str = 'strict' ) -> bytes:
	return s.encode ( encoding, errors )

def ascii_slice ( buf: bytes, start: int, end: int ) -> str:
	# callers pass ranges a classifier already limited to ASCII
	return b2s ( buf[start:end] )
